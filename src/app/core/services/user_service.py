"""User service: validate-then-persist workflows over a single User."""
import datetime
import logging
from typing import TypeVar

from src.app.core.domain.models import GetAllUsersOptions, PagedResult, User
from src.app.core.domain.repositories import UserRepositoryBase
from src.app.core.validators.options_validator import GetAllUsersOptionsValidator
from src.app.core.validators.user_validator import UserValidator
from src.shared.exceptions import ValidationError
from src.shared.result import Err, Ok, Result
from src.shared.validation.rules import BaseValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserService:
    """
    Service for handling User business logic.

    Stateless: safe to share across concurrent requests as long as the
    repository is. Validation failures are returned as Err values, never raised.
    """

    def __init__(
        self,
        repository: UserRepositoryBase,
        user_validator: UserValidator,
        options_validator: GetAllUsersOptionsValidator,
    ):
        """
        Initialize the user service.

        Args:
            repository: Persistence for User records
            user_validator: Rules applied before create and update
            options_validator: Rules applied to paging options before listing
        """
        self.repository = repository
        self.user_validator = user_validator
        self.options_validator = options_validator

    async def _check(self, validator: BaseValidator[T], instance: T) -> Err | None:
        failures = await validator.validate(instance)
        if not failures:
            return None
        logger.info(
            "Rejected %s: %s",
            type(instance).__name__,
            ", ".join(f"{f.property_name}={f.message!r}" for f in failures),
        )
        return Err(ValidationError(failures))

    async def create(self, user: User) -> Result[bool]:
        """Validate and insert a new user. On success user.id holds the generated id."""
        if rejected := await self._check(self.user_validator, user):
            return rejected

        created = await self.repository.create(user)
        if created:
            logger.info("Created user %s", user.id)
        return Ok(created)

    async def get_by_id(self, user_id: int) -> User | None:
        return await self.repository.get_by_id(user_id)

    async def get_all(self, options: GetAllUsersOptions) -> Result[list[User]]:
        if rejected := await self._check(self.options_validator, options):
            return rejected
        return Ok(await self.repository.get_all(options))

    async def get_count(self, date_filter: datetime.date | None) -> int:
        return await self.repository.get_count(date_filter)

    async def get_page(self, options: GetAllUsersOptions) -> Result[PagedResult[User]]:
        """
        List one page of users together with the total match count.

        Args:
            options: Date filter and paging parameters

        Returns:
            Ok(PagedResult) on success, Err(ValidationError) for invalid paging
        """
        match await self.get_all(options):
            case Err() as rejected:
                return rejected
            case Ok(value=users):
                total = await self.get_count(options.date)
                return Ok(PagedResult[User](
                    items=users,
                    page=options.page,
                    page_size=options.page_size,
                    total=total,
                ))

    async def update(self, user: User) -> Result[User | None]:
        """
        Validate and overwrite an existing user.

        Returns Ok(None) when no user with user.id exists, either before the
        write or because it disappeared between the existence check and the
        write.
        """
        if rejected := await self._check(self.user_validator, user):
            return rejected

        existing = await self.repository.get_by_id(user.id)
        if existing is None:
            return Ok(None)

        if not await self.repository.update(user):
            logger.warning("User %s vanished before it could be updated", user.id)
            return Ok(None)

        logger.info("Updated user %s", user.id)
        return Ok(user)

    async def delete_by_id(self, user_id: int) -> bool:
        deleted = await self.repository.delete_by_id(user_id)
        if deleted:
            logger.info("Deleted user %s", user_id)
        return deleted
