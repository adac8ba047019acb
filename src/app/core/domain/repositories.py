"""Repository interfaces the core depends on."""
from abc import ABC, abstractmethod
from datetime import date

from src.app.core.domain.models import GetAllUsersOptions, User


class UserRepositoryBase(ABC):
    """
    Persistence contract for User records.

    Read paths return None / an empty list when nothing matches; "not found"
    is never an error. Store failures surface as StorageError.
    """

    @abstractmethod
    async def create(self, user: User) -> bool:
        """Insert the user and assign the generated id to user.id."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        pass

    @abstractmethod
    async def get_by_email(self, email: str, exclude_id: int = 0) -> User | None:
        """Exact-match lookup by email, skipping the user with exclude_id when it is non-zero."""
        pass

    @abstractmethod
    async def get_all(self, options: GetAllUsersOptions) -> list[User]:
        """One page of users born on or after options.date, ordered by id."""
        pass

    @abstractmethod
    async def update(self, user: User) -> bool:
        """Overwrite the stored record with user.id. Returns False if no row matched."""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: int) -> bool:
        pass

    @abstractmethod
    async def get_count(self, date_filter: date | None) -> int:
        """Count users born on or after date_filter (all users when None)."""
        pass
