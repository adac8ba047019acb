"""Validation rules for User records."""
import datetime

from src.app.core.clock import Clock
from src.app.core.domain.models import User
from src.app.core.domain.repositories import UserRepositoryBase
from src.app.core.services.age import calculate_age
from src.shared.validation.rules import BaseValidator

MAX_NAME_LENGTH = 128
MINIMUM_AGE = 18
EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"
PHONE_PATTERN = r"[0-9]{10}"


class UserValidator(BaseValidator[User]):
    """
    Validates a User before it is created or updated.

    Property names are reported as camelCase paths (e.g. personalData.firstName).
    The email chain ends with a uniqueness lookup against the repository, which
    only runs once the email is present and well formed.
    """

    def __init__(self, repository: UserRepositoryBase, clock: Clock):
        super().__init__()
        self.repository = repository
        self.clock = clock

        (self.rule_for("personalData.firstName", lambda u: u.personal_data.first_name)
            .not_empty().with_message("FirstName is required")
            .maximum_length(MAX_NAME_LENGTH).with_message("Maximum length is 128 characters."))

        (self.rule_for("personalData.lastName", lambda u: u.personal_data.last_name)
            .maximum_length(MAX_NAME_LENGTH).with_message("Maximum length is 128 characters."))

        (self.rule_for("emailAddress.email", lambda u: u.email_address.email)
            .not_empty().with_message("Email is required.")
            .matches(EMAIL_PATTERN).with_message("Invalid email format.")
            .must_async(self._be_unique).with_message("Email already registered."))

        (self.rule_for("personalData.dateOfBirth", lambda u: u.personal_data.date_of_birth)
            .not_empty().with_message("DateOfBirth is required")
            .must(self._is_adult).with_message("User should be over 18 years old."))

        (self.rule_for("personalData.phoneNumber", lambda u: u.personal_data.phone_number)
            .not_empty().with_message("Phone number is required.")
            .matches(PHONE_PATTERN)
            .with_message("Phone number must contain only digits and be 10 characters long."))

    def _is_adult(self, date_of_birth: datetime.date) -> bool:
        return calculate_age(date_of_birth, self.clock.now()) >= MINIMUM_AGE

    async def _be_unique(self, email: str, user: User) -> bool:
        # A record keeping its own email on update is not a conflict
        existing = await self.repository.get_by_email(email, exclude_id=user.id)
        return existing is None
