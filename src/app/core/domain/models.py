"""Domain models used in business logic."""
import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field


class PersonalData(BaseModel):
    """
    Personal details owned by a single User.

    Fields are not constrained here: a freshly mapped request may be invalid,
    and the UserValidator reports each problem as a field-level failure.
    """
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    date_of_birth: datetime.date | None = None


class EmailAddress(BaseModel):
    """Email address owned by a single User."""
    email: str | None = None


class User(BaseModel):
    """Domain model for User. id is 0 until the store assigns one."""
    id: int = 0
    personal_data: PersonalData = Field(default_factory=PersonalData)
    email_address: EmailAddress = Field(default_factory=EmailAddress)

    model_config = {"from_attributes": True}


class GetAllUsersOptions(BaseModel):
    """Paging and filtering options for listing users."""
    date: datetime.date | None = Field(default=None, description="Only users born on or after this date")
    page: int = 1
    page_size: int = 10


T = TypeVar("T")


class PagedResult(BaseModel, Generic[T]):
    """
    One page of items plus the total number of matching rows.

    total ignores paging; has_next_page is derived from it.
    """
    items: list[T] = Field(default_factory=list)
    page: int
    page_size: int
    total: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.total > self.page * self.page_size
