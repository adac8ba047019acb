"""API schemas for user requests and responses. JSON field names are camelCase."""
import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases, still constructible by field name."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(CamelModel):
    """
    Request schema for creating a new user.

    Every field is optional and nullable so that missing or null values reach
    the UserValidator and are reported with its messages instead of a generic
    parsing error.
    """
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    date_of_birth: datetime.date | None = None
    phone_number: str | None = None


class UpdateUserRequest(CreateUserRequest):
    """Request schema for replacing an existing user's data."""


class GetAllUsersRequest(CamelModel):
    """Query parameters for listing users."""
    date: datetime.date | None = Field(default=None, description="Only users born on or after this date")
    page: int = 1
    page_size: int = 10


class UserResponse(CamelModel):
    """Response schema for user data returned by the API."""
    id: int
    first_name: str
    last_name: str | None = None
    age: int
    email: str
    date_of_birth: datetime.date
    phone_number: str


class UsersResponse(CamelModel):
    """Paged envelope of users."""
    users: list[UserResponse] = Field(default_factory=list)
    page: int
    page_size: int
    total: int
    has_next_page: bool


class ValidationResponse(CamelModel):
    """A single failed rule, with the property name stripped of its parent prefix."""
    property_name: str
    message: str


class ValidationFailureResponse(CamelModel):
    """Body of every HTTP 400 validation response."""
    errors: list[ValidationResponse] = Field(default_factory=list)
