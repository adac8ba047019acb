"""Mappers for converting between domain models and API schemas."""
from typing import Iterable

from src.app.core.clock import Clock
from src.app.core.domain.models import EmailAddress, GetAllUsersOptions, PersonalData, User
from src.app.core.services.age import calculate_age
from src.client.schemas import (
    CreateUserRequest,
    GetAllUsersRequest,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
)


class ContractMapper:
    """
    Converts wire requests into domain models and domain models into responses.

    Values are copied verbatim (no trimming or normalization). The only
    dependency is the clock used to compute a user's age.
    """

    def __init__(self, clock: Clock):
        self.clock = clock

    def to_user(self, request: CreateUserRequest | UpdateUserRequest, user_id: int = 0) -> User:
        """
        Convert a create or update request to a User domain model.

        Args:
            request: Inbound request body
            user_id: 0 for create; the route id for update

        Returns:
            Domain model, not yet validated
        """
        return User(
            id=user_id,
            personal_data=PersonalData(
                first_name=request.first_name,
                last_name=request.last_name,
                phone_number=request.phone_number,
                date_of_birth=request.date_of_birth,
            ),
            email_address=EmailAddress(email=request.email),
        )

    def to_response(self, user: User) -> UserResponse:
        """
        Convert a User domain model to UserResponse API schema.

        Args:
            user: Domain model with a date of birth

        Returns:
            API response schema with the age as of the clock's current time
        """
        personal_data = user.personal_data
        return UserResponse(
            id=user.id,
            first_name=personal_data.first_name,
            last_name=personal_data.last_name,
            age=calculate_age(personal_data.date_of_birth, self.clock.now()),
            email=user.email_address.email,
            date_of_birth=personal_data.date_of_birth,
            phone_number=personal_data.phone_number,
        )

    def to_paged_response(
        self,
        users: Iterable[User],
        page: int,
        page_size: int,
        total: int,
    ) -> UsersResponse:
        return UsersResponse(
            users=[self.to_response(user) for user in users],
            page=page,
            page_size=page_size,
            total=total,
            has_next_page=total > page * page_size,
        )

    @staticmethod
    def to_options(request: GetAllUsersRequest) -> GetAllUsersOptions:
        return GetAllUsersOptions(
            date=request.date,
            page=request.page,
            page_size=request.page_size,
        )
