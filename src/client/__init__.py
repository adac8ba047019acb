"""Typed HTTP client and wire schemas for the Users API."""
from src.client.users_client import UsersClient
from src.client.schemas import (
    CreateUserRequest,
    GetAllUsersRequest,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
    ValidationFailureResponse,
    ValidationResponse,
)

__all__ = [
    "UsersClient",
    "CreateUserRequest",
    "GetAllUsersRequest",
    "UpdateUserRequest",
    "UserResponse",
    "UsersResponse",
    "ValidationFailureResponse",
    "ValidationResponse",
]
