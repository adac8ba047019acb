"""Users HTTP Client for consuming the Users API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    CreateUserRequest,
    GetAllUsersRequest,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
)

USERS_PATH = "/api/users"


class UsersClient:
    """HTTP client for interacting with the Users API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the Users client.

        Args:
            base_url: Base URL of the Users API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        """
        Create a new user.

        Args:
            request: User creation request

        Returns:
            Created user response, including the computed age

        Raises:
            httpx.HTTPStatusError: If the request fails (400 with a ValidationFailureResponse body)
        """
        response: Response = await self.client.post(
            USERS_PATH,
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return UserResponse.model_validate(response.json())

    async def get_user(self, user_id: int) -> UserResponse:
        """
        Get a user by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"{USERS_PATH}/{user_id}")
        response.raise_for_status()
        return UserResponse.model_validate(response.json())

    async def list_users(self, request: Optional[GetAllUsersRequest] = None) -> UsersResponse:
        """
        List one page of users.

        Args:
            request: Date filter and paging. Server defaults apply when omitted.

        Returns:
            Paged envelope with total and hasNextPage
        """
        params = (request or GetAllUsersRequest()).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        response: Response = await self.client.get(USERS_PATH, params=params)
        response.raise_for_status()
        return UsersResponse.model_validate(response.json())

    async def update_user(self, user_id: int, request: UpdateUserRequest) -> UserResponse:
        """
        Replace a user's data.

        Raises:
            httpx.HTTPStatusError: 404 if the user does not exist, 400 on validation failure
        """
        response: Response = await self.client.put(
            f"{USERS_PATH}/{user_id}",
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return UserResponse.model_validate(response.json())

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            httpx.HTTPStatusError: 404 if the user does not exist
        """
        response: Response = await self.client.delete(f"{USERS_PATH}/{user_id}")
        response.raise_for_status()
