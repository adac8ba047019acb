import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.api.errors import validation_failure_response
from src.app.api.mappers import ContractMapper
from src.app.containers import Container
from src.app.core.services.user_service import UserService
from src.client.schemas import (
    CreateUserRequest,
    GetAllUsersRequest,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
)
from src.app.logging import get_logger
from src.shared.result import Err, Ok

router = APIRouter(prefix="/users", tags=["users"])
logger = get_logger(__name__)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_user(
    request: CreateUserRequest,
    http_request: Request,
    response: Response,
    service: UserService = Depends(Provide[Container.user_service]),
    mapper: ContractMapper = Depends(Provide[Container.contract_mapper]),
):
    """
    Create a new user.

    Returns 201 with a Location header pointing at the new user, or 400 with
    every failed validation rule.
    """
    user = mapper.to_user(request)
    match await service.create(user):
        case Err(error=error):
            return validation_failure_response(error)
        case Ok(value=False):
            logger.error(f"Repository reported no row created for {user.email_address.email}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="User was not created")
        case Ok():
            response.headers["Location"] = str(http_request.url_for("get_user", user_id=user.id))
            return mapper.to_response(user)


@router.get("/{user_id}", response_model=UserResponse)
@inject
async def get_user(
    user_id: int,
    service: UserService = Depends(Provide[Container.user_service]),
    mapper: ContractMapper = Depends(Provide[Container.contract_mapper]),
) -> UserResponse:
    """Get a user by ID, including their current age."""
    user = await service.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with ID {user_id} not found")
    return mapper.to_response(user)


@router.get("", response_model=UsersResponse)
@inject
async def list_users(
    date: datetime.date | None = Query(default=None),
    page: int = Query(default=1),
    page_size: int = Query(default=10, alias="pageSize"),
    service: UserService = Depends(Provide[Container.user_service]),
    mapper: ContractMapper = Depends(Provide[Container.contract_mapper]),
):
    """
    List users born on or after `date`, one page at a time.

    Args:
        date: Optional lower bound on date of birth
        page: 1-based page number
        page_size: Between 1 and 25 users per page

    Returns:
        Paged envelope with total and hasNextPage, or 400 for invalid paging
    """
    options = mapper.to_options(GetAllUsersRequest(date=date, page=page, page_size=page_size))
    match await service.get_page(options):
        case Err(error=error):
            return validation_failure_response(error)
        case Ok(value=paged):
            return mapper.to_paged_response(paged.items, paged.page, paged.page_size, paged.total)


@router.put("/{user_id}", response_model=UserResponse)
@inject
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: UserService = Depends(Provide[Container.user_service]),
    mapper: ContractMapper = Depends(Provide[Container.contract_mapper]),
):
    """Replace a user's data. 404 if the user does not exist, 400 on validation failure."""
    user = mapper.to_user(request, user_id)
    match await service.update(user):
        case Err(error=error):
            return validation_failure_response(error)
        case Ok(value=None):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with ID {user_id} not found")
        case Ok(value=updated):
            return mapper.to_response(updated)


@router.delete("/{user_id}")
@inject
async def delete_user(
    user_id: int,
    service: UserService = Depends(Provide[Container.user_service]),
) -> Response:
    """Delete a user. 404 if the user does not exist."""
    if not await service.delete_by_id(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with ID {user_id} not found")
    return Response(status_code=status.HTTP_200_OK)
