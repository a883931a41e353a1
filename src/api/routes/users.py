"""User API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies import OptionalUserId, RequiredUserId, get_user_service
from api.schemas.common import ErrorResponse, MessageResponse
from api.schemas.user import UserCreate, UserResponse, UserUpdate
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["users"])

# Every method served on /user; advertised in the Allow header of a 405
ALLOWED_METHODS = ("DELETE", "GET", "POST", "PUT")

_INVALID_ID = {"model": ErrorResponse, "description": "Invalid id"}
_NOT_FOUND = {"model": ErrorResponse, "description": "User not found"}


@router.get(
    "",
    response_model=UserResponse | list[UserResponse],
    summary="Get one user or list all users",
    responses={400: _INVALID_ID, 404: _NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_users(
    request: Request,
    user_id: OptionalUserId,
    service: UserService = Depends(get_user_service),
) -> UserResponse | list[UserResponse]:
    """With `?id=` return that user, otherwise every user."""
    if user_id is None:
        users = await service.list_users()
        return [UserResponse.from_entity(user) for user in users]
    user = await service.get_user(user_id)
    return UserResponse.from_entity(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        400: {"model": ErrorResponse, "description": "Missing/invalid email or email already exists"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_user(
    request: Request,
    body: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user. `follwers`, `isActive` and `registeredAt` take system defaults."""
    user = await service.create_user(body.to_domain())
    return UserResponse.from_entity(user)


@router.put(
    "",
    response_model=UserResponse,
    summary="Update a user",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid id/email or email already exists"},
        404: _NOT_FOUND,
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_user(
    request: Request,
    user_id: RequiredUserId,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Change only the fields present in the body."""
    user = await service.update_user(user_id, body.to_domain())
    return UserResponse.from_entity(user)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete a user",
    responses={400: _INVALID_ID, 404: _NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_user(
    request: Request,
    user_id: RequiredUserId,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Permanently delete a user."""
    await service.delete_user(user_id)
    return MessageResponse(message=f"User {user_id} deleted")
