"""
User routes.

Thin adapter: every endpoint forwards its parsed path/body parameters to the
UserService and returns the result. Errors are not handled here; they
propagate to the handlers registered in `error_handlers.py`.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from bazaar.api.dependencies import get_user_service
from bazaar.schemas.user import UserCreateRequest, UserUpdateRequest, UserResponse
from bazaar.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserResponse)
async def create_user(request: UserCreateRequest, service: UserService = Depends(get_user_service)):
    """Create a user; the id is generated by the storage layer."""
    return await service.create(request)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return await service.get_by_id(user_id)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.get_all()


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
):
    return await service.update(user_id, request)


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    await service.delete(user_id)
    return Response(status_code=status.HTTP_200_OK)
