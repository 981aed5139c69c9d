"""User CRUD routes. Every route requires a bearer token."""
from fastapi import APIRouter, Depends, status

from stock_quote_api.auth import get_identity
from stock_quote_api.deps import UserServiceDep
from stock_quote_api.schemas import (ApiResponse, UserCreate, UserRead,
                                     UserUpdate)

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_identity)])


@router.get("", response_model=ApiResponse[list[UserRead]])
def list_users(service: UserServiceDep) -> ApiResponse[list[UserRead]]:
    users = [UserRead.model_validate(u) for u in service.list_users()]
    return ApiResponse(message="Users retrieved successfully", data=users)


@router.post("", response_model=ApiResponse[UserRead], status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, service: UserServiceDep) -> ApiResponse[UserRead]:
    """Create an account. 400 when the email is invalid or already in use."""
    user = service.create_user(payload)
    return ApiResponse(message="User created successfully", data=UserRead.model_validate(user))


@router.get("/{user_id}", response_model=ApiResponse[UserRead])
def get_user(user_id: int, service: UserServiceDep) -> ApiResponse[UserRead]:
    user = service.get_user(user_id)
    return ApiResponse(message="User retrieved successfully", data=UserRead.model_validate(user))


@router.put("/{user_id}", response_model=ApiResponse[UserRead])
def update_user(
    user_id: int, payload: UserUpdate, service: UserServiceDep
) -> ApiResponse[UserRead]:
    """Change the email and/or password; omitted fields are left as they are."""
    user = service.update_user(user_id, payload)
    return ApiResponse(message="User updated successfully", data=UserRead.model_validate(user))


@router.delete("/{user_id}", response_model=ApiResponse[None])
def delete_user(user_id: int, service: UserServiceDep) -> ApiResponse[None]:
    """Delete the user and its stock query history."""
    service.delete_user(user_id)
    return ApiResponse(message="User deleted successfully")
