# File: app/api/v1/routes_users.py

"""
User CRUD endpoints.

Domain errors are turned into empty responses:
  - DuplicateEmailError -> 400
  - UserNotFoundError   -> 404
Malformed bodies never get here; the app's validation handler answers 400.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.deps import get_user_service
from app.core.exceptions import DuplicateEmailError, UserNotFoundError
from app.schemas.user import UserRequest, UserResponse
from app.services.user_service import UserService

router = APIRouter()

# ids are BIGINT; anything outside that range cannot exist
MAX_USER_ID = 2**63 - 1


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(
    payload: UserRequest,
    service: UserService = Depends(get_user_service),
):
    try:
        return service.create_user(payload.email, payload.name)
    except DuplicateEmailError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("", response_model=List[UserResponse], summary="List users")
def list_users(service: UserService = Depends(get_user_service)):
    return service.get_all_users()


@router.get("/{user_id}", response_model=UserResponse, summary="Get user by id")
def get_user(
    user_id: int = Path(..., ge=1, le=MAX_USER_ID),
    service: UserService = Depends(get_user_service),
):
    try:
        return service.get_user_by_id(user_id)
    except UserNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.put("/{user_id}", response_model=UserResponse, summary="Update user")
def update_user(
    payload: UserRequest,
    user_id: int = Path(..., ge=1, le=MAX_USER_ID),
    service: UserService = Depends(get_user_service),
):
    try:
        return service.update_user(user_id, payload.email, payload.name)
    except UserNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except DuplicateEmailError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete user",
)
def delete_user(
    user_id: int = Path(..., ge=1, le=MAX_USER_ID),
    service: UserService = Depends(get_user_service),
):
    try:
        service.delete_user(user_id)
    except UserNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
