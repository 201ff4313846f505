"""User routes."""
from fastapi import APIRouter, Depends, status
from typing import List
from catalog.data.database.user_schema import UserCreate, UserResponse
from catalog.routes.dependencies import get_user_service
from catalog.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse], summary="Get all users")
def get_users(service: UserService = Depends(get_user_service)):
    return service.list_all()


@router.get("/{user_id}", response_model=UserResponse, summary="Get user by ID")
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.get_by_id(user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user"
)
def create_user(user: UserCreate, service: UserService = Depends(get_user_service)):
    return service.create(user)
