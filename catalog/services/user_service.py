"""User service."""
from typing import List
from catalog.data.database.user_model import User
from catalog.data.database.user_schema import UserCreate
from catalog.errors import ValidationFailedError, require_positive_id
from catalog.repositories.user_repository import UserRepository


class UserService:

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def list_all(self) -> List[User]:
        return self.repository.get_all()

    def get_by_id(self, user_id: int) -> User:
        require_positive_id(user_id, "user")
        return self.repository.get_by_id(user_id)

    def create(self, payload: UserCreate) -> User:
        if not payload.username.strip() or not payload.email.strip():
            raise ValidationFailedError("username and email are required")
        return self.repository.create(User(username=payload.username, email=payload.email))
