"""User persistence."""
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from catalog.data.database.user_model import User
from catalog.errors import NotFoundError, StoreError


class UserRepository:
    """User store bound to one request-scoped session."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[User]:
        try:
            return self.db.query(User).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch users: {e}") from e

    def get_by_id(self, user_id: int) -> User:
        try:
            user = self.db.query(User).filter(User.id == user_id).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch user: {e}") from e

        if not user:
            raise NotFoundError(f"User with ID {user_id} not found", {"id": user_id})
        return user

    def create(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to create user: {e}") from e
        self.db.refresh(user)
        return user
