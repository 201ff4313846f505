"""Category persistence."""
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from catalog.data.database.category_model import Category
from catalog.errors import NotFoundError, StoreError


class CategoryRepository:
    """Category store bound to one request-scoped session."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Category]:
        try:
            return self.db.query(Category).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch categories: {e}") from e

    def get_by_id(self, category_id: int) -> Category:
        try:
            category = self.db.query(Category).filter(Category.id == category_id).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch category: {e}") from e

        if not category:
            raise NotFoundError(f"Category with ID {category_id} not found", {"id": category_id})
        return category

    def create(self, category: Category) -> Category:
        self.db.add(category)
        self._commit("create")
        self.db.refresh(category)
        return category

    def edit(self, category: Category) -> Category:
        self.db.add(category)
        self._commit("edit")
        self.db.refresh(category)
        return category

    def delete(self, category_id: int) -> None:
        try:
            deleted = self.db.query(Category).filter(Category.id == category_id).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            # Typically a product still references the category
            self.db.rollback()
            raise StoreError(f"Failed to delete category: {e}") from e

        if not deleted:
            self.db.rollback()
            raise NotFoundError(f"Category with ID {category_id} not found", {"id": category_id})
        self._commit("delete")

    def _commit(self, operation: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to {operation} category: {e}") from e
