"""Category service."""
from typing import List
from catalog.data.database.category_model import Category
from catalog.data.database.category_schema import CategoryCreate, CategoryUpdate
from catalog.errors import CacheError, ValidationFailedError, require_positive_id
from catalog.repositories.category_repository import CategoryRepository
from catalog.services.product_service import REPORT_CACHE_KEY
from catalog.utils.cache import Cache
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class CategoryService:
    """Pass-through category CRUD. Renames and deletes also drop the product report, which embeds category names."""

    def __init__(self, repository: CategoryRepository, cache: Cache):
        self.repository = repository
        self.cache = cache

    def list_all(self) -> List[Category]:
        return self.repository.get_all()

    def get_by_id(self, category_id: int) -> Category:
        require_positive_id(category_id, "category")
        return self.repository.get_by_id(category_id)

    def create(self, payload: CategoryCreate) -> Category:
        if not payload.name.strip() or not payload.description.strip():
            raise ValidationFailedError("name and description are required")
        return self.repository.create(Category(name=payload.name, description=payload.description))

    def edit(self, category_id: int, patch: CategoryUpdate) -> Category:
        require_positive_id(category_id, "category")

        category = self.repository.get_by_id(category_id)
        for field, value in patch.model_dump(exclude_unset=True).items():
            if value:
                setattr(category, field, value)

        category = self.repository.edit(category)
        self._invalidate_report()
        return category

    def delete(self, category_id: int) -> None:
        require_positive_id(category_id, "category")
        self.repository.delete(category_id)
        self._invalidate_report()

    def _invalidate_report(self) -> None:
        try:
            self.cache.delete(REPORT_CACHE_KEY)
        except CacheError as e:
            logger.warning("Failed to invalidate product report cache", error=e.message)
