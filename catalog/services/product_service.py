"""Product service: pagination rules, cached report and invalidation on writes."""
import math
from typing import List, Optional
from pydantic import ValidationError
from catalog.config import settings
from catalog.data.database.product_model import Product
from catalog.data.database.product_schema import (
    ProductCreate,
    ProductUpdate,
    ProductFilterParams,
    PaginationQuery,
    PaginatedProductResponse,
    ProductResponse,
    ProductReportResponse,
)
from catalog.errors import CacheError, ValidationFailedError, require_positive_id
from catalog.repositories.product_repository import ProductRepository
from catalog.utils.cache import Cache
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

REPORT_CACHE_KEY = "product:report"

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def normalize_pagination(pagination: PaginationQuery) -> PaginationQuery:
    """Clamp page to >= 1 and limit to [1, 100], substituting defaults for non-positive values."""
    page = pagination.page if pagination.page > 0 else DEFAULT_PAGE
    limit = pagination.limit if pagination.limit > 0 else DEFAULT_LIMIT
    return PaginationQuery(page=page, limit=min(limit, MAX_LIMIT))


def count_pages(total_items: int, limit: int) -> int:
    return math.ceil(total_items / limit) if total_items else 0


class ProductService:
    """
    Orchestrates product reads and writes.

    The report is served cache-aside under a single key and dropped after
    every successful mutation. The cache is advisory: its failures are logged
    and never surface to callers.
    """

    def __init__(self, repository: ProductRepository, cache: Cache, report_ttl: Optional[int] = None):
        self.repository = repository
        self.cache = cache
        self.report_ttl = report_ttl if report_ttl is not None else settings.report_cache_ttl

    def list_all(self) -> List[Product]:
        return self.repository.get_all()

    def list_paginated(
        self,
        filters: ProductFilterParams,
        pagination: PaginationQuery
    ) -> PaginatedProductResponse:
        pagination = normalize_pagination(pagination)

        products, total = self.repository.get_all_paginated(filters, pagination)

        return PaginatedProductResponse(
            data=[ProductResponse.model_validate(p) for p in products],
            page=pagination.page,
            limit=pagination.limit,
            total_items=total,
            total_pages=count_pages(total, pagination.limit),
        )

    def get_report(self) -> ProductReportResponse:
        cached = self._read_cached_report()
        if cached is not None:
            return cached

        report = self.repository.get_product_report()

        try:
            self.cache.set(REPORT_CACHE_KEY, report.model_dump_json().encode("utf-8"), self.report_ttl)
        except CacheError as e:
            logger.warning("Failed to cache product report", error=e.message)

        return report

    def get_by_id(self, product_id: int) -> Product:
        require_positive_id(product_id, "product")
        return self.repository.get_by_id(product_id)

    def create(self, payload: ProductCreate) -> Product:
        if not payload.name.strip() or not payload.description.strip():
            raise ValidationFailedError("name and description are required")

        product = self.repository.create(Product(**payload.model_dump()))
        self.invalidate_report()
        return product

    def edit(self, product_id: int, patch: ProductUpdate) -> Product:
        require_positive_id(product_id, "product")

        product = self.repository.get_by_id(product_id)

        # Only fields present in the request change
        for field, value in patch.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(product, field, value)

        product = self.repository.edit(product)
        self.invalidate_report()
        return product

    def delete(self, product_id: int) -> None:
        require_positive_id(product_id, "product")
        self.repository.delete(product_id)
        self.invalidate_report()

    def invalidate_report(self) -> None:
        """Drop the cached report. Best-effort."""
        try:
            self.cache.delete(REPORT_CACHE_KEY)
        except CacheError as e:
            logger.warning("Failed to invalidate product report cache", error=e.message)

    def _read_cached_report(self) -> Optional[ProductReportResponse]:
        try:
            cached = self.cache.get(REPORT_CACHE_KEY)
        except CacheError as e:
            logger.warning("Failed to read product report cache", error=e.message)
            return None

        if cached is None:
            logger.debug("Product report cache miss")
            return None

        try:
            report = ProductReportResponse.model_validate_json(cached)
        except ValidationError as e:
            logger.warning("Discarding unreadable cached product report", error=str(e))
            return None

        logger.debug("Product report cache hit")
        return report
