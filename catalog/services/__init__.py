"""Business logic for catalog entities."""
from .product_service import ProductService, REPORT_CACHE_KEY
from .category_service import CategoryService
from .user_service import UserService

__all__ = [
    "ProductService",
    "CategoryService",
    "UserService",
    "REPORT_CACHE_KEY",
]
