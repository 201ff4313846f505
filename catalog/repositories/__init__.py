"""Storage access for catalog entities."""
from .category_repository import CategoryRepository
from .product_repository import ProductRepository
from .user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
    "UserRepository",
]
