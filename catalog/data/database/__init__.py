"""Database data layer package."""
from .connection import engine, SessionLocal, get_db, Base
from .category_model import Category
from .product_model import Product
from .user_model import User
from .category_schema import CategoryCreate, CategoryUpdate, CategoryResponse
from .product_schema import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductFilterParams,
    PaginationQuery,
    PaginatedProductResponse,
    ProductReportItem,
    ProductReportResponse,
)
from .user_schema import UserCreate, UserResponse

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "Base",
    "Category",
    "Product",
    "User",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductFilterParams",
    "PaginationQuery",
    "PaginatedProductResponse",
    "ProductReportItem",
    "ProductReportResponse",
    "UserCreate",
    "UserResponse",
]
