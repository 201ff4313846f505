"""FastAPI dependencies wiring request-scoped services."""
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from catalog.data.database.connection import get_db
from catalog.repositories import CategoryRepository, ProductRepository, UserRepository
from catalog.services import CategoryService, ProductService, UserService
from catalog.utils.cache import Cache


def get_cache(request: Request) -> Cache:
    """Process-wide cache facade created at startup."""
    return request.app.state.cache


def get_product_service(
    db: Session = Depends(get_db),
    cache: Cache = Depends(get_cache)
) -> ProductService:
    return ProductService(ProductRepository(db), cache)


def get_category_service(
    db: Session = Depends(get_db),
    cache: Cache = Depends(get_cache)
) -> CategoryService:
    return CategoryService(CategoryRepository(db), cache)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))
