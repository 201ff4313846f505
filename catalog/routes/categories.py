"""Category routes."""
from fastapi import APIRouter, Depends, status
from typing import List
from catalog.data.database.category_schema import CategoryCreate, CategoryUpdate, CategoryResponse
from catalog.routes.dependencies import get_category_service
from catalog.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse], summary="Get all categories")
def get_categories(service: CategoryService = Depends(get_category_service)):
    return service.list_all()


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get category by ID")
def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service)
):
    return service.get_by_id(category_id)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category"
)
def create_category(
    category: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    return service.create(category)


@router.put("/{category_id}", response_model=CategoryResponse, summary="Update a category")
def update_category(
    category_id: int,
    category_update: CategoryUpdate,
    service: CategoryService = Depends(get_category_service)
):
    return service.edit(category_id, category_update)


@router.patch(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Partially update a category (alias for PUT)"
)
def patch_category(
    category_id: int,
    category_update: CategoryUpdate,
    service: CategoryService = Depends(get_category_service)
):
    return update_category(category_id, category_update, service)


@router.delete("/{category_id}", summary="Delete a category")
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service)
):
    service.delete(category_id)
    return {"message": "Category deleted successfully"}
