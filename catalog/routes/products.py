"""Product routes: listing, report and management."""
from fastapi import APIRouter, Depends, status
from typing import List
from catalog.data.database.product_schema import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductFilterParams,
    PaginationQuery,
    PaginatedProductResponse,
    ProductReportResponse,
)
from catalog.routes.dependencies import get_product_service
from catalog.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "",
    response_model=PaginatedProductResponse,
    summary="List products",
    description="Filtered, sorted and paginated product listing"
)
def list_products(
    filters: ProductFilterParams = Depends(),
    pagination: PaginationQuery = Depends(),
    service: ProductService = Depends(get_product_service)
):
    """List one page of products matching the filters."""
    return service.list_paginated(filters, pagination)


@router.get(
    "/all",
    response_model=List[ProductResponse],
    summary="Get all products",
    description="Retrieve every product without pagination"
)
def get_all_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    return service.list_all()


@router.get(
    "/report",
    response_model=ProductReportResponse,
    summary="Product report",
    description="Totals and per-product breakdown over the whole catalog (cached)"
)
def get_product_report(service: ProductService = Depends(get_product_service)):
    """Get the catalog report."""
    return service.get_report()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
    description="Retrieve a specific product by its ID"
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    return service.get_by_id(product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product in the catalog"
)
def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """Create a new product."""
    return service.create(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="Update an existing product by ID; omitted fields are left unchanged"
)
def update_product(
    product_id: int,
    product_update: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Update a product."""
    return service.edit(product_id, product_update)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Partially update a product",
    description="Partially update an existing product by ID (alias for PUT)"
)
def patch_product(
    product_id: int,
    product_update: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Partially update a product (same as PUT)."""
    return update_product(product_id, product_update, service)


@router.delete(
    "/{product_id}",
    summary="Delete a product",
    description="Delete a product by ID"
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    service.delete(product_id)
    return {"message": "Product deleted successfully"}
