"""Product schemas for API validation, listing and reporting."""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from catalog.data.database.category_schema import CategoryResponse


DEFAULT_SORT_COLUMN = "created_at"
DEFAULT_SORT_ORDER = "desc"


class ProductBase(BaseModel):
    """Base product schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: str = Field(..., min_length=1, description="Product description")
    price: int = Field(..., gt=0, description="Product price")
    stock_quantity: int = Field(..., ge=0, description="Available stock quantity")
    is_active: bool = Field(False, description="Whether product is active/available")
    category_id: int = Field(..., gt=0, description="Owning category")


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(BaseModel):
    """Schema for updating a product (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, gt=0)
    stock_quantity: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None
    category_id: Optional[int] = Field(None, gt=0)


class ProductResponse(ProductBase):
    """Schema for product response."""
    id: int
    category: Optional[CategoryResponse] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProductFilterParams(BaseModel):
    """Optional listing filters; absent fields do not constrain the result."""
    name: Optional[str] = Field(None, description="Case-insensitive substring of the product name")
    category_id: Optional[int] = None
    price_min: Optional[int] = None
    price_max: Optional[int] = None
    stock_min: Optional[int] = None
    stock_max: Optional[int] = None
    sort_by: str = Field(DEFAULT_SORT_COLUMN, description="name, price, stock_quantity, created_at or category_id")
    sort_order: str = Field(DEFAULT_SORT_ORDER, description="asc or desc")


class PaginationQuery(BaseModel):
    """Requested page; normalized by the product service."""
    page: int = 1
    limit: int = 10


class PaginatedProductResponse(BaseModel):
    """One page of products plus pagination metadata."""
    data: List[ProductResponse]
    page: int
    limit: int
    total_items: int
    total_pages: int


class ProductReportItem(BaseModel):
    """Per-product line of the catalog report."""
    id: int
    name: str
    category_name: Optional[str] = None
    price: int
    stock_quantity: int


class ProductReportResponse(BaseModel):
    """Aggregate snapshot over the entire, unfiltered catalog."""
    total_products: int
    total_stock: int
    average_price: float
    products: List[ProductReportItem] = Field(default_factory=list)
