"""Category schemas for API validation."""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CategoryBase(BaseModel):
    """Base category schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255, description="Category name")
    description: str = Field(..., min_length=1, description="Category description")


class CategoryCreate(CategoryBase):
    """Schema for creating a new category."""
    pass


class CategoryUpdate(BaseModel):
    """Schema for updating a category (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)


class CategoryResponse(CategoryBase):
    """Schema for category response."""
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
