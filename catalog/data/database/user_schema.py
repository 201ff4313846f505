"""User schemas for API validation."""
from pydantic import BaseModel, Field


class UserBase(BaseModel):
    """Base user schema with common fields."""
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserCreate(UserBase):
    """Schema for registering a user."""
    pass


class UserResponse(UserBase):
    """Schema for user response."""
    id: int

    class Config:
        from_attributes = True
