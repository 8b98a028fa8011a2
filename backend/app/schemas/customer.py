"""
Pydantic schemas for Customer entity.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from app.schemas.base import APIModel


class CustomerBase(APIModel):
    """Base customer schema."""
    name: str = Field(min_length=1, max_length=200)
    phone: str = Field(min_length=1, max_length=30)
    email: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


class CustomerCreate(CustomerBase):
    """Schema for customer creation."""
    pass


class CustomerUpdate(APIModel):
    """Schema for customer update."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=30)
    email: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


class CustomerResponse(CustomerBase):
    """Schema for customer response."""
    id: int
    created_at: datetime
    updated_at: datetime
