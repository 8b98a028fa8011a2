"""
Pydantic schemas for Revenue entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date as dt_date, datetime
from decimal import Decimal
from app.schemas.base import APIModel


class RevenueBase(APIModel):
    """Base revenue schema."""
    amount: Decimal = Field(ge=0)
    date: dt_date
    project_id: Optional[int] = None
    description: Optional[str] = None


class RevenueCreate(RevenueBase):
    """Schema for revenue creation."""
    pass


class RevenueUpdate(APIModel):
    """Schema for revenue update."""
    amount: Optional[Decimal] = Field(default=None, ge=0)
    date: Optional[dt_date] = None
    project_id: Optional[int] = None
    description: Optional[str] = None


class RevenueResponse(RevenueBase):
    """Schema for revenue response."""
    id: int
    created_at: datetime
    updated_at: datetime
