"""
Pydantic schemas for Partner entity.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from app.schemas.base import APIModel


class PartnerBase(APIModel):
    """Base partner schema."""
    name: str = Field(min_length=1, max_length=200)
    project_id: int
    partnership_type: Optional[str] = None  # e.g. "50/50"
    share_percentage: Decimal = Field(default=Decimal(0), ge=0, le=100)
    previous_balance: Decimal = Decimal(0)
    current_balance: Decimal = Decimal(0)
    received_payments: Decimal = Field(default=Decimal(0), ge=0)
    remaining_payments: Decimal = Field(default=Decimal(0), ge=0)


class PartnerCreate(PartnerBase):
    """Schema for partner creation."""
    pass


class PartnerUpdate(APIModel):
    """Schema for partner update."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    project_id: Optional[int] = None
    partnership_type: Optional[str] = None
    share_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)
    previous_balance: Optional[Decimal] = None
    current_balance: Optional[Decimal] = None
    received_payments: Optional[Decimal] = Field(default=None, ge=0)
    remaining_payments: Optional[Decimal] = Field(default=None, ge=0)


class PartnerResponse(PartnerBase):
    """Schema for partner response."""
    id: int
    created_at: datetime
    updated_at: datetime
