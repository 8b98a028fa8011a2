"""
Pydantic schemas for ReturnedUnit entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from app.models.returned_unit import ResaleStatus
from app.schemas.base import APIModel


class ReturnedUnitBase(APIModel):
    """Base returned unit schema."""
    unit_id: int
    return_reason: str = Field(min_length=1)
    completing_partner_id: Optional[int] = None
    completion_date: Optional[date] = None
    completion_amount: Optional[Decimal] = Field(default=None, ge=0)
    resale_status: ResaleStatus = ResaleStatus.AVAILABLE


class ReturnedUnitCreate(ReturnedUnitBase):
    """Schema for recording a returned unit."""
    pass


class ReturnedUnitUpdate(APIModel):
    """Schema for returned unit update."""
    return_reason: Optional[str] = Field(default=None, min_length=1)
    completing_partner_id: Optional[int] = None
    completion_date: Optional[date] = None
    completion_amount: Optional[Decimal] = Field(default=None, ge=0)
    resale_status: Optional[ResaleStatus] = None


class ReturnedUnitResponse(ReturnedUnitBase):
    """Schema for returned unit response."""
    id: int
    created_at: datetime
    updated_at: datetime
