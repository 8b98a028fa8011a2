"""
Pydantic schemas for Unit entity.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from app.models.unit import UnitType, UnitStatus
from app.schemas.base import APIModel


class UnitBase(APIModel):
    """Base unit schema."""
    type: UnitType
    area: Decimal = Field(gt=0)
    total_price: Decimal = Field(ge=0)
    down_payment: Decimal = Field(ge=0)
    reservation_fee: Optional[Decimal] = Field(default=None, ge=0)
    commission: Optional[Decimal] = Field(default=None, ge=0)
    maintenance_amount: Optional[Decimal] = Field(default=None, ge=0)
    garage_share: Optional[Decimal] = Field(default=None, ge=0)
    status: UnitStatus = UnitStatus.AVAILABLE
    customer_id: Optional[int] = None


class UnitCreate(UnitBase):
    """Schema for unit creation."""
    pass


class UnitUpdate(APIModel):
    """Schema for unit update."""
    type: Optional[UnitType] = None
    area: Optional[Decimal] = Field(default=None, gt=0)
    total_price: Optional[Decimal] = Field(default=None, ge=0)
    down_payment: Optional[Decimal] = Field(default=None, ge=0)
    reservation_fee: Optional[Decimal] = Field(default=None, ge=0)
    commission: Optional[Decimal] = Field(default=None, ge=0)
    maintenance_amount: Optional[Decimal] = Field(default=None, ge=0)
    garage_share: Optional[Decimal] = Field(default=None, ge=0)
    status: Optional[UnitStatus] = None
    customer_id: Optional[int] = None


class UnitResponse(UnitBase):
    """Schema for unit response."""
    id: int
    created_at: datetime
    updated_at: datetime
