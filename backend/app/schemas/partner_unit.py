"""
Pydantic schemas for PartnerUnit entity.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from app.schemas.base import APIModel


class PartnerUnitBase(APIModel):
    """Base partner unit schema."""
    partner_id: int
    unit_id: int
    partnership_percentage: Decimal = Field(gt=0, le=100)


class PartnerUnitCreate(PartnerUnitBase):
    """Schema for partner unit creation."""
    pass


class PartnerUnitUpdate(APIModel):
    """Schema for partner unit update."""
    partnership_percentage: Optional[Decimal] = Field(default=None, gt=0, le=100)


class PartnerUnitResponse(PartnerUnitBase):
    """Schema for partner unit response."""
    id: int
    created_at: datetime
