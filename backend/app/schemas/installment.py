"""
Pydantic schemas for Installment entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from app.models.installment import InstallmentType, InstallmentStatus
from app.schemas.base import APIModel


class InstallmentBase(APIModel):
    """Base installment schema."""
    unit_id: int
    type: InstallmentType
    amount: Decimal = Field(ge=0)
    due_date: date
    payment_date: Optional[date] = None
    status: InstallmentStatus = InstallmentStatus.UNPAID


class InstallmentCreate(InstallmentBase):
    """Schema for installment creation."""
    pass


class InstallmentUpdate(APIModel):
    """Schema for installment update."""
    type: Optional[InstallmentType] = None
    amount: Optional[Decimal] = Field(default=None, ge=0)
    due_date: Optional[date] = None
    payment_date: Optional[date] = None
    status: Optional[InstallmentStatus] = None


class InstallmentResponse(InstallmentBase):
    """Schema for installment response."""
    id: int
    created_at: datetime
    updated_at: datetime
