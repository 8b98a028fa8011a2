"""
Pydantic schemas for CustomerPayment entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from app.models.customer_payment import PaymentType, PaymentMethod
from app.schemas.base import APIModel


class CustomerPaymentBase(APIModel):
    """Base customer payment schema."""
    unit_id: int
    customer_id: int
    amount: Decimal = Field(gt=0)
    payment_type: PaymentType
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class CustomerPaymentCreate(CustomerPaymentBase):
    """Schema for customer payment creation."""
    payment_date: Optional[date] = None  # Defaults to today


class CustomerPaymentUpdate(APIModel):
    """Schema for customer payment update."""
    amount: Optional[Decimal] = Field(default=None, gt=0)
    payment_type: Optional[PaymentType] = None
    payment_method: Optional[PaymentMethod] = None
    payment_date: Optional[date] = None
    notes: Optional[str] = None


class CustomerPaymentResponse(CustomerPaymentBase):
    """Schema for customer payment response."""
    id: int
    payment_date: date
    created_at: datetime
    updated_at: datetime
