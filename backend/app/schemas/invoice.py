"""
Pydantic schemas for Invoice entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from app.models.invoice import InvoiceStatus
from app.schemas.base import APIModel


class InvoiceBase(APIModel):
    """Base invoice schema."""
    invoice_number: str = Field(min_length=1, max_length=50)
    amount: Decimal = Field(ge=0)
    status: InvoiceStatus = InvoiceStatus.UNPAID
    due_date: date
    linked_transaction_id: Optional[int] = None
    linked_project_id: Optional[int] = None
    linked_customer_id: Optional[int] = None
    linked_partner_id: Optional[int] = None
    description: Optional[str] = None


class InvoiceCreate(InvoiceBase):
    """Schema for invoice creation."""
    pass


class InvoiceUpdate(APIModel):
    """Schema for invoice update."""
    invoice_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    status: Optional[InvoiceStatus] = None
    due_date: Optional[date] = None
    linked_transaction_id: Optional[int] = None
    linked_project_id: Optional[int] = None
    linked_customer_id: Optional[int] = None
    linked_partner_id: Optional[int] = None
    description: Optional[str] = None


class InvoiceResponse(InvoiceBase):
    """Schema for invoice response."""
    id: int
    created_at: datetime
    updated_at: datetime
