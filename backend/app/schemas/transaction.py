"""
Pydantic schemas for Transaction entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date as dt_date, datetime
from decimal import Decimal
from app.models.transaction import TransactionType
from app.schemas.base import APIModel


class TransactionBase(APIModel):
    """Base transaction schema."""
    transaction_type: TransactionType
    amount: Decimal = Field(ge=0)
    date: dt_date
    linked_invoice_id: Optional[int] = None
    linked_project_id: Optional[int] = None
    linked_customer_id: Optional[int] = None
    linked_partner_id: Optional[int] = None
    cashbox_id: Optional[int] = None
    description: Optional[str] = None


class TransactionCreate(TransactionBase):
    """Schema for transaction creation."""
    pass


class TransactionUpdate(APIModel):
    """Schema for transaction update."""
    transaction_type: Optional[TransactionType] = None
    amount: Optional[Decimal] = Field(default=None, ge=0)
    date: Optional[dt_date] = None
    linked_invoice_id: Optional[int] = None
    linked_project_id: Optional[int] = None
    linked_customer_id: Optional[int] = None
    linked_partner_id: Optional[int] = None
    cashbox_id: Optional[int] = None
    description: Optional[str] = None


class TransactionResponse(TransactionBase):
    """Schema for transaction response."""
    id: int
    settlement_run_id: Optional[int] = None  # Set once counted by a settlement run
    created_at: datetime
    updated_at: datetime
