"""
Pydantic schemas for Cashbox entity.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from app.schemas.base import APIModel


class CashboxCreate(APIModel):
    """Schema for cashbox creation. Current balance defaults to the initial balance."""
    name: str = Field(min_length=1, max_length=100)
    initial_balance: Decimal = Decimal(0)
    current_balance: Optional[Decimal] = None


class CashboxUpdate(APIModel):
    """Schema for cashbox update."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    initial_balance: Optional[Decimal] = None
    current_balance: Optional[Decimal] = None


class CashboxResponse(APIModel):
    """Schema for cashbox response."""
    id: int
    name: str
    initial_balance: Decimal
    current_balance: Decimal
    created_at: datetime
    updated_at: datetime
