"""
Pydantic schemas for Expense entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date as dt_date, datetime
from decimal import Decimal
from app.models.expense import ExpenseCategory
from app.schemas.base import APIModel


class ExpenseBase(APIModel):
    """Base expense schema."""
    amount: Decimal = Field(ge=0)
    date: dt_date
    project_id: Optional[int] = None
    category: ExpenseCategory = ExpenseCategory.OTHER
    description: Optional[str] = None


class ExpenseCreate(ExpenseBase):
    """Schema for expense creation."""
    pass


class ExpenseUpdate(APIModel):
    """Schema for expense update."""
    amount: Optional[Decimal] = Field(default=None, ge=0)
    date: Optional[dt_date] = None
    project_id: Optional[int] = None
    category: Optional[ExpenseCategory] = None
    description: Optional[str] = None


class ExpenseResponse(ExpenseBase):
    """Schema for expense response."""
    id: int
    created_at: datetime
    updated_at: datetime
