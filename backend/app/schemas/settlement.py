"""
Pydantic schemas for Settlement entity.
"""
from pydantic import Field
from typing import List, Dict, Any, Optional
from datetime import datetime
from decimal import Decimal
from app.schemas.base import APIModel


class SettlementBase(APIModel):
    """Base settlement schema."""
    partner_id: int
    linked_project_id: int
    payment_amount: Decimal = Field(ge=0)
    previous_balance: Decimal
    outstanding_amount: Decimal = Field(ge=0)
    final_balance: Decimal
    notes: Optional[str] = None


class SettlementCreate(SettlementBase):
    """Schema for manually recorded settlement."""
    date: Optional[datetime] = None  # Defaults to now


class SettlementUpdate(APIModel):
    """Schema for settlement update."""
    payment_amount: Optional[Decimal] = Field(default=None, ge=0)
    previous_balance: Optional[Decimal] = None
    outstanding_amount: Optional[Decimal] = Field(default=None, ge=0)
    final_balance: Optional[Decimal] = None
    date: Optional[datetime] = None
    notes: Optional[str] = None


class SettlementResponse(SettlementBase):
    """Schema for settlement response."""
    id: int
    date: datetime
    settlement_run_id: Optional[int] = None
    created_at: datetime


class PartnerPositionResponse(APIModel):
    """Net position of one partner within a calculation."""
    partner_id: int
    net_paid: Decimal
    deviation: Decimal  # average - net paid; positive = owed to partner


class ProposedSettlement(SettlementBase):
    """Settlement computed but not persisted."""
    date: datetime


class SettlementPreview(APIModel):
    """Schema for a dry-run settlement calculation."""
    project_id: int
    partner_count: int
    average_net_paid: Decimal
    positions: List[PartnerPositionResponse] = []
    settlements: List[ProposedSettlement] = []


class SettlementRunResponse(APIModel):
    """Schema for a persisted settlement run."""
    id: int
    project_id: int
    partner_count: int
    transaction_count: int
    average_net_paid: Decimal
    calculation_data: Dict[str, Any]
    summary: Optional[str] = None
    created_at: datetime
