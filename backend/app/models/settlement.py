"""
Settlement models for partner equalization.
"""
from sqlalchemy import Column, Text, ForeignKey, Integer, Numeric, DateTime, JSON
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class SettlementRun(BaseModel):
    """One persisted settlement calculation for a project."""
    __tablename__ = "settlement_runs"
    
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    partner_count = Column(Integer, nullable=False)
    transaction_count = Column(Integer, nullable=False, default=0)
    average_net_paid = Column(Numeric(15, 2), nullable=False)
    calculation_data = Column(JSON, nullable=False)  # Per-partner net paid and deviation
    summary = Column(Text, nullable=True)
    
    # Relationships
    project = relationship("Project", back_populates="settlement_runs")
    settlements = relationship("Settlement", back_populates="settlement_run")
    transactions = relationship("Transaction", back_populates="settlement_run")


class Settlement(BaseModel):
    """Equalizing transfer owed to or by a partner."""
    __tablename__ = "settlements"
    
    partner_id = Column(Integer, ForeignKey("partners.id"), nullable=False, index=True)
    linked_project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    settlement_run_id = Column(Integer, ForeignKey("settlement_runs.id"), nullable=True, index=True)
    payment_amount = Column(Numeric(15, 2), nullable=False)
    previous_balance = Column(Numeric(15, 2), nullable=False)
    outstanding_amount = Column(Numeric(15, 2), nullable=False)
    final_balance = Column(Numeric(15, 2), nullable=False)
    date = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=True)
    
    # Relationships
    partner = relationship("Partner", back_populates="settlements")
    project = relationship("Project", back_populates="settlements")
    settlement_run = relationship("SettlementRun", back_populates="settlements")
