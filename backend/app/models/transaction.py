"""
Transaction model for receipts and payments.
"""
from sqlalchemy import Column, Numeric, Date, ForeignKey, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class TransactionType(str, enum.Enum):
    """Direction of a transaction."""
    RECEIPT = "receipt"
    PAYMENT = "payment"


class Transaction(BaseModel):
    """A single receipt or payment, optionally attributed to a partner."""
    __tablename__ = "transactions"
    
    transaction_type = Column(SQLEnum(TransactionType), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    linked_invoice_id = Column(Integer, nullable=True)  # Checked in the service; invoices reference transactions
    linked_project_id = Column(Integer, ForeignKey("projects.id"), nullable=True, index=True)
    linked_customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    linked_partner_id = Column(Integer, ForeignKey("partners.id"), nullable=True, index=True)
    cashbox_id = Column(Integer, ForeignKey("cashboxes.id"), nullable=True, index=True)
    description = Column(Text, nullable=True)
    # Set once a settlement run has counted this transaction
    settlement_run_id = Column(Integer, ForeignKey("settlement_runs.id"), nullable=True, index=True)
    
    # Relationships
    cashbox = relationship("Cashbox", back_populates="transactions")
    settlement_run = relationship("SettlementRun", back_populates="transactions")
