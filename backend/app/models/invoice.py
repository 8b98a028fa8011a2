"""
Invoice model.
"""
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Integer, Text, Enum as SQLEnum
from app.db.base import BaseModel
import enum


class InvoiceStatus(str, enum.Enum):
    """Invoice payment status."""
    PAID = "paid"
    UNPAID = "unpaid"


class Invoice(BaseModel):
    """Invoice issued against a project, customer or partner."""
    __tablename__ = "invoices"
    
    invoice_number = Column(String(50), nullable=False, unique=True, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    status = Column(SQLEnum(InvoiceStatus), default=InvoiceStatus.UNPAID, nullable=False, index=True)
    due_date = Column(Date, nullable=False)
    linked_transaction_id = Column(Integer, ForeignKey("transactions.id"), nullable=True)
    linked_project_id = Column(Integer, ForeignKey("projects.id"), nullable=True, index=True)
    linked_customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    linked_partner_id = Column(Integer, ForeignKey("partners.id"), nullable=True)
    description = Column(Text, nullable=True)
