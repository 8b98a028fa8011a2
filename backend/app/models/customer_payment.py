"""
Customer payment model for money received against a unit.
"""
from sqlalchemy import Column, Text, Numeric, Date, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class PaymentType(str, enum.Enum):
    """What a customer payment covers."""
    DOWN_PAYMENT = "down payment"
    INSTALLMENT = "installment"
    ADDITIONAL_FEES = "additional fees"


class PaymentMethod(str, enum.Enum):
    """How a customer paid."""
    CASH = "cash"
    TRANSFER = "transfer"
    CHEQUE = "cheque"


class CustomerPayment(BaseModel):
    """A payment made by a customer towards a unit."""
    __tablename__ = "customer_payments"
    
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    payment_type = Column(SQLEnum(PaymentType), nullable=False)
    payment_method = Column(SQLEnum(PaymentMethod), nullable=True)
    payment_date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)
    
    # Relationships
    unit = relationship("Unit", back_populates="payments")
    customer = relationship("Customer", back_populates="payments")
