"""
Installment model for unit payment schedules.
"""
from sqlalchemy import Column, Numeric, Date, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class InstallmentType(str, enum.Enum):
    """Installment frequency."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class InstallmentStatus(str, enum.Enum):
    """Installment payment status."""
    PAID = "paid"
    UNPAID = "unpaid"
    OVERDUE = "overdue"


class Installment(BaseModel):
    """A scheduled partial payment against a unit's total price."""
    __tablename__ = "installments"
    
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)
    type = Column(SQLEnum(InstallmentType), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    due_date = Column(Date, nullable=False, index=True)
    payment_date = Column(Date, nullable=True)
    status = Column(SQLEnum(InstallmentStatus), default=InstallmentStatus.UNPAID, nullable=False, index=True)
    
    # Relationships
    unit = relationship("Unit", back_populates="installments")
