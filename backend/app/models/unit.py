"""
Property unit model.
"""
from sqlalchemy import Column, Numeric, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class UnitType(str, enum.Enum):
    """Unit usage type."""
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class UnitStatus(str, enum.Enum):
    """Unit sales status."""
    AVAILABLE = "available"
    SOLD = "sold"
    RETURNED = "returned"


class Unit(BaseModel):
    """Sellable property unit with its pricing breakdown."""
    __tablename__ = "units"
    
    type = Column(SQLEnum(UnitType), nullable=False)
    area = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(15, 2), nullable=False)
    down_payment = Column(Numeric(15, 2), nullable=False)
    reservation_fee = Column(Numeric(15, 2), nullable=True)
    commission = Column(Numeric(15, 2), nullable=True)
    maintenance_amount = Column(Numeric(15, 2), nullable=True)
    garage_share = Column(Numeric(15, 2), nullable=True)
    status = Column(SQLEnum(UnitStatus), default=UnitStatus.AVAILABLE, nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)
    
    # Relationships
    customer = relationship("Customer", back_populates="units")
    installments = relationship("Installment", back_populates="unit", cascade="all, delete-orphan")
    partner_shares = relationship("PartnerUnit", back_populates="unit", cascade="all, delete-orphan")
    returns = relationship("ReturnedUnit", back_populates="unit", cascade="all, delete-orphan")
    payments = relationship("CustomerPayment", back_populates="unit")
