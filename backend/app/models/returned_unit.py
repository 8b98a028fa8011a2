"""
Returned unit model tracking cancelled sales through to resale.
"""
from sqlalchemy import Column, Text, Numeric, Date, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class ResaleStatus(str, enum.Enum):
    """Whether a returned unit has been sold again."""
    AVAILABLE = "available for resale"
    RESOLD = "resold"


class ReturnedUnit(BaseModel):
    """A unit handed back by its buyer, optionally completed by a partner."""
    __tablename__ = "returned_units"
    
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)
    return_reason = Column(Text, nullable=False)
    completing_partner_id = Column(Integer, ForeignKey("partners.id"), nullable=True, index=True)
    completion_date = Column(Date, nullable=True)
    completion_amount = Column(Numeric(15, 2), nullable=True)
    resale_status = Column(SQLEnum(ResaleStatus), default=ResaleStatus.AVAILABLE, nullable=False, index=True)
    
    # Relationships
    unit = relationship("Unit", back_populates="returns")
    completing_partner = relationship("Partner")
