"""
Partner unit share model.
"""
from sqlalchemy import Column, Numeric, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class PartnerUnit(BaseModel):
    """A partner's percentage stake in a single unit."""
    __tablename__ = "partner_units"
    __table_args__ = (
        UniqueConstraint("partner_id", "unit_id", name="uq_partner_unit"),
    )
    
    partner_id = Column(Integer, ForeignKey("partners.id"), nullable=False, index=True)
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)
    partnership_percentage = Column(Numeric(5, 2), nullable=False)
    
    # Relationships
    partner = relationship("Partner", back_populates="unit_shares")
    unit = relationship("Unit", back_populates="partner_shares")
