"""
Partner model for project stakeholders.
"""
from sqlalchemy import Column, String, Numeric, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Partner(BaseModel):
    """Partner holding a profit share in a single project."""
    __tablename__ = "partners"
    
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    partnership_type = Column(String(50), nullable=True)  # Free text, e.g. "50/50"
    share_percentage = Column(Numeric(5, 2), nullable=False, default=0)
    previous_balance = Column(Numeric(15, 2), nullable=False, default=0)
    current_balance = Column(Numeric(15, 2), nullable=False, default=0)
    received_payments = Column(Numeric(15, 2), nullable=False, default=0)
    remaining_payments = Column(Numeric(15, 2), nullable=False, default=0)
    
    # Relationships
    project = relationship("Project", back_populates="partners")
    settlements = relationship("Settlement", back_populates="partner", cascade="all, delete-orphan")
    unit_shares = relationship("PartnerUnit", back_populates="partner", cascade="all, delete-orphan")
