"""
Customer model.
"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Customer(BaseModel):
    """Buyer of property units."""
    __tablename__ = "customers"
    
    name = Column(String(200), nullable=False)
    phone = Column(String(30), nullable=False)
    email = Column(String(100), nullable=True)
    address = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    
    # Relationships
    units = relationship("Unit", back_populates="customer")
    payments = relationship("CustomerPayment", back_populates="customer")
