"""
Cashbox model for named pools of funds.
"""
from sqlalchemy import Column, String, Numeric
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Cashbox(BaseModel):
    """Cashbox with an opening and a running balance."""
    __tablename__ = "cashboxes"
    
    name = Column(String(100), nullable=False, unique=True)
    initial_balance = Column(Numeric(15, 2), nullable=False, default=0)
    current_balance = Column(Numeric(15, 2), nullable=False, default=0)
    
    # Relationships
    transactions = relationship("Transaction", back_populates="cashbox")
