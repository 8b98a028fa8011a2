"""
Expense model for tracking project spending.
"""
from sqlalchemy import Column, Numeric, Date, ForeignKey, Integer, Text, Enum as SQLEnum
from app.db.base import BaseModel
import enum


class ExpenseCategory(str, enum.Enum):
    """Fixed set of expense categories."""
    BUILDING_MATERIALS = "building materials"
    LABOR_WAGES = "labor wages"
    ADMINISTRATIVE = "administrative"
    ELECTRICITY = "electricity"
    WATER = "water"
    MAINTENANCE = "maintenance"
    TRANSPORT = "transport"
    OTHER = "other"


class Expense(BaseModel):
    """Expense model representing a single spending event."""
    __tablename__ = "expenses"
    
    amount = Column(Numeric(15, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True, index=True)
    category = Column(SQLEnum(ExpenseCategory), default=ExpenseCategory.OTHER, nullable=False, index=True)
    description = Column(Text, nullable=True)
