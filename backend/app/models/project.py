"""
Project model for real-estate partnership projects.
"""
from sqlalchemy import Column, String, Date, Numeric, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
import enum


class ProjectStatus(str, enum.Enum):
    """Project status enumeration."""
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    SUSPENDED = "Suspended"


class Project(BaseModel):
    """Project model grouping partners, transactions and settlements."""
    __tablename__ = "projects"
    
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=True)
    status = Column(SQLEnum(ProjectStatus), default=ProjectStatus.IN_PROGRESS, nullable=False)
    total_share_percentage = Column(Numeric(5, 2), nullable=False, default=100)
    total_budget = Column(Numeric(15, 2), nullable=True)
    
    # Relationships
    partners = relationship("Partner", back_populates="project", cascade="all, delete-orphan")
    settlements = relationship("Settlement", back_populates="project", cascade="all, delete-orphan")
    settlement_runs = relationship("SettlementRun", back_populates="project", cascade="all, delete-orphan")
