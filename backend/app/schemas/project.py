"""
Pydantic schemas for Project entity.
"""
from pydantic import Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from app.models.project import ProjectStatus
from app.schemas.base import APIModel


class ProjectBase(APIModel):
    """Base project schema."""
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    status: ProjectStatus = ProjectStatus.IN_PROGRESS
    total_share_percentage: Decimal = Field(default=Decimal(100), ge=0, le=100)
    total_budget: Optional[Decimal] = Field(default=None, ge=0)


class ProjectCreate(ProjectBase):
    """Schema for project creation."""
    pass


class ProjectUpdate(APIModel):
    """Schema for project update."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[ProjectStatus] = None
    total_share_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)
    total_budget: Optional[Decimal] = Field(default=None, ge=0)


class ProjectResponse(ProjectBase):
    """Schema for project response."""
    id: int
    created_at: datetime
    updated_at: datetime
