"""
Revenue model.
"""
from sqlalchemy import Column, Numeric, Date, ForeignKey, Integer, Text
from app.db.base import BaseModel


class Revenue(BaseModel):
    """Income recorded against a project."""
    __tablename__ = "revenue"
    
    amount = Column(Numeric(15, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True, index=True)
    description = Column(Text, nullable=True)
