"""
Revenue routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.project import Project
from app.models.revenue import Revenue
from app.schemas.revenue import RevenueCreate, RevenueUpdate, RevenueResponse
from app.api.dependencies import get_or_404, ensure_exists, apply_update, changes_from

router = APIRouter(prefix="/revenue", tags=["revenue"])


@router.get("", response_model=List[RevenueResponse])
async def list_revenue(
    project_id: Optional[int] = Query(None, alias="projectId"),
    db: Session = Depends(get_db)
):
    """List revenue records, newest first."""
    query = db.query(Revenue)
    if project_id is not None:
        query = query.filter(Revenue.project_id == project_id)
    return query.order_by(Revenue.date.desc(), Revenue.id.desc()).all()


@router.post("", response_model=RevenueResponse, status_code=status.HTTP_201_CREATED)
async def create_revenue(
    revenue_data: RevenueCreate,
    db: Session = Depends(get_db)
):
    """Record revenue."""
    ensure_exists(db, Project, revenue_data.project_id)
    revenue = Revenue(**revenue_data.model_dump())
    db.add(revenue)
    db.commit()
    db.refresh(revenue)
    return revenue


@router.get("/{revenue_id}", response_model=RevenueResponse)
async def get_revenue(revenue_id: int, db: Session = Depends(get_db)):
    """Get a revenue record."""
    return get_or_404(db, Revenue, revenue_id)


@router.put("/{revenue_id}", response_model=RevenueResponse)
async def update_revenue(
    revenue_id: int,
    revenue_data: RevenueUpdate,
    db: Session = Depends(get_db)
):
    """Update a revenue record."""
    revenue = get_or_404(db, Revenue, revenue_id)
    changes = changes_from(revenue_data, required=("amount", "date"))
    ensure_exists(db, Project, changes.get("project_id"))
    apply_update(revenue, changes)
    db.commit()
    db.refresh(revenue)
    return revenue


@router.delete("/{revenue_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_revenue(revenue_id: int, db: Session = Depends(get_db)):
    """Delete a revenue record."""
    revenue = get_or_404(db, Revenue, revenue_id)
    db.delete(revenue)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
