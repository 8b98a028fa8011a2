"""
Project management routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.expense import Expense
from app.models.invoice import Invoice
from app.models.project import Project, ProjectStatus
from app.models.revenue import Revenue
from app.models.settlement import Settlement
from app.models.transaction import Transaction
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from app.api.dependencies import get_or_404, ensure_unreferenced, apply_update, changes_from
from app.api.routes.partners import DELETE_REFERENCES as PARTNER_REFERENCES

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    project_status: Optional[ProjectStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db)
):
    """List projects, optionally filtered by status."""
    query = db.query(Project)
    if project_status:
        query = query.filter(Project.status == project_status)
    return query.order_by(Project.id).all()


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    db: Session = Depends(get_db)
):
    """Create a new project."""
    project = Project(**project_data.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: int, db: Session = Depends(get_db)):
    """Get project details."""
    return get_or_404(db, Project, project_id)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    db: Session = Depends(get_db)
):
    """Update a project."""
    project = get_or_404(db, Project, project_id)
    apply_update(project, changes_from(
        project_data, required=("name", "start_date", "status", "total_share_percentage")
    ))
    db.commit()
    db.refresh(project)
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: int, db: Session = Depends(get_db)):
    """Delete a project and its partners once nothing in the ledger refers to them."""
    project = get_or_404(db, Project, project_id)
    ensure_unreferenced(db, "Project", project_id, [
        (Transaction.linked_project_id, "transactions"),
        (Invoice.linked_project_id, "invoices"),
        (Revenue.project_id, "revenue"),
        (Expense.project_id, "expenses"),
        (Settlement.linked_project_id, "settlements"),
    ])
    for partner in project.partners:
        ensure_unreferenced(db, "Partner", partner.id, PARTNER_REFERENCES)
    db.delete(project)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
