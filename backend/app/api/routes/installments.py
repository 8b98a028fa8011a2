"""
Installment schedule routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.installment import Installment
from app.models.unit import Unit
from app.schemas.installment import InstallmentCreate, InstallmentUpdate, InstallmentResponse
from app.api.dependencies import get_or_404, ensure_exists, apply_update, changes_from
from app.services.report_service import overdue_installments_query

router = APIRouter(prefix="/installments", tags=["installments"])


@router.get("", response_model=List[InstallmentResponse])
async def list_installments(
    unit_id: Optional[int] = Query(None, alias="unitId"),
    overdue: bool = False,
    db: Session = Depends(get_db)
):
    """List installments for a unit, overdue ones, or all."""
    if unit_id is not None:
        query = db.query(Installment).filter(Installment.unit_id == unit_id)
    elif overdue:
        query = overdue_installments_query(db)
    else:
        query = db.query(Installment)
    return query.order_by(Installment.due_date, Installment.id).all()


@router.post("", response_model=InstallmentResponse, status_code=status.HTTP_201_CREATED)
async def create_installment(
    installment_data: InstallmentCreate,
    db: Session = Depends(get_db)
):
    """Schedule an installment against a unit."""
    ensure_exists(db, Unit, installment_data.unit_id)
    installment = Installment(**installment_data.model_dump())
    db.add(installment)
    db.commit()
    db.refresh(installment)
    return installment


@router.get("/{installment_id}", response_model=InstallmentResponse)
async def get_installment(installment_id: int, db: Session = Depends(get_db)):
    """Get an installment."""
    return get_or_404(db, Installment, installment_id)


@router.put("/{installment_id}", response_model=InstallmentResponse)
async def update_installment(
    installment_id: int,
    installment_data: InstallmentUpdate,
    db: Session = Depends(get_db)
):
    """Update an installment, e.g. to record its payment."""
    installment = get_or_404(db, Installment, installment_id)
    apply_update(installment, changes_from(
        installment_data, required=("type", "amount", "due_date", "status")
    ))
    db.commit()
    db.refresh(installment)
    return installment


@router.delete("/{installment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_installment(installment_id: int, db: Session = Depends(get_db)):
    """Delete an installment."""
    installment = get_or_404(db, Installment, installment_id)
    db.delete(installment)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
