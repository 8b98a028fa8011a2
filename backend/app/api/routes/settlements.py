"""
Settlement management routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.partner import Partner
from app.models.project import Project
from app.models.settlement import Settlement, SettlementRun
from app.schemas.settlement import (
    SettlementCreate, SettlementUpdate, SettlementResponse,
    SettlementPreview, SettlementRunResponse
)
from app.api.dependencies import get_or_404, apply_update, changes_from
from app.services.exceptions import BookkeepingError
from app.services.settlement_service import calculate_settlements, preview_settlements, utc_now
from app.services.settlement_store import SqlSettlementStore

router = APIRouter(prefix="/settlements", tags=["settlements"])


@router.get("", response_model=List[SettlementResponse])
async def list_settlements(
    project_id: Optional[int] = Query(None, alias="projectId"),
    partner_id: Optional[int] = Query(None, alias="partnerId"),
    db: Session = Depends(get_db)
):
    """List settlements, newest first."""
    query = db.query(Settlement)
    if project_id is not None:
        query = query.filter(Settlement.linked_project_id == project_id)
    if partner_id is not None:
        query = query.filter(Settlement.partner_id == partner_id)
    return query.order_by(Settlement.date.desc(), Settlement.id.desc()).all()


@router.post("", response_model=SettlementResponse, status_code=status.HTTP_201_CREATED)
async def create_settlement(
    settlement_data: SettlementCreate,
    db: Session = Depends(get_db)
):
    """Record a settlement by hand."""
    partner = get_or_404(db, Partner, settlement_data.partner_id)
    get_or_404(db, Project, settlement_data.linked_project_id)
    if partner.project_id != settlement_data.linked_project_id:
        raise BookkeepingError(
            f"Partner {partner.id} does not belong to project {settlement_data.linked_project_id}"
        )
    
    values = settlement_data.model_dump()
    if values.get("date") is None:
        values["date"] = utc_now()
    settlement = Settlement(**values)
    db.add(settlement)
    db.commit()
    db.refresh(settlement)
    return settlement


@router.post("/calculate/{project_id}", response_model=List[SettlementResponse])
async def trigger_settlement(project_id: int, db: Session = Depends(get_db)):
    """Calculate, apply and store settlements for a project."""
    return calculate_settlements(project_id, SqlSettlementStore(db))


@router.get("/calculate/{project_id}/preview", response_model=SettlementPreview)
async def preview_settlement(project_id: int, db: Session = Depends(get_db)):
    """Calculate settlements for a project without storing them."""
    calculation = preview_settlements(project_id, SqlSettlementStore(db))
    return SettlementPreview.model_validate(calculation)


@router.get("/runs", response_model=List[SettlementRunResponse])
async def list_settlement_runs(
    project_id: Optional[int] = Query(None, alias="projectId"),
    db: Session = Depends(get_db)
):
    """List settlement runs, newest first."""
    query = db.query(SettlementRun)
    if project_id is not None:
        query = query.filter(SettlementRun.project_id == project_id)
    return query.order_by(SettlementRun.id.desc()).all()


@router.get("/{settlement_id}", response_model=SettlementResponse)
async def get_settlement(settlement_id: int, db: Session = Depends(get_db)):
    """Get a settlement."""
    return get_or_404(db, Settlement, settlement_id)


@router.put("/{settlement_id}", response_model=SettlementResponse)
async def update_settlement(
    settlement_id: int,
    settlement_data: SettlementUpdate,
    db: Session = Depends(get_db)
):
    """Update a settlement record."""
    settlement = get_or_404(db, Settlement, settlement_id)
    apply_update(settlement, changes_from(settlement_data, required=(
        "payment_amount", "previous_balance", "outstanding_amount", "final_balance", "date"
    )))
    db.commit()
    db.refresh(settlement)
    return settlement


@router.delete("/{settlement_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_settlement(settlement_id: int, db: Session = Depends(get_db)):
    """Delete a settlement record. Partner balances are left as they are."""
    settlement = get_or_404(db, Settlement, settlement_id)
    db.delete(settlement)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
