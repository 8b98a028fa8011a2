"""
Partner management routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.invoice import Invoice
from app.models.partner import Partner
from app.models.project import Project
from app.models.returned_unit import ReturnedUnit
from app.models.settlement import Settlement
from app.models.transaction import Transaction
from app.schemas.partner import PartnerCreate, PartnerUpdate, PartnerResponse
from app.api.dependencies import get_or_404, ensure_exists, ensure_unreferenced, apply_update, changes_from

router = APIRouter(prefix="/partners", tags=["partners"])

# Records that keep a partner in the books
LEDGER_REFERENCES = [
    (Transaction.linked_partner_id, "transactions"),
    (Invoice.linked_partner_id, "invoices"),
    (Settlement.partner_id, "settlements"),
]
DELETE_REFERENCES = LEDGER_REFERENCES + [(ReturnedUnit.completing_partner_id, "completed returned units")]


@router.get("", response_model=List[PartnerResponse])
async def list_partners(
    project_id: Optional[int] = Query(None, alias="projectId"),
    db: Session = Depends(get_db)
):
    """List partners, optionally for one project."""
    query = db.query(Partner)
    if project_id is not None:
        query = query.filter(Partner.project_id == project_id)
    return query.order_by(Partner.id).all()


@router.post("", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED)
async def create_partner(
    partner_data: PartnerCreate,
    db: Session = Depends(get_db)
):
    """Add a partner to a project."""
    ensure_exists(db, Project, partner_data.project_id)
    partner = Partner(**partner_data.model_dump())
    db.add(partner)
    db.commit()
    db.refresh(partner)
    return partner


@router.get("/{partner_id}", response_model=PartnerResponse)
async def get_partner(partner_id: int, db: Session = Depends(get_db)):
    """Get partner details."""
    return get_or_404(db, Partner, partner_id)


@router.put("/{partner_id}", response_model=PartnerResponse)
async def update_partner(
    partner_id: int,
    partner_data: PartnerUpdate,
    db: Session = Depends(get_db)
):
    """Update a partner."""
    partner = get_or_404(db, Partner, partner_id)
    changes = changes_from(partner_data, required=(
        "name", "project_id", "share_percentage", "previous_balance",
        "current_balance", "received_payments", "remaining_payments"
    ))
    new_project_id = changes.get("project_id")
    if new_project_id is not None and new_project_id != partner.project_id:
        ensure_exists(db, Project, new_project_id)
        ensure_unreferenced(db, "Partner", partner_id, LEDGER_REFERENCES)
    apply_update(partner, changes)
    db.commit()
    db.refresh(partner)
    return partner


@router.delete("/{partner_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_partner(partner_id: int, db: Session = Depends(get_db)):
    """Delete a partner that has no ledger history; its unit shares go with it."""
    partner = get_or_404(db, Partner, partner_id)
    ensure_unreferenced(db, "Partner", partner_id, DELETE_REFERENCES)
    db.delete(partner)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
