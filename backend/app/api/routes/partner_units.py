"""
Partner unit share routes.
"""
from decimal import Decimal
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.partner import Partner
from app.models.partner_unit import PartnerUnit
from app.models.unit import Unit
from app.schemas.partner_unit import PartnerUnitCreate, PartnerUnitUpdate, PartnerUnitResponse
from app.api.dependencies import get_or_404, ensure_exists, apply_update, changes_from
from app.services.exceptions import BookkeepingError, ConflictError

router = APIRouter(prefix="/partner-units", tags=["partner-units"])


def _check_unit_total(db: Session, unit_id: int, percentage: Decimal, exclude_id: int = None):
    """Shares held in one unit may not exceed 100%."""
    query = db.query(func.sum(PartnerUnit.partnership_percentage)).filter(PartnerUnit.unit_id == unit_id)
    if exclude_id is not None:
        query = query.filter(PartnerUnit.id != exclude_id)
    allocated = Decimal(query.scalar() or 0)
    if allocated + percentage > 100:
        raise BookkeepingError(
            f"Unit {unit_id} already has {allocated}% allocated; {percentage}% more exceeds 100%"
        )


@router.get("", response_model=List[PartnerUnitResponse])
async def list_partner_units(
    partner_id: Optional[int] = Query(None, alias="partnerId"),
    unit_id: Optional[int] = Query(None, alias="unitId"),
    db: Session = Depends(get_db)
):
    """List unit shares for a partner, a unit, or all."""
    query = db.query(PartnerUnit)
    if partner_id is not None:
        query = query.filter(PartnerUnit.partner_id == partner_id)
    if unit_id is not None:
        query = query.filter(PartnerUnit.unit_id == unit_id)
    return query.order_by(PartnerUnit.id).all()


@router.post("", response_model=PartnerUnitResponse, status_code=status.HTTP_201_CREATED)
async def create_partner_unit(
    share_data: PartnerUnitCreate,
    db: Session = Depends(get_db)
):
    """Give a partner a share in a unit."""
    ensure_exists(db, Partner, share_data.partner_id)
    ensure_exists(db, Unit, share_data.unit_id)
    existing = db.query(PartnerUnit.id).filter(
        PartnerUnit.partner_id == share_data.partner_id,
        PartnerUnit.unit_id == share_data.unit_id
    ).first()
    if existing:
        raise ConflictError(f"Partner {share_data.partner_id} already holds a share in unit {share_data.unit_id}")
    _check_unit_total(db, share_data.unit_id, share_data.partnership_percentage)

    share = PartnerUnit(**share_data.model_dump())
    db.add(share)
    db.commit()
    db.refresh(share)
    return share


@router.get("/{share_id}", response_model=PartnerUnitResponse)
async def get_partner_unit(share_id: int, db: Session = Depends(get_db)):
    """Get a unit share."""
    return get_or_404(db, PartnerUnit, share_id)


@router.put("/{share_id}", response_model=PartnerUnitResponse)
async def update_partner_unit(
    share_id: int,
    share_data: PartnerUnitUpdate,
    db: Session = Depends(get_db)
):
    """Change a partner's percentage in a unit."""
    share = get_or_404(db, PartnerUnit, share_id)
    changes = changes_from(share_data, required=("partnership_percentage",))
    if "partnership_percentage" in changes:
        _check_unit_total(db, share.unit_id, changes["partnership_percentage"], exclude_id=share_id)
    apply_update(share, changes)
    db.commit()
    db.refresh(share)
    return share


@router.delete("/{share_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_partner_unit(share_id: int, db: Session = Depends(get_db)):
    """Remove a unit share."""
    share = get_or_404(db, PartnerUnit, share_id)
    db.delete(share)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
