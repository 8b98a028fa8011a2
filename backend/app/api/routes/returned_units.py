"""
Returned unit routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.partner import Partner
from app.models.returned_unit import ReturnedUnit, ResaleStatus
from app.models.unit import Unit, UnitStatus
from app.schemas.returned_unit import ReturnedUnitCreate, ReturnedUnitUpdate, ReturnedUnitResponse
from app.api.dependencies import get_or_404, ensure_exists, apply_update, changes_from

router = APIRouter(prefix="/returned-units", tags=["returned-units"])


def _sync_unit_status(unit: Unit, resale_status: ResaleStatus):
    unit.status = UnitStatus.SOLD if resale_status == ResaleStatus.RESOLD else UnitStatus.RETURNED


@router.get("", response_model=List[ReturnedUnitResponse])
async def list_returned_units(
    resale_status: Optional[ResaleStatus] = Query(None, alias="resaleStatus"),
    db: Session = Depends(get_db)
):
    """List returned units, newest first."""
    query = db.query(ReturnedUnit)
    if resale_status:
        query = query.filter(ReturnedUnit.resale_status == resale_status)
    return query.order_by(ReturnedUnit.id.desc()).all()


@router.post("", response_model=ReturnedUnitResponse, status_code=status.HTTP_201_CREATED)
async def create_returned_unit(
    return_data: ReturnedUnitCreate,
    db: Session = Depends(get_db)
):
    """Record a unit return; the unit is marked returned until resold."""
    unit = get_or_404(db, Unit, return_data.unit_id)
    ensure_exists(db, Partner, return_data.completing_partner_id)

    returned = ReturnedUnit(**return_data.model_dump())
    db.add(returned)
    _sync_unit_status(unit, returned.resale_status)
    db.commit()
    db.refresh(returned)
    return returned


@router.get("/{returned_id}", response_model=ReturnedUnitResponse)
async def get_returned_unit(returned_id: int, db: Session = Depends(get_db)):
    """Get a returned unit record."""
    return get_or_404(db, ReturnedUnit, returned_id)


@router.put("/{returned_id}", response_model=ReturnedUnitResponse)
async def update_returned_unit(
    returned_id: int,
    return_data: ReturnedUnitUpdate,
    db: Session = Depends(get_db)
):
    """Update completion or resale details of a returned unit."""
    returned = get_or_404(db, ReturnedUnit, returned_id)
    changes = changes_from(return_data, required=("return_reason", "resale_status"))
    ensure_exists(db, Partner, changes.get("completing_partner_id"))
    apply_update(returned, changes)
    if "resale_status" in changes:
        _sync_unit_status(returned.unit, returned.resale_status)
    db.commit()
    db.refresh(returned)
    return returned


@router.delete("/{returned_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_returned_unit(returned_id: int, db: Session = Depends(get_db)):
    """Delete a returned unit record. The unit keeps its current status."""
    returned = get_or_404(db, ReturnedUnit, returned_id)
    db.delete(returned)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
