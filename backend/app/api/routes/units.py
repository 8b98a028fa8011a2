"""
Property unit routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.customer import Customer
from app.models.customer_payment import CustomerPayment
from app.models.unit import Unit, UnitStatus
from app.schemas.unit import UnitCreate, UnitUpdate, UnitResponse
from app.api.dependencies import get_or_404, ensure_exists, ensure_unreferenced, apply_update, changes_from

router = APIRouter(prefix="/units", tags=["units"])


@router.get("", response_model=List[UnitResponse])
async def list_units(
    unit_status: Optional[UnitStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db)
):
    """List units, optionally filtered by status."""
    query = db.query(Unit)
    if unit_status:
        query = query.filter(Unit.status == unit_status)
    return query.order_by(Unit.id).all()


@router.post("", response_model=UnitResponse, status_code=status.HTTP_201_CREATED)
async def create_unit(
    unit_data: UnitCreate,
    db: Session = Depends(get_db)
):
    """Create a unit."""
    ensure_exists(db, Customer, unit_data.customer_id)
    unit = Unit(**unit_data.model_dump())
    db.add(unit)
    db.commit()
    db.refresh(unit)
    return unit


@router.get("/{unit_id}", response_model=UnitResponse)
async def get_unit(unit_id: int, db: Session = Depends(get_db)):
    """Get unit details."""
    return get_or_404(db, Unit, unit_id)


@router.put("/{unit_id}", response_model=UnitResponse)
async def update_unit(
    unit_id: int,
    unit_data: UnitUpdate,
    db: Session = Depends(get_db)
):
    """Update a unit."""
    unit = get_or_404(db, Unit, unit_id)
    changes = changes_from(unit_data, required=("type", "area", "total_price", "down_payment", "status"))
    ensure_exists(db, Customer, changes.get("customer_id"))
    apply_update(unit, changes)
    db.commit()
    db.refresh(unit)
    return unit


@router.delete("/{unit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_unit(unit_id: int, db: Session = Depends(get_db)):
    """Delete a unit with its installments, shares and return records; refused once customers have paid."""
    unit = get_or_404(db, Unit, unit_id)
    ensure_unreferenced(db, "Unit", unit_id, [(CustomerPayment.unit_id, "customer payments")])
    db.delete(unit)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
