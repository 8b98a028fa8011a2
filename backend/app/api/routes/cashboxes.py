"""
Cashbox management routes.
"""
from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.cashbox import Cashbox
from app.models.transaction import Transaction
from app.schemas.cashbox import CashboxCreate, CashboxUpdate, CashboxResponse
from app.api.dependencies import get_or_404, ensure_unreferenced, apply_update, changes_from
from app.services.exceptions import ConflictError

router = APIRouter(prefix="/cashboxes", tags=["cashboxes"])


def _check_name_free(db: Session, name: str, exclude_id: int = None):
    query = db.query(Cashbox).filter(Cashbox.name == name)
    if exclude_id is not None:
        query = query.filter(Cashbox.id != exclude_id)
    if query.first():
        raise ConflictError(f"Cashbox '{name}' already exists")


@router.get("", response_model=List[CashboxResponse])
async def list_cashboxes(db: Session = Depends(get_db)):
    """List all cashboxes."""
    return db.query(Cashbox).order_by(Cashbox.id).all()


@router.post("", response_model=CashboxResponse, status_code=status.HTTP_201_CREATED)
async def create_cashbox(
    cashbox_data: CashboxCreate,
    db: Session = Depends(get_db)
):
    """Create a cashbox; its running balance starts at the initial balance."""
    _check_name_free(db, cashbox_data.name)
    current_balance = cashbox_data.current_balance
    if current_balance is None:
        current_balance = cashbox_data.initial_balance
    cashbox = Cashbox(
        name=cashbox_data.name,
        initial_balance=cashbox_data.initial_balance,
        current_balance=current_balance
    )
    db.add(cashbox)
    db.commit()
    db.refresh(cashbox)
    return cashbox


@router.get("/{cashbox_id}", response_model=CashboxResponse)
async def get_cashbox(cashbox_id: int, db: Session = Depends(get_db)):
    """Get cashbox details."""
    return get_or_404(db, Cashbox, cashbox_id)


@router.put("/{cashbox_id}", response_model=CashboxResponse)
async def update_cashbox(
    cashbox_id: int,
    cashbox_data: CashboxUpdate,
    db: Session = Depends(get_db)
):
    """Update a cashbox."""
    cashbox = get_or_404(db, Cashbox, cashbox_id)
    changes = changes_from(cashbox_data, required=("name", "initial_balance", "current_balance"))
    if "name" in changes:
        _check_name_free(db, changes["name"], exclude_id=cashbox_id)
    apply_update(cashbox, changes)
    db.commit()
    db.refresh(cashbox)
    return cashbox


@router.delete("/{cashbox_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cashbox(cashbox_id: int, db: Session = Depends(get_db)):
    """Delete a cashbox that no transaction uses."""
    cashbox = get_or_404(db, Cashbox, cashbox_id)
    ensure_unreferenced(db, "Cashbox", cashbox_id, [(Transaction.cashbox_id, "transactions")])
    db.delete(cashbox)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
