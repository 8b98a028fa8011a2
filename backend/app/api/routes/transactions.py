"""
Transaction (receipt/payment) routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.transaction import Transaction, TransactionType
from app.schemas.transaction import TransactionCreate, TransactionUpdate, TransactionResponse
from app.api.dependencies import get_or_404
from app.services import transaction_service

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionResponse])
async def list_transactions(
    project_id: Optional[int] = Query(None, alias="projectId"),
    partner_id: Optional[int] = Query(None, alias="partnerId"),
    cashbox_id: Optional[int] = Query(None, alias="cashboxId"),
    transaction_type: Optional[TransactionType] = Query(None, alias="transactionType"),
    db: Session = Depends(get_db)
):
    """List transactions with optional filters."""
    query = db.query(Transaction)
    if project_id is not None:
        query = query.filter(Transaction.linked_project_id == project_id)
    if partner_id is not None:
        query = query.filter(Transaction.linked_partner_id == partner_id)
    if cashbox_id is not None:
        query = query.filter(Transaction.cashbox_id == cashbox_id)
    if transaction_type is not None:
        query = query.filter(Transaction.transaction_type == transaction_type)
    return query.order_by(Transaction.date, Transaction.id).all()


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_data: TransactionCreate,
    db: Session = Depends(get_db)
):
    """Record a receipt or payment."""
    return transaction_service.create_transaction(db, transaction_data)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Get transaction details."""
    return get_or_404(db, Transaction, transaction_id)


@router.put("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    db: Session = Depends(get_db)
):
    """Update a transaction that no settlement run has counted."""
    transaction = get_or_404(db, Transaction, transaction_id)
    return transaction_service.update_transaction(db, transaction, transaction_data)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Delete a transaction that no settlement run has counted."""
    transaction = get_or_404(db, Transaction, transaction_id)
    transaction_service.delete_transaction(db, transaction)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
