"""
Customer payment routes.
"""
from datetime import date
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.customer import Customer
from app.models.customer_payment import CustomerPayment
from app.models.unit import Unit
from app.schemas.customer_payment import CustomerPaymentCreate, CustomerPaymentUpdate, CustomerPaymentResponse
from app.api.dependencies import get_or_404, ensure_exists, apply_update, changes_from

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=List[CustomerPaymentResponse])
async def list_payments(
    unit_id: Optional[int] = Query(None, alias="unitId"),
    customer_id: Optional[int] = Query(None, alias="customerId"),
    db: Session = Depends(get_db)
):
    """List customer payments for a unit, a customer, or all, newest first."""
    query = db.query(CustomerPayment)
    if unit_id is not None:
        query = query.filter(CustomerPayment.unit_id == unit_id)
    if customer_id is not None:
        query = query.filter(CustomerPayment.customer_id == customer_id)
    return query.order_by(CustomerPayment.payment_date.desc(), CustomerPayment.id.desc()).all()


@router.post("", response_model=CustomerPaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: CustomerPaymentCreate,
    db: Session = Depends(get_db)
):
    """Record a payment from a customer towards a unit."""
    ensure_exists(db, Unit, payment_data.unit_id)
    ensure_exists(db, Customer, payment_data.customer_id)

    values = payment_data.model_dump()
    if values.get("payment_date") is None:
        values["payment_date"] = date.today()
    payment = CustomerPayment(**values)
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return payment


@router.get("/{payment_id}", response_model=CustomerPaymentResponse)
async def get_payment(payment_id: int, db: Session = Depends(get_db)):
    """Get a customer payment."""
    return get_or_404(db, CustomerPayment, payment_id)


@router.put("/{payment_id}", response_model=CustomerPaymentResponse)
async def update_payment(
    payment_id: int,
    payment_data: CustomerPaymentUpdate,
    db: Session = Depends(get_db)
):
    """Update a customer payment."""
    payment = get_or_404(db, CustomerPayment, payment_id)
    apply_update(payment, changes_from(payment_data, required=("amount", "payment_type", "payment_date")))
    db.commit()
    db.refresh(payment)
    return payment


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment(payment_id: int, db: Session = Depends(get_db)):
    """Delete a customer payment."""
    payment = get_or_404(db, CustomerPayment, payment_id)
    db.delete(payment)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
