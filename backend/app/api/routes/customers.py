"""
Customer management routes.
"""
from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.customer import Customer
from app.models.customer_payment import CustomerPayment
from app.models.invoice import Invoice
from app.models.transaction import Transaction
from app.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse
from app.api.dependencies import get_or_404, ensure_unreferenced, apply_update, changes_from

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerResponse])
async def list_customers(db: Session = Depends(get_db)):
    """List all customers."""
    return db.query(Customer).order_by(Customer.name, Customer.id).all()


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db)
):
    """Create a customer."""
    customer = Customer(**customer_data.model_dump())
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int, db: Session = Depends(get_db)):
    """Get customer details."""
    return get_or_404(db, Customer, customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db)
):
    """Update a customer."""
    customer = get_or_404(db, Customer, customer_id)
    apply_update(customer, changes_from(customer_data, required=("name", "phone")))
    db.commit()
    db.refresh(customer)
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    """Delete a customer with no financial records; their units become unassigned."""
    customer = get_or_404(db, Customer, customer_id)
    ensure_unreferenced(db, "Customer", customer_id, [
        (CustomerPayment.customer_id, "payments"),
        (Transaction.linked_customer_id, "transactions"),
        (Invoice.linked_customer_id, "invoices"),
    ])
    for unit in customer.units:
        unit.customer_id = None
    db.delete(customer)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
