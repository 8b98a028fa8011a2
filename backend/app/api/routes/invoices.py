"""
Invoice management routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.customer import Customer
from app.models.invoice import Invoice, InvoiceStatus
from app.models.partner import Partner
from app.models.project import Project
from app.models.transaction import Transaction
from app.schemas.invoice import InvoiceCreate, InvoiceUpdate, InvoiceResponse
from app.api.dependencies import get_or_404, ensure_exists, ensure_unreferenced, apply_update, changes_from
from app.services.exceptions import ConflictError

router = APIRouter(prefix="/invoices", tags=["invoices"])


def _check_links(db: Session, values: dict):
    ensure_exists(db, Transaction, values.get("linked_transaction_id"))
    ensure_exists(db, Project, values.get("linked_project_id"))
    ensure_exists(db, Customer, values.get("linked_customer_id"))
    ensure_exists(db, Partner, values.get("linked_partner_id"))


def _check_number_free(db: Session, invoice_number: str, exclude_id: int = None):
    query = db.query(Invoice).filter(Invoice.invoice_number == invoice_number)
    if exclude_id is not None:
        query = query.filter(Invoice.id != exclude_id)
    if query.first():
        raise ConflictError(f"Invoice number '{invoice_number}' already exists")


@router.get("", response_model=List[InvoiceResponse])
async def list_invoices(
    invoice_status: Optional[InvoiceStatus] = Query(None, alias="status"),
    project_id: Optional[int] = Query(None, alias="projectId"),
    db: Session = Depends(get_db)
):
    """List invoices, optionally filtered by status or project."""
    query = db.query(Invoice)
    if invoice_status:
        query = query.filter(Invoice.status == invoice_status)
    if project_id is not None:
        query = query.filter(Invoice.linked_project_id == project_id)
    return query.order_by(Invoice.due_date, Invoice.id).all()


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_data: InvoiceCreate,
    db: Session = Depends(get_db)
):
    """Create an invoice."""
    values = invoice_data.model_dump()
    _check_links(db, values)
    _check_number_free(db, invoice_data.invoice_number)
    invoice = Invoice(**values)
    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    return invoice


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    """Get invoice details."""
    return get_or_404(db, Invoice, invoice_id)


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: int,
    invoice_data: InvoiceUpdate,
    db: Session = Depends(get_db)
):
    """Update an invoice."""
    invoice = get_or_404(db, Invoice, invoice_id)
    changes = changes_from(invoice_data, required=("invoice_number", "amount", "status", "due_date"))
    _check_links(db, changes)
    if "invoice_number" in changes:
        _check_number_free(db, changes["invoice_number"], exclude_id=invoice_id)
    apply_update(invoice, changes)
    db.commit()
    db.refresh(invoice)
    return invoice


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    """Delete an invoice no transaction points at."""
    invoice = get_or_404(db, Invoice, invoice_id)
    ensure_unreferenced(db, "Invoice", invoice_id, [(Transaction.linked_invoice_id, "transactions")])
    db.delete(invoice)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
