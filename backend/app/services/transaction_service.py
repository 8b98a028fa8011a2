"""
Transaction service keeping cashbox balances in step with receipts and payments.
"""
import logging
from decimal import Decimal
from sqlalchemy.orm import Session
from app.models.cashbox import Cashbox
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.models.partner import Partner
from app.models.project import Project
from app.models.transaction import Transaction, TransactionType
from app.schemas.transaction import TransactionCreate, TransactionUpdate
from app.services.exceptions import NotFoundError, ConflictError, BookkeepingError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("transaction_type", "amount", "date")


def _signed_amount(transaction_type: TransactionType, amount: Decimal) -> Decimal:
    """Cashbox effect of a transaction: receipts add, payments subtract."""
    amount = Decimal(amount)
    return amount if transaction_type == TransactionType.RECEIPT else -amount


def _get_cashbox(db: Session, cashbox_id: int) -> Cashbox:
    cashbox = db.query(Cashbox).filter(Cashbox.id == cashbox_id).first()
    if not cashbox:
        raise NotFoundError("Cashbox", cashbox_id)
    return cashbox


def _check_references(db: Session, values: dict):
    """Ensure every linked record named in ``values`` exists."""
    references = [
        ("linked_project_id", Project, "Project"),
        ("linked_partner_id", Partner, "Partner"),
        ("linked_customer_id", Customer, "Customer"),
        ("linked_invoice_id", Invoice, "Invoice"),
        ("cashbox_id", Cashbox, "Cashbox"),
    ]
    for field, model, label in references:
        ref_id = values.get(field)
        if ref_id is not None and not db.query(model.id).filter(model.id == ref_id).first():
            raise NotFoundError(label, ref_id)

    partner_id = values.get("linked_partner_id")
    project_id = values.get("linked_project_id")
    if partner_id is not None and project_id is not None:
        partner = db.query(Partner).filter(Partner.id == partner_id).first()
        if partner.project_id != project_id:
            raise BookkeepingError(f"Partner {partner_id} does not belong to project {project_id}")


def _apply_to_cashbox(db: Session, cashbox_id, transaction_type, amount, reverse: bool = False):
    if cashbox_id is None:
        return
    cashbox = _get_cashbox(db, cashbox_id)
    delta = _signed_amount(transaction_type, amount)
    if reverse:
        delta = -delta
    cashbox.current_balance = Decimal(cashbox.current_balance or 0) + delta


def create_transaction(db: Session, data: TransactionCreate) -> Transaction:
    """Record a transaction and move its cashbox balance."""
    values = data.model_dump()
    _check_references(db, values)

    transaction = Transaction(**values)
    db.add(transaction)
    _apply_to_cashbox(db, transaction.cashbox_id, transaction.transaction_type, transaction.amount)

    db.commit()
    db.refresh(transaction)
    logger.info(
        f"Recorded {transaction.transaction_type.value} {transaction.id} of {transaction.amount} "
        f"(cashbox={transaction.cashbox_id}, partner={transaction.linked_partner_id})"
    )
    return transaction


def update_transaction(db: Session, transaction: Transaction, data: TransactionUpdate) -> Transaction:
    """Apply a partial update, re-posting the cashbox effect."""
    if transaction.settlement_run_id is not None:
        raise ConflictError(
            f"Transaction {transaction.id} was counted by settlement run {transaction.settlement_run_id}"
        )

    changes = data.model_dump(exclude_unset=True)
    changes = {k: v for k, v in changes.items() if v is not None or k not in REQUIRED_FIELDS}
    merged = {
        "linked_project_id": transaction.linked_project_id,
        "linked_partner_id": transaction.linked_partner_id,
        "linked_customer_id": transaction.linked_customer_id,
        "linked_invoice_id": transaction.linked_invoice_id,
        "cashbox_id": transaction.cashbox_id,
    }
    merged.update({k: v for k, v in changes.items() if k in merged})
    _check_references(db, merged)

    _apply_to_cashbox(db, transaction.cashbox_id, transaction.transaction_type, transaction.amount, reverse=True)
    for field, value in changes.items():
        setattr(transaction, field, value)
    _apply_to_cashbox(db, transaction.cashbox_id, transaction.transaction_type, transaction.amount)

    db.commit()
    db.refresh(transaction)
    return transaction


def delete_transaction(db: Session, transaction: Transaction):
    """Delete a transaction and reverse its cashbox effect."""
    if transaction.settlement_run_id is not None:
        raise ConflictError(
            f"Transaction {transaction.id} was counted by settlement run {transaction.settlement_run_id}"
        )
    invoice = db.query(Invoice.id).filter(Invoice.linked_transaction_id == transaction.id).first()
    if invoice:
        raise ConflictError(f"Transaction {transaction.id} is linked to invoice {invoice.id}")

    transaction_id = transaction.id
    _apply_to_cashbox(db, transaction.cashbox_id, transaction.transaction_type, transaction.amount, reverse=True)
    db.delete(transaction)
    db.commit()
    logger.info(f"Deleted transaction {transaction_id}")
