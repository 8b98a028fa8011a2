"""Models package - Import all models for SQLAlchemy registration."""
from app.models.project import Project, ProjectStatus
from app.models.partner import Partner
from app.models.cashbox import Cashbox
from app.models.transaction import Transaction, TransactionType
from app.models.invoice import Invoice, InvoiceStatus
from app.models.revenue import Revenue
from app.models.expense import Expense, ExpenseCategory
from app.models.customer import Customer
from app.models.unit import Unit, UnitType, UnitStatus
from app.models.installment import Installment, InstallmentType, InstallmentStatus
from app.models.partner_unit import PartnerUnit
from app.models.returned_unit import ReturnedUnit, ResaleStatus
from app.models.customer_payment import CustomerPayment, PaymentType, PaymentMethod
from app.models.settlement import Settlement, SettlementRun

__all__ = [
    "Project",
    "ProjectStatus",
    "Partner",
    "Cashbox",
    "Transaction",
    "TransactionType",
    "Invoice",
    "InvoiceStatus",
    "Revenue",
    "Expense",
    "ExpenseCategory",
    "Customer",
    "Unit",
    "UnitType",
    "UnitStatus",
    "Installment",
    "InstallmentType",
    "InstallmentStatus",
    "PartnerUnit",
    "ReturnedUnit",
    "ResaleStatus",
    "CustomerPayment",
    "PaymentType",
    "PaymentMethod",
    "Settlement",
    "SettlementRun",
]
