"""
Dashboard statistics and tabular reports.
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from sqlalchemy import func, extract
from sqlalchemy.orm import Session
from app.core.config import settings
from app.models.cashbox import Cashbox
from app.models.customer import Customer
from app.models.expense import Expense, ExpenseCategory
from app.models.installment import Installment, InstallmentStatus
from app.models.partner import Partner
from app.models.project import Project
from app.models.revenue import Revenue
from app.models.transaction import Transaction, TransactionType
from app.models.unit import Unit, UnitStatus
from app.schemas.report import (
    DashboardStats, MonthlyRevenueItem, MonthlyRevenueReport, ProjectReport,
    PartnerNetPaid, CategoryExpenseItem, CategoryExpenseReport, PartnerBalanceItem
)
from app.services.exceptions import ProjectNotFoundError
from app.services.settlement_service import calculate_net_paid


def _sum(db: Session, column, *criteria) -> Decimal:
    total = db.query(func.sum(column)).filter(*criteria).scalar()
    return Decimal(total) if total is not None else Decimal(0)


def overdue_installments_query(db: Session, today: Optional[date] = None):
    """Installments marked overdue, or unpaid past their due date."""
    today = today or date.today()
    return db.query(Installment).filter(
        (Installment.status == InstallmentStatus.OVERDUE) |
        ((Installment.status == InstallmentStatus.UNPAID) & (Installment.due_date < today))
    )


def get_dashboard_stats(db: Session) -> DashboardStats:
    """Aggregate figures across all records."""
    unit_counts = dict(
        db.query(Unit.status, func.count(Unit.id)).group_by(Unit.status).all()
    )
    total_revenue = _sum(db, Revenue.amount)
    total_expenses = _sum(db, Expense.amount)

    return DashboardStats(
        total_units=sum(unit_counts.values()),
        available_units=unit_counts.get(UnitStatus.AVAILABLE, 0),
        sold_units=unit_counts.get(UnitStatus.SOLD, 0),
        returned_units=unit_counts.get(UnitStatus.RETURNED, 0),
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_profit=total_revenue - total_expenses,
        pending_payments=_sum(db, Installment.amount, Installment.status != InstallmentStatus.PAID),
        overdue_installments=overdue_installments_query(db).count(),
        cashbox_initial_total=_sum(db, Cashbox.initial_balance),
        cashbox_current_total=_sum(db, Cashbox.current_balance),
        project_count=db.query(func.count(Project.id)).scalar() or 0,
        partner_count=db.query(func.count(Partner.id)).scalar() or 0,
        customer_count=db.query(func.count(Customer.id)).scalar() or 0
    )


def get_monthly_revenue(db: Session, year: int) -> MonthlyRevenueReport:
    """Revenue and expenses per calendar month of ``year``."""
    revenue_by_month = dict(
        db.query(extract("month", Revenue.date), func.sum(Revenue.amount))
        .filter(extract("year", Revenue.date) == year)
        .group_by(extract("month", Revenue.date))
        .all()
    )
    expenses_by_month = dict(
        db.query(extract("month", Expense.date), func.sum(Expense.amount))
        .filter(extract("year", Expense.date) == year)
        .group_by(extract("month", Expense.date))
        .all()
    )

    months = []
    for month in range(1, 13):
        months.append(MonthlyRevenueItem(
            month=month,
            revenue=Decimal(revenue_by_month.get(month) or 0),
            expenses=Decimal(expenses_by_month.get(month) or 0)
        ))
    return MonthlyRevenueReport(year=year, currency=settings.DEFAULT_CURRENCY, months=months)


def get_project_report(db: Session, project_id: int) -> ProjectReport:
    """Income, spending and partner net paid for one project."""
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        raise ProjectNotFoundError(project_id)

    total_revenue = _sum(db, Revenue.amount, Revenue.project_id == project_id)
    total_expenses = _sum(db, Expense.amount, Expense.project_id == project_id)
    total_receipts = _sum(
        db, Transaction.amount,
        Transaction.linked_project_id == project_id,
        Transaction.transaction_type == TransactionType.RECEIPT
    )
    total_payments = _sum(
        db, Transaction.amount,
        Transaction.linked_project_id == project_id,
        Transaction.transaction_type == TransactionType.PAYMENT
    )

    partners = []
    for partner in db.query(Partner).filter(Partner.project_id == project_id).order_by(Partner.id).all():
        transactions = db.query(Transaction).filter(
            Transaction.linked_project_id == project_id,
            Transaction.linked_partner_id == partner.id
        ).all()
        partners.append(PartnerNetPaid(
            partner_id=partner.id,
            name=partner.name,
            share_percentage=partner.share_percentage,
            net_paid=calculate_net_paid(transactions)
        ))

    return ProjectReport(
        project_id=project.id,
        name=project.name,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        total_receipts=total_receipts,
        total_payments=total_payments,
        net=total_revenue + total_receipts - total_expenses - total_payments,
        partners=partners
    )


def get_expenses_by_category(db: Session, project_id: Optional[int] = None) -> CategoryExpenseReport:
    """Expense totals per category, largest first."""
    query = db.query(Expense.category, func.sum(Expense.amount), func.count(Expense.id))
    if project_id is not None:
        query = query.filter(Expense.project_id == project_id)
    rows = query.group_by(Expense.category).all()

    total = sum((Decimal(amount or 0) for _, amount, _ in rows), Decimal(0))
    categories = []
    for category, amount, count in rows:
        amount = Decimal(amount or 0)
        categories.append(CategoryExpenseItem(
            category=ExpenseCategory(category),
            total_amount=amount,
            expense_count=count,
            percentage=float(amount / total * 100) if total > 0 else 0.0
        ))
    categories.sort(key=lambda item: item.total_amount, reverse=True)

    return CategoryExpenseReport(project_id=project_id, total_expenses=total, categories=categories)


def get_partner_balances(db: Session, project_id: Optional[int] = None):
    """Balances of every partner with the net paid no run has counted yet."""
    query = db.query(Partner)
    if project_id is not None:
        query = query.filter(Partner.project_id == project_id)

    items = []
    for partner in query.order_by(Partner.project_id, Partner.id).all():
        unsettled = db.query(Transaction).filter(
            Transaction.linked_project_id == partner.project_id,
            Transaction.linked_partner_id == partner.id,
            Transaction.settlement_run_id.is_(None)
        ).all()
        items.append(PartnerBalanceItem(
            partner_id=partner.id,
            name=partner.name,
            project_id=partner.project_id,
            share_percentage=partner.share_percentage,
            previous_balance=partner.previous_balance,
            current_balance=partner.current_balance,
            unsettled_net_paid=calculate_net_paid(unsettled)
        ))
    return items
