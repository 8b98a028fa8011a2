"""
Pydantic schemas for dashboard statistics and reports.
"""
from typing import List, Optional
from decimal import Decimal
from app.models.expense import ExpenseCategory
from app.schemas.base import APIModel


class DashboardStats(APIModel):
    """Aggregate figures for the dashboard."""
    total_units: int
    available_units: int
    sold_units: int
    returned_units: int
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    pending_payments: Decimal  # Sum of unpaid installments
    overdue_installments: int
    cashbox_initial_total: Decimal
    cashbox_current_total: Decimal
    project_count: int
    partner_count: int
    customer_count: int


class MonthlyRevenueItem(APIModel):
    """Revenue and expenses for one calendar month."""
    month: int
    revenue: Decimal
    expenses: Decimal


class MonthlyRevenueReport(APIModel):
    """Twelve monthly buckets for a year."""
    year: int
    currency: str
    months: List[MonthlyRevenueItem]


class PartnerNetPaid(APIModel):
    """Partner net paid over all of a project's transactions."""
    partner_id: int
    name: str
    share_percentage: Decimal
    net_paid: Decimal


class ProjectReport(APIModel):
    """Financial summary of one project."""
    project_id: int
    name: str
    total_revenue: Decimal
    total_expenses: Decimal
    total_receipts: Decimal
    total_payments: Decimal
    net: Decimal  # revenue + receipts - expenses - payments
    partners: List[PartnerNetPaid] = []


class CategoryExpenseItem(APIModel):
    """Expense totals for one category."""
    category: ExpenseCategory
    total_amount: Decimal
    expense_count: int
    percentage: float  # Percentage of total expenses (0-100)


class CategoryExpenseReport(APIModel):
    """Expense breakdown by category."""
    project_id: Optional[int] = None
    total_expenses: Decimal
    categories: List[CategoryExpenseItem]


class PartnerBalanceItem(APIModel):
    """A partner's balances and what is still unsettled."""
    partner_id: int
    name: str
    project_id: int
    share_percentage: Decimal
    previous_balance: Decimal
    current_balance: Decimal
    unsettled_net_paid: Decimal  # Net paid over transactions no run has counted yet
