"""
Dashboard statistics and report routes.
"""
from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.schemas.report import (
    DashboardStats, MonthlyRevenueReport, ProjectReport,
    CategoryExpenseReport, PartnerBalanceItem
)
from app.services import report_service

router = APIRouter(tags=["reports"])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(db: Session = Depends(get_db)):
    """Get dashboard statistics."""
    return report_service.get_dashboard_stats(db)


@router.get("/reports/monthly-revenue", response_model=MonthlyRevenueReport)
async def get_monthly_revenue(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    db: Session = Depends(get_db)
):
    """Get monthly revenue and expenses for a year (default: current year)."""
    return report_service.get_monthly_revenue(db, year or date.today().year)


@router.get("/reports/projects/{project_id}", response_model=ProjectReport)
async def get_project_report(project_id: int, db: Session = Depends(get_db)):
    """Get the financial summary of a project."""
    return report_service.get_project_report(db, project_id)


@router.get("/reports/expenses-by-category", response_model=CategoryExpenseReport)
async def get_expenses_by_category(
    project_id: Optional[int] = Query(None, alias="projectId"),
    db: Session = Depends(get_db)
):
    """Get expense totals per category."""
    return report_service.get_expenses_by_category(db, project_id)


@router.get("/reports/partner-balances", response_model=List[PartnerBalanceItem])
async def get_partner_balances(
    project_id: Optional[int] = Query(None, alias="projectId"),
    db: Session = Depends(get_db)
):
    """Get partner balances and unsettled net paid."""
    return report_service.get_partner_balances(db, project_id)
