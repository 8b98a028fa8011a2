"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import (
    projects, partners, cashboxes, transactions, invoices, revenue,
    expenses, customers, units, installments, partner_units, returned_units,
    payments, settlements, reports
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(projects.router)
api_router.include_router(partners.router)
api_router.include_router(cashboxes.router)
api_router.include_router(transactions.router)
api_router.include_router(invoices.router)
api_router.include_router(revenue.router)
api_router.include_router(expenses.router)
api_router.include_router(customers.router)
api_router.include_router(units.router)
api_router.include_router(installments.router)
api_router.include_router(partner_units.router)
api_router.include_router(returned_units.router)
api_router.include_router(payments.router)
api_router.include_router(settlements.router)
api_router.include_router(reports.router)
