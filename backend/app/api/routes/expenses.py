"""
Expense management routes.
"""
from fastapi import APIRouter, Depends, Query, status, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.expense import Expense, ExpenseCategory
from app.models.project import Project
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from app.api.dependencies import get_or_404, ensure_exists, apply_update, changes_from

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(
    project_id: Optional[int] = Query(None, alias="projectId"),
    category: Optional[ExpenseCategory] = None,
    db: Session = Depends(get_db)
):
    """List expenses, newest first."""
    query = db.query(Expense)
    if project_id is not None:
        query = query.filter(Expense.project_id == project_id)
    if category:
        query = query.filter(Expense.category == category)
    return query.order_by(Expense.date.desc(), Expense.id.desc()).all()


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    db: Session = Depends(get_db)
):
    """Record an expense."""
    ensure_exists(db, Project, expense_data.project_id)
    expense = Expense(**expense_data.model_dump())
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(expense_id: int, db: Session = Depends(get_db)):
    """Get an expense."""
    return get_or_404(db, Expense, expense_id)


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: int,
    expense_data: ExpenseUpdate,
    db: Session = Depends(get_db)
):
    """Update an expense."""
    expense = get_or_404(db, Expense, expense_id)
    changes = changes_from(expense_data, required=("amount", "date", "category"))
    ensure_exists(db, Project, changes.get("project_id"))
    apply_update(expense, changes)
    db.commit()
    db.refresh(expense)
    return expense


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    """Delete an expense."""
    expense = get_or_404(db, Expense, expense_id)
    db.delete(expense)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
