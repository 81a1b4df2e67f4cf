from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.database import get_db
from app.models.expense.expense_models import ExpenseCategory
from app.schemas.expense.expense import (
    BudgetSummary, ExpenseCreate, ExpenseResponse, ExpenseUpdate
)
from app.services.expense.expense_service import (
    create_expense, delete_expense, get_budget_summary, get_expense,
    get_itinerary_expenses, update_expense
)

router = APIRouter(prefix="/expenses", tags=["Expense Management"])


# CRUD Operations
@router.post("/itineraries/{itinerary_id}", response_model=ExpenseResponse, status_code=201)
async def create_itinerary_expense(
    itinerary_id: int = Path(..., gt=0),
    expense_data: ExpenseCreate = ...,
    session: AsyncSession = Depends(get_db)
):
    """Record an expense against an itinerary."""
    return await create_expense(session, itinerary_id, expense_data)


@router.get("/itineraries/{itinerary_id}", response_model=List[ExpenseResponse])
async def get_itinerary_expenses_list(
    itinerary_id: int = Path(..., gt=0),
    category: Optional[ExpenseCategory] = Query(None),
    session: AsyncSession = Depends(get_db)
):
    return await get_itinerary_expenses(session, itinerary_id, category)


@router.get("/itineraries/{itinerary_id}/summary", response_model=BudgetSummary)
async def get_itinerary_budget_summary(
    itinerary_id: int = Path(..., gt=0),
    session: AsyncSession = Depends(get_db)
):
    """Spend against the itinerary budget, broken down by category."""
    return await get_budget_summary(session, itinerary_id)


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense_by_id(
    expense_id: int = Path(..., gt=0),
    session: AsyncSession = Depends(get_db)
):
    expense = await get_expense(session, expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense_by_id(
    expense_id: int = Path(..., gt=0),
    expense_data: ExpenseUpdate = ...,
    session: AsyncSession = Depends(get_db)
):
    expense = await get_expense(session, expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return await update_expense(session, expense, expense_data)


@router.delete("/{expense_id}", status_code=204)
async def delete_expense_by_id(
    expense_id: int = Path(..., gt=0),
    session: AsyncSession = Depends(get_db)
):
    expense = await get_expense(session, expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    await delete_expense(session, expense)
