from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, and_
from fastapi import HTTPException
from typing import List, Optional
from decimal import Decimal

from app.core.logger import logger
from app.models.expense.expense_models import Expense, ExpenseCategory
from app.models.itinerary.itinerary_model import Itinerary
from app.schemas.expense.expense import BudgetSummary, ExpenseCreate, ExpenseUpdate


async def _get_itinerary_or_404(session: AsyncSession, itinerary_id: int) -> Itinerary:
    itinerary = await session.get(Itinerary, itinerary_id)
    if not itinerary:
        raise HTTPException(status_code=404, detail="Itinerary not found")
    return itinerary


# ----------------------
# CRUD Operations
# ----------------------
async def create_expense(
    session: AsyncSession,
    itinerary_id: int,
    expense_data: ExpenseCreate
) -> Expense:
    await _get_itinerary_or_404(session, itinerary_id)

    expense = Expense(
        itinerary_id=itinerary_id,
        title=expense_data.title,
        description=expense_data.description,
        amount=expense_data.amount,
        currency=expense_data.currency.upper(),
        category=expense_data.category,
        expense_date=expense_data.expense_date
    )
    session.add(expense)
    await session.commit()
    await session.refresh(expense)
    logger.info(f"Expense {expense.id} of {expense.amount} {expense.currency} added to itinerary {itinerary_id}")
    return expense


async def get_expense(session: AsyncSession, expense_id: int) -> Optional[Expense]:
    return await session.get(Expense, expense_id)


async def get_itinerary_expenses(
    session: AsyncSession,
    itinerary_id: int,
    category: Optional[ExpenseCategory] = None
) -> List[Expense]:
    """Expenses of one itinerary, newest expense date first."""
    await _get_itinerary_or_404(session, itinerary_id)

    q = select(Expense).where(Expense.itinerary_id == itinerary_id)
    if category:
        q = q.where(Expense.category == category)
    q = q.order_by(Expense.expense_date.desc(), Expense.id.desc())

    res = await session.execute(q)
    return res.scalars().all()


async def update_expense(
    session: AsyncSession,
    expense: Expense,
    expense_data: ExpenseUpdate
) -> Expense:
    changes = expense_data.model_dump(exclude_unset=True, exclude_none=True)
    if "currency" in changes:
        changes["currency"] = changes["currency"].upper()
    for field, value in changes.items():
        setattr(expense, field, value)

    await session.commit()
    await session.refresh(expense)
    return expense


async def delete_expense(session: AsyncSession, expense: Expense) -> None:
    await session.delete(expense)
    await session.commit()
    logger.info(f"Expense {expense.id} deleted")


# ----------------------
# Budget tracking
# ----------------------
async def get_budget_summary(session: AsyncSession, itinerary_id: int) -> BudgetSummary:
    """Compare recorded spend against the itinerary budget.

    Only expenses in the budget currency are totalled; the ids of the others
    are reported so callers can show them separately.
    """
    itinerary = await _get_itinerary_or_404(session, itinerary_id)
    currency = itinerary.budget_currency or "USD"
    in_budget_currency = and_(
        Expense.itinerary_id == itinerary_id,
        Expense.currency == currency
    )

    total_result = await session.execute(
        select(func.sum(Expense.amount), func.count(Expense.id)).where(in_budget_currency)
    )
    total_spent, expense_count = total_result.one()
    total_spent = Decimal(total_spent or 0).quantize(Decimal("0.01"))

    category_result = await session.execute(
        select(Expense.category, func.sum(Expense.amount))
        .where(in_budget_currency)
        .group_by(Expense.category)
    )
    expenses_by_category = {
        category.value: Decimal(amount).quantize(Decimal("0.01"))
        for category, amount in category_result
    }

    other_result = await session.execute(
        select(Expense.id).where(
            and_(Expense.itinerary_id == itinerary_id, Expense.currency != currency)
        ).order_by(Expense.id)
    )

    budget = itinerary.budget
    remaining = None
    if budget is not None:
        budget = Decimal(budget).quantize(Decimal("0.01"))
        remaining = budget - total_spent

    return BudgetSummary(
        itinerary_id=itinerary_id,
        budget=budget,
        currency=currency,
        total_spent=total_spent,
        remaining=remaining,
        over_budget=remaining is not None and remaining < 0,
        expense_count=expense_count,
        expenses_by_category=expenses_by_category,
        other_currency_expense_ids=list(other_result.scalars().all())
    )
