from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import date, datetime
from decimal import Decimal
from app.models.expense.expense_models import ExpenseCategory


class ExpenseBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    category: ExpenseCategory = ExpenseCategory.other
    expense_date: date = Field(default_factory=date.today)


class ExpenseCreate(ExpenseBase):
    pass


class ExpenseUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(None, gt=0, decimal_places=2)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    category: Optional[ExpenseCategory] = None
    expense_date: Optional[date] = None


class ExpenseResponse(ExpenseBase):
    id: int
    itinerary_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BudgetSummary(BaseModel):
    itinerary_id: int
    budget: Optional[Decimal]
    currency: str
    total_spent: Decimal
    # None when no budget is set
    remaining: Optional[Decimal]
    over_budget: bool
    expense_count: int
    expenses_by_category: Dict[str, Decimal]
    # expenses recorded in another currency are listed, not converted
    other_currency_expense_ids: List[int] = []
