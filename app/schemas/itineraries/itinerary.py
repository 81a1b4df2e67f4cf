from pydantic import BaseModel, Field
from datetime import date as dt, datetime
from decimal import Decimal
from typing import Optional, List
from app.schemas.itineraries.activity import ActivityRecord, ActivityResponse


class GenerateItineraryRequest(BaseModel):
    destination: str = Field(..., min_length=1)
    start_date: dt
    end_date: dt
    duration: Optional[int] = Field(None, gt=0)
    interests: List[str] = []
    difficulty: Optional[str] = None
    budget: Optional[float] = Field(None, gt=0)
    budget_range: Optional[str] = None
    group_size: Optional[str] = None
    traveling_with: List[str] = []
    title: Optional[str] = None
    description: Optional[str] = None
    premium: bool = False


class ItineraryPreviewRequest(BaseModel):
    content: str = Field(..., min_length=1)
    start_date: dt


class ItineraryDayPreview(BaseModel):
    day_number: int
    date: Optional[dt] = None
    activities: List[ActivityRecord] = []


class ItineraryPreviewResponse(BaseModel):
    preview: List[ItineraryDayPreview]


class ItinerarySummary(BaseModel):
    id: int
    title: str
    destination: str
    start_date: dt
    end_date: dt
    created_at: datetime

    class Config:
        from_attributes = True


class ItineraryResponse(ItinerarySummary):
    description: Optional[str] = None
    activities: List[ActivityResponse] = []
    budget: Optional[Decimal] = None
    budget_currency: str = "USD"


class BudgetUpdate(BaseModel):
    # None clears the budget
    budget: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    budget_currency: str = Field(default="USD", min_length=3, max_length=3)


class BudgetResponse(BaseModel):
    budget: Optional[Decimal] = None
    budget_currency: str

    class Config:
        from_attributes = True
