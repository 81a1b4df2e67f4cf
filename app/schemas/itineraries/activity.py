from pydantic import BaseModel, Field
from datetime import date as dt, datetime
from datetime import time as dt_time
from enum import Enum
from typing import Optional


class ActivityCategory(str, Enum):
    FOOD = "food"
    ACCOMMODATION = "accommodation"
    TRANSPORTATION = "transportation"
    ACTIVITY = "activity"


# Parser output, handed to the persistence layer as-is
class ActivityRecord(BaseModel):
    title: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    location: Optional[str] = None
    date: Optional[dt] = None
    time: Optional[dt_time] = None
    category: ActivityCategory = ActivityCategory.ACTIVITY
    order: int = Field(0, ge=0)

    model_config = {
        "frozen": True
    }


class ActivityResponse(ActivityRecord):
    id: int
    itinerary_id: int
    created_at: datetime

    model_config = {
        "from_attributes": True,
        "frozen": True
    }
