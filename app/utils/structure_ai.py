from typing import List
from datetime import date
from app.schemas.itineraries.activity import ActivityRecord
from app.schemas.itineraries.itinerary import ItineraryDayPreview


def _day_number(record: ActivityRecord, start_date: date) -> int:
    if record.date is None:
        return 0
    return (record.date - start_date).days + 1


def group_records_by_day(records: List[ActivityRecord], start_date: date) -> List[ItineraryDayPreview]:
    """Group parser output back into day sections for display.

    A record with ``order`` 0 always opens a new section, so a day the model
    wrote twice shows up as two sections, same as it is stored.
    """
    structured: List[ItineraryDayPreview] = []

    for record in records:
        if not structured or record.order == 0 or structured[-1].date != record.date:
            structured.append(ItineraryDayPreview(
                day_number=_day_number(record, start_date),
                date=record.date,
                activities=[]
            ))
        structured[-1].activities.append(record)

    return structured
