from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from app.core.logger import get_logger
from app.schemas.itineraries.activity import ActivityCategory, ActivityRecord
from app.utils.itinerary_parser.categories import infer_category
from app.utils.itinerary_parser.drafts import ActivityDraft

logger = get_logger("parser")

FALLBACK_TITLE = "Generated Itinerary"
FALLBACK_DESCRIPTION_LENGTH = 2000

DayGroup = Tuple[int, Sequence[ActivityDraft]]


def day_date(start_date: date, day_number: int) -> Optional[date]:
    if day_number <= 0:
        return None
    try:
        return start_date + timedelta(days=day_number - 1)
    except OverflowError:
        return None


def finalize_draft(draft: ActivityDraft, activity_date: Optional[date], order: int) -> ActivityRecord:
    description = " ".join(draft.description_lines).strip() or None
    return ActivityRecord(
        title=draft.title,
        description=description,
        location=draft.location,
        date=activity_date,
        time=draft.time,
        category=infer_category(f"{draft.title} {description or ''}"),
        order=order,
    )


def fallback_record(raw_text: str, start_date: date) -> ActivityRecord:
    return ActivityRecord(
        title=FALLBACK_TITLE,
        description=raw_text[:FALLBACK_DESCRIPTION_LENGTH] or None,
        location=None,
        date=start_date,
        category=ActivityCategory.ACTIVITY,
        order=0,
    )


def normalize(day_groups: Sequence[DayGroup], start_date: date, raw_text: str) -> List[ActivityRecord]:
    """Turn per-day drafts into ordered activity records.

    ``order`` restarts at zero for every group, including a repeated day
    number. If nothing was extracted a single fallback record carrying the
    raw text is returned instead.
    """
    records = [
        finalize_draft(draft, day_date(start_date, day_number), order)
        for day_number, drafts in day_groups
        for order, draft in enumerate(drafts)
    ]

    if not records:
        logger.warning("No activities found in itinerary text, storing it as a single fallback activity")
        return [fallback_record(raw_text, start_date)]

    return records
