from datetime import date, datetime
from typing import List

from app.core.logger import get_logger
from app.schemas.itineraries.activity import ActivityRecord
from app.utils.itinerary_parser.exceptions import InvalidItineraryText
from app.utils.itinerary_parser.extractor import extract_activities
from app.utils.itinerary_parser.normalizer import normalize
from app.utils.itinerary_parser.segmenter import segment

logger = get_logger("parser")


def parse_itinerary_text(content: str, start_date: date) -> List[ActivityRecord]:
    """Convert free-form itinerary prose into activity records.

    Only missing input is rejected; anything else degrades to whatever could
    be extracted, and at worst to one fallback record.
    """
    if not isinstance(content, str) or not content:
        raise InvalidItineraryText("Itinerary text is empty")
    if isinstance(start_date, datetime):
        start_date = start_date.date()
    if not isinstance(start_date, date):
        raise InvalidItineraryText("A trip start date is required")

    blocks = segment(content)
    day_groups = [(block.day_number, extract_activities(block.lines)) for block in blocks]
    records = normalize(day_groups, start_date, content)

    logger.debug(f"Parsed itinerary text into {len(blocks)} day blocks and {len(records)} activities")
    return records
