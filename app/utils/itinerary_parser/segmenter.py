from typing import List

from app.utils.itinerary_parser.drafts import DayBlock, ParserState
from app.utils.itinerary_parser.patterns import parse_day_number

UNSCHEDULED_DAY = 0


def segment(text: str) -> List[DayBlock]:
    """Split raw itinerary text into per-day blocks of lines.

    Day marker lines are consumed. Text without any day marker comes back as
    a single unscheduled block; once a marker has been seen, lines above the
    first one are dropped. A repeated day number opens a new block rather than
    extending the earlier one.
    """
    if not text:
        return []

    blocks: List[DayBlock] = []
    state = ParserState.SEEKING_DAY
    day_number = UNSCHEDULED_DAY
    lines: List[str] = []

    for line in text.splitlines():
        found = parse_day_number(line)
        if found is None:
            lines.append(line)
            continue
        if found <= 0:
            # "Day 0" and the like: not a boundary, and not content either
            continue
        if state is not ParserState.SEEKING_DAY:
            blocks.append(DayBlock(day_number=day_number, lines=tuple(lines)))
        state = ParserState.IN_DAY_SEEKING_ACTIVITY
        day_number = found
        lines = []

    if state is ParserState.SEEKING_DAY:
        return [DayBlock(day_number=UNSCHEDULED_DAY, lines=tuple(lines))]

    blocks.append(DayBlock(day_number=day_number, lines=tuple(lines)))
    return blocks
