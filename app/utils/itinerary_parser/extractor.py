from functools import reduce
from typing import Iterable, List, Optional

from app.utils.itinerary_parser.drafts import ActivityDraft, ParserState, ScanState
from app.utils.itinerary_parser.patterns import (
    MAX_TITLE_LENGTH,
    find_location,
    find_time,
    is_activity_marker,
    is_heading_or_rule,
    split_leading_time,
    split_title,
    strip_activity_prefix,
    strip_markup,
)


def start_draft(line: str) -> Optional[ActivityDraft]:
    """Build a new draft from an activity marker line, or None if it carries no text."""
    text = strip_activity_prefix(line)
    time, text = split_leading_time(text)
    title, rest = split_title(text)
    title = title.strip("*_ ")
    if not title:
        title, rest = (rest or "").strip("*_ "), None
    if not title:
        return None

    return ActivityDraft(
        title=title[:MAX_TITLE_LENGTH],
        description_lines=(rest,) if rest else (),
        location=find_location(text),
        time=time if time is not None else find_time(text),
    )


def continue_draft(draft: ActivityDraft, line: str) -> ActivityDraft:
    text = strip_markup(line)
    return draft.with_line(
        text,
        location=None if draft.location is not None else find_location(text),
        time=None if draft.time is not None else find_time(text),
    )


def scan_line(state: ScanState, raw_line: str) -> ScanState:
    line = raw_line.strip()
    if not line or is_heading_or_rule(line):
        return state

    if is_activity_marker(line):
        draft = start_draft(line)
        if draft is None:
            return state
        return ScanState(
            phase=ParserState.IN_ACTIVITY,
            finished=state.close(),
            current=draft,
        )

    if state.phase is not ParserState.IN_ACTIVITY:
        # narrative prose before the first activity of the day
        return state

    return ScanState(
        phase=ParserState.IN_ACTIVITY,
        finished=state.finished,
        current=continue_draft(state.current, line),
    )


def extract_activities(lines: Iterable[str]) -> List[ActivityDraft]:
    """Walk one day's lines and return the finished activity drafts in order."""
    final = reduce(scan_line, lines, ScanState())
    return list(final.close())
