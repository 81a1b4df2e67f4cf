"""Line predicates and the small pattern set used to read model-written itineraries.

Every line-level regex lives here so the precedence between day markers, headings and
activity markers can be checked line by line in isolation.
"""

import re
from datetime import time as dt_time
from typing import Optional, Tuple

DAY_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
}

MAX_TITLE_LENGTH = 150

_DAY_MARKER = re.compile(
    r"^(?:#+\s*)?(?:\*\*|__)?\s*day\s+(\d{1,3}|" + "|".join(DAY_WORDS) + r")\b",
    re.IGNORECASE,
)
_HORIZONTAL_RULE = re.compile(r"^(?:={3,}|-{3,})$")
_ACTIVITY_PREFIX = re.compile(r"^(?:[-*•]|\d+[.)])\s+")

# colon between digits belongs to a clock time, a hyphen needs a space on one side
_TITLE_SEPARATOR = re.compile(r"\s*(?:[–—]|(?<!\d):|:(?!\d)|\s-|-\s)\s*")

_LOCATION_STOP = r"[^,.;:(|–—\n]+"
_LOCATION = re.compile(
    r"📍\s*(" + _LOCATION_STOP + r")"
    r"|\bat\s+(?!\d)(" + _LOCATION_STOP + r")"
    r"|\blocation\b\s*[:\-]?\s*(" + _LOCATION_STOP + r")",
    re.IGNORECASE,
)

_TIME = re.compile(
    r"\b(\d{1,2}):(\d{2})\s*([ap]\.?m\.?)?(?![\w:])"
    r"|\b(\d{1,2})\s*([ap]\.?m\.?)(?!\w)",
    re.IGNORECASE,
)
_LEADING_TIME = re.compile(r"^(?:" + _TIME.pattern + r")\s*(?:[:\-–—]\s*)?", re.IGNORECASE)


def parse_day_number(line: str) -> Optional[int]:
    """Day number announced by ``line``, or None when it is not a day marker.

    A recognised marker whose number is 0 returns 0; callers treat that as
    malformed and do not open a new day for it.
    """
    match = _DAY_MARKER.match(line.strip())
    if not match:
        return None
    token = match.group(1).lower()
    if token.isdigit():
        return int(token)
    return DAY_WORDS.get(token, 0)


def is_day_marker(line: str) -> bool:
    return parse_day_number(line) is not None


def is_heading_or_rule(line: str) -> bool:
    line = line.strip()
    return line.startswith("#") or bool(_HORIZONTAL_RULE.match(line))


def is_activity_marker(line: str) -> bool:
    return bool(_ACTIVITY_PREFIX.match(line.strip()))


def strip_markup(text: str) -> str:
    return text.replace("**", "").strip()


def strip_activity_prefix(line: str) -> str:
    return strip_markup(_ACTIVITY_PREFIX.sub("", line.strip(), count=1))


def split_title(text: str) -> Tuple[str, Optional[str]]:
    """Split ``text`` on its first separator into title and remainder."""
    parts = _TITLE_SEPARATOR.split(text, maxsplit=1)
    title = parts[0].strip()
    rest = parts[1].strip() if len(parts) > 1 else ""
    return title, rest or None


def find_location(text: str) -> Optional[str]:
    for match in _LOCATION.finditer(text):
        value = next((group for group in match.groups() if group), "")
        value = value.split(" - ")[0].strip()
        if value:
            return value
    return None


def _to_time(hour: str, minute: Optional[str], meridiem: Optional[str]) -> Optional[dt_time]:
    h = int(hour)
    m = int(minute) if minute else 0
    if meridiem:
        if not 1 <= h <= 12:
            return None
        is_pm = meridiem.lower().startswith("p")
        if is_pm and h != 12:
            h += 12
        elif not is_pm and h == 12:
            h = 0
    if h > 23 or m > 59:
        return None
    return dt_time(h, m)


def _time_from_match(match) -> Optional[dt_time]:
    if match.group(1) is not None:
        return _to_time(match.group(1), match.group(2), match.group(3))
    return _to_time(match.group(4), None, match.group(5))


def find_time(text: str) -> Optional[dt_time]:
    for match in _TIME.finditer(text):
        found = _time_from_match(match)
        if found is not None:
            return found
    return None


def split_leading_time(text: str) -> Tuple[Optional[dt_time], str]:
    """Peel a clock time off the front of an activity line ("9:00 AM - Breakfast")."""
    match = _LEADING_TIME.match(text)
    if not match:
        return None, text
    rest = text[match.end():].strip()
    found = _time_from_match(match)
    if found is None or not rest:
        return None, text
    return found, rest
