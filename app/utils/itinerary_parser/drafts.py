"""Intermediate structures that live only for the duration of one parse call."""

import enum
from dataclasses import dataclass, field, replace
from datetime import time as dt_time
from typing import Optional, Tuple


class ParserState(str, enum.Enum):
    SEEKING_DAY = "seeking-day"
    IN_DAY_SEEKING_ACTIVITY = "in-day-seeking-activity"
    IN_ACTIVITY = "in-activity-continuation"


@dataclass(frozen=True)
class DayBlock:
    """Raw lines that belong to one day. ``day_number`` 0 means unscheduled."""

    day_number: int
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ActivityDraft:
    title: str
    description_lines: Tuple[str, ...] = ()
    location: Optional[str] = None
    time: Optional[dt_time] = None

    def with_line(self, line: str, location: Optional[str], time: Optional[dt_time]) -> "ActivityDraft":
        # location and time keep their first value
        return replace(
            self,
            description_lines=self.description_lines + (line,),
            location=self.location if self.location is not None else location,
            time=self.time if self.time is not None else time,
        )


@dataclass(frozen=True)
class ScanState:
    """Accumulator for the line fold over one day block."""

    phase: ParserState = ParserState.IN_DAY_SEEKING_ACTIVITY
    finished: Tuple[ActivityDraft, ...] = field(default_factory=tuple)
    current: Optional[ActivityDraft] = None

    def close(self) -> Tuple[ActivityDraft, ...]:
        if self.current is None:
            return self.finished
        return self.finished + (self.current,)
