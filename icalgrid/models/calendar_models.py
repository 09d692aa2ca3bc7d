#!/usr/bin/env python3
"""
Calendar Data Models
Data classes for merged calendar feeds and their display records.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class DateWindow:
    """Half-open range of dates [start, end) shown by one render."""
    start: dt.date
    end: dt.date

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"window end {self.end} is before start {self.start}")

    def __len__(self) -> int:
        return (self.end - self.start).days

    def __contains__(self, day: dt.date) -> bool:
        return self.start <= day < self.end

    def days(self) -> Iterator[dt.date]:
        """Yield every date in the window in ascending order."""
        current = self.start
        while current < self.end:
            yield current
            current += dt.timedelta(days=1)

    def is_empty(self) -> bool:
        return self.end == self.start


@dataclass(frozen=True)
class RawEvent:
    """The parts of a parsed VEVENT that the renderer reads."""
    start: Union[dt.date, dt.datetime]
    summary: Optional[str] = None
    sequence: Optional[int] = None

    @property
    def has_time(self) -> bool:
        return isinstance(self.start, dt.datetime)


@dataclass(frozen=True)
class DisplayEvent:
    """An event ready to be drawn inside a day cell."""
    title: str
    time: Optional[dt.time] = None
    classes: Tuple[str, ...] = field(default_factory=tuple)

    def label(self) -> str:
        """Text shown for the event, e.g. '09:00 Standup' or 'Lunch'."""
        if self.time is not None:
            return f"{self.time.strftime('%H:%M')} {self.title}"
        return self.title


# Events of one source bucketed by local start date.
PerSourceTable = Dict[dt.date, List[DisplayEvent]]

# One entry per day of the window; None when no source had events that day.
MergedTable = List[Tuple[dt.date, Optional[List[DisplayEvent]]]]
