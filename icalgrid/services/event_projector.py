#!/usr/bin/env python3
"""
Event Projector
Converts parsed calendar events into display records for one calendar source.
"""

from datetime import date, datetime, time, tzinfo
from typing import Optional, Tuple

from icalgrid.models.calendar_models import DisplayEvent, RawEvent

NO_TITLE = "<no title>"
RECURRING_CLASS = "recurring"


def event_local_start(event: RawEvent, tz: Optional[tzinfo] = None) -> Tuple[date, Optional[time]]:
    """
    Split an event start into a local date and an optional wall-clock time.

    Timezone-aware datetimes are converted to tz (the system local zone when
    tz is None); floating datetimes pass through unchanged. Date-only starts
    have no time.
    """
    start = event.start
    if isinstance(start, datetime):
        if start.tzinfo is not None:
            start = start.astimezone(tz)
        return start.date(), start.time()
    return start, None


def to_display(event: RawEvent, source_name: str, tz: Optional[tzinfo] = None) -> DisplayEvent:
    """Build the display record of an event owned by source_name."""
    classes = [source_name]
    if event.sequence is not None:
        classes.append(RECURRING_CLASS)

    return DisplayEvent(
        title=event.summary if event.summary is not None else NO_TITLE,
        time=event_local_start(event, tz)[1],
        classes=tuple(classes),
    )
