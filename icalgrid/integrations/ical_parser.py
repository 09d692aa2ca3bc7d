#!/usr/bin/env python3
"""
iCalendar parsing with the icalendar library.
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Union

from icalendar import Calendar
from icalendar.error import BrokenCalendarProperty

from icalgrid.errors import CalendarParseError
from icalgrid.models.calendar_models import RawEvent

logger = logging.getLogger(__name__)


def parse_calendar_text(text: Union[str, bytes]) -> List[RawEvent]:
    """
    Parse iCalendar text into the events the renderer needs.

    VEVENTs without a readable DTSTART are skipped and a SEQUENCE that is
    not a number is treated as absent.

    Raises:
        CalendarParseError: if the text is not a valid calendar
    """
    try:
        calendar = Calendar.from_ical(text)
    except Exception as e:
        raise CalendarParseError(f"invalid calendar data: {e}") from e

    events = []
    skipped = 0
    for component in calendar.walk("VEVENT"):
        try:
            start = _event_start(component)
        except (BrokenCalendarProperty, TypeError, ValueError) as e:
            logger.debug("skipping event %s with unreadable start: %s", component.get("UID"), e)
            start = None
        if start is None:
            skipped += 1
            continue

        summary = component.get("SUMMARY")
        events.append(RawEvent(
            start=start,
            summary=str(summary) if summary is not None else None,
            sequence=_event_sequence(component),
        ))

    if skipped:
        logger.debug("skipped %d events without a start", skipped)
    return events


def _event_start(component) -> Optional[Union[date, datetime]]:
    dtstart = component.get("DTSTART")
    if dtstart is None:
        return None
    start = dtstart.dt
    if not isinstance(start, date):
        raise TypeError(f"DTSTART is not a date or datetime: {start!r}")
    return start


def _event_sequence(component) -> Optional[int]:
    """SEQUENCE as an int; a value that is not a number counts as absent."""
    sequence = component.get("SEQUENCE")
    if sequence is None:
        return None
    try:
        return int(sequence)
    except (BrokenCalendarProperty, TypeError, ValueError):
        logger.debug("ignoring invalid SEQUENCE %r of event %s", sequence, component.get("UID"))
        return None
