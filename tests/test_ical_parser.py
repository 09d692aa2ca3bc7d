#!/usr/bin/env python3
"""
Tests for iCalendar parsing.
"""

from datetime import date, datetime, timezone

import pytest

from icalgrid.errors import CalendarParseError
from icalgrid.integrations.ical_parser import parse_calendar_text

CALENDAR = "\r\n".join([
    "BEGIN:VCALENDAR",
    "VERSION:2.0",
    "PRODID:-//icalgrid tests//EN",
    "BEGIN:VEVENT",
    "UID:1@test",
    "SUMMARY:Standup",
    "DTSTART:20240611T090000",
    "END:VEVENT",
    "BEGIN:VEVENT",
    "UID:2@test",
    "SUMMARY:Lunch",
    "DTSTART;VALUE=DATE:20240611",
    "SEQUENCE:3",
    "END:VEVENT",
    "BEGIN:VEVENT",
    "UID:3@test",
    "DTSTART:20240612T070000Z",
    "END:VEVENT",
    "BEGIN:VEVENT",
    "UID:4@test",
    "SUMMARY:No start",
    "END:VEVENT",
    "BEGIN:VTODO",
    "UID:5@test",
    "SUMMARY:Not an event",
    "DTSTART:20240612T070000Z",
    "END:VTODO",
    "END:VCALENDAR",
    "",
])


def test_parses_events():
    events = parse_calendar_text(CALENDAR)
    assert len(events) == 3

    standup, lunch, untitled = events
    assert standup.summary == "Standup"
    assert standup.start == datetime(2024, 6, 11, 9, 0)
    assert standup.sequence is None
    assert standup.has_time

    assert lunch.start == date(2024, 6, 11)
    assert lunch.sequence == 3
    assert not lunch.has_time

    assert untitled.summary is None
    assert untitled.start == datetime(2024, 6, 12, 7, 0, tzinfo=timezone.utc)


def test_accepts_bytes():
    assert len(parse_calendar_text(CALENDAR.encode("utf-8"))) == 3


@pytest.mark.parametrize("text", ["this is not a calendar", ""])
def test_invalid_text_raises(text):
    with pytest.raises(CalendarParseError):
        parse_calendar_text(text)


def wrap_events(*bodies):
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", "PRODID:-//icalgrid tests//EN"]
    for i, body in enumerate(bodies):
        lines += ["BEGIN:VEVENT", f"UID:{i}@test", *body, "END:VEVENT"]
    return "\r\n".join(lines + ["END:VCALENDAR", ""])


def test_invalid_sequence_keeps_event_as_not_recurring():
    """A SEQUENCE that is not a number is ignored, the rest of the feed survives."""
    events = parse_calendar_text(wrap_events(
        ["SUMMARY:Good", "DTSTART:20240611T090000", "SEQUENCE:2"],
        ["SUMMARY:Odd", "DTSTART:20240612T090000", "SEQUENCE:abc"],
    ))
    assert [(e.summary, e.sequence) for e in events] == [("Good", 2), ("Odd", None)]


def test_unreadable_start_skips_only_that_event():
    """An event whose DTSTART cannot be read is dropped, the other events stay."""
    events = parse_calendar_text(wrap_events(
        ["SUMMARY:Good", "DTSTART:20240611T090000"],
        ["SUMMARY:Bad", "DTSTART:notadate"],
    ))
    assert [e.summary for e in events] == ["Good"]
    assert events[0].start == datetime(2024, 6, 11, 9, 0)
