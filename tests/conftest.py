"""Shared fixtures: in-memory calendar sources standing in for feeds."""

from datetime import date

import pytest

from icalgrid.errors import SourceLoadError
from icalgrid.models.config_models import DayOfWeek, FileSource, RenderConfig

ICS_TEMPLATE = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//icalgrid tests//EN
{events}END:VCALENDAR
"""

EVENT_TEMPLATE = """BEGIN:VEVENT
UID:{uid}
DTSTAMP:20240601T000000Z
{body}END:VEVENT
"""


def make_ics(*bodies: str) -> str:
    """Build a calendar from VEVENT bodies (lines without BEGIN/END)."""
    events = "".join(EVENT_TEMPLATE.format(uid=f"event-{i}@test", body=body) for i, body in enumerate(bodies))
    return ICS_TEMPLATE.format(events=events).replace("\n", "\r\n")


class FakeFeeds:
    """load() collaborator returning canned text per FileSource path."""

    def __init__(self, texts):
        self.texts = texts
        self.calls = []

    def load(self, source):
        self.calls.append(source.path)
        if source.path not in self.texts:
            raise SourceLoadError(source.path, "no such feed")
        return self.texts[source.path]


@pytest.fixture
def today():
    return date(2024, 6, 15)  # a Saturday


@pytest.fixture
def two_source_texts():
    """Source A has a timed standup, source B a recurring all-day lunch, both on 2024-06-11."""
    return {
        "a.ics": make_ics("SUMMARY:Standup\nDTSTART:20240611T090000\n"),
        "b.ics": make_ics("SUMMARY:Lunch\nDTSTART;VALUE=DATE:20240611\nSEQUENCE:0\n"),
    }


@pytest.fixture
def two_source_config():
    return RenderConfig(
        weeks=2,
        week_as_row=True,
        header=True,
        first_day=DayOfWeek(0),
        wrapper_class="calendar",
        calendars={"A": FileSource("a.ics"), "B": FileSource("b.ics")},
    )


@pytest.fixture
def fake_feeds():
    """Factory for FakeFeeds, e.g. fake_feeds({"a.ics": make_ics(...)})."""
    return FakeFeeds
