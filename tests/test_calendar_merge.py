#!/usr/bin/env python3
"""
Tests for loading, bucketing and merging calendar sources.
"""

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from icalgrid.errors import AllSourcesFailedError
from icalgrid.models.calendar_models import DateWindow, RawEvent
from icalgrid.models.config_models import FileSource
from icalgrid.services.calendar_merge import bucket_events, build_merged_table, load_source_tables, merge_tables

WINDOW = DateWindow(start=date(2024, 6, 10), end=date(2024, 6, 24))


def parse_lines(text):
    """Parse 'YYYY-MM-DD title' lines into all-day events."""
    events = []
    for line in text.splitlines():
        day, title = line.split(" ", 1)
        events.append(RawEvent(start=date.fromisoformat(day), summary=title))
    return events


def fake_load(texts):
    def load(source):
        if source.path not in texts:
            raise OSError(f"{source.path} not found")
        return texts[source.path]
    return load


def titles(merged, day):
    events = dict(merged)[day]
    return [e.title for e in events] if events is not None else None


def test_bucket_keeps_events_outside_window():
    events = [
        RawEvent(start=date(2020, 1, 1), summary="Old"),
        RawEvent(start=datetime(2024, 6, 11, 9, 0), summary="Standup"),
        RawEvent(start=date(2024, 6, 11), summary="Lunch"),
    ]
    table = bucket_events(events, "A")
    assert set(table) == {date(2020, 1, 1), date(2024, 6, 11)}
    assert [e.title for e in table[date(2024, 6, 11)]] == ["Standup", "Lunch"]


def test_merge_covers_window_without_gaps():
    merged = merge_tables(WINDOW, [("A", bucket_events(parse_lines("2024-06-11 One"), "A"))])
    assert [day for day, _ in merged] == list(WINDOW.days())
    assert len(merged) == 14
    assert titles(merged, date(2024, 6, 11)) == ["One"]
    assert titles(merged, date(2024, 6, 12)) is None


def test_merge_drops_events_outside_window():
    merged = merge_tables(WINDOW, [("A", bucket_events(parse_lines("2024-06-24 Too late\n2024-06-09 Too early"), "A"))])
    assert all(events is None for _, events in merged)


def test_merge_concatenates_in_configuration_order():
    texts = {
        "a.ics": "2024-06-11 A1\n2024-06-11 A2\n2024-06-12 A3",
        "b.ics": "2024-06-11 B1\n2024-06-13 B2",
    }
    calendars = {"A": FileSource("a.ics"), "B": FileSource("b.ics")}
    merged = build_merged_table(WINDOW, calendars, fake_load(texts), parse_lines)
    assert titles(merged, date(2024, 6, 11)) == ["A1", "A2", "B1"]
    assert titles(merged, date(2024, 6, 12)) == ["A3"]
    assert titles(merged, date(2024, 6, 13)) == ["B2"]

    reversed_calendars = {"B": FileSource("b.ics"), "A": FileSource("a.ics")}
    merged = build_merged_table(WINDOW, reversed_calendars, fake_load(texts), parse_lines)
    assert titles(merged, date(2024, 6, 11)) == ["B1", "A1", "A2"]


def test_failing_source_is_same_as_absent_source(caplog):
    texts = {"a.ics": "2024-06-11 A1", "b.ics": "2024-06-11 B1"}
    with_failure = {"A": FileSource("a.ics"), "B": FileSource("b.ics"), "C": FileSource("missing.ics")}
    without = {"A": FileSource("a.ics"), "B": FileSource("b.ics")}

    with caplog.at_level(logging.ERROR):
        merged = build_merged_table(WINDOW, with_failure, fake_load(texts), parse_lines)

    assert merged == build_merged_table(WINDOW, without, fake_load(texts), parse_lines)
    assert any("C" in r.getMessage() and "missing.ics" in r.getMessage() for r in caplog.records)


def test_parse_failure_skips_source():
    def parse(text):
        if text == "broken":
            raise ValueError("bad calendar")
        return parse_lines(text)

    texts = {"a.ics": "broken", "b.ics": "2024-06-11 B1"}
    tables = load_source_tables({"A": FileSource("a.ics"), "B": FileSource("b.ics")}, fake_load(texts), parse)
    assert [name for name, _ in tables] == ["B"]


def test_all_sources_failing_raises():
    calendars = {"A": FileSource("a.ics"), "B": FileSource("b.ics")}
    with pytest.raises(AllSourcesFailedError) as exc_info:
        build_merged_table(WINDOW, calendars, fake_load({}), parse_lines)
    assert exc_info.value.failed == ["A", "B"]


def test_no_sources_configured_raises():
    with pytest.raises(AllSourcesFailedError):
        build_merged_table(WINDOW, {}, fake_load({}), parse_lines)


def test_empty_window_merges_to_empty_table():
    window = DateWindow(start=date(2024, 6, 10), end=date(2024, 6, 10))
    texts = {"a.ics": "2024-06-10 A1"}
    assert build_merged_table(window, {"A": FileSource("a.ics")}, fake_load(texts), parse_lines) == []


def test_source_events_bucketed_by_local_date():
    events = [RawEvent(start=datetime(2024, 6, 11, 23, 0, tzinfo=timezone.utc), summary="Late")]
    table = bucket_events(events, "A", tz=timezone(timedelta(hours=3)))
    assert list(table) == [date(2024, 6, 12)]
