#!/usr/bin/env python3
"""
Calendar Merge Engine
Loads every configured source, buckets its events by day and merges the
per-source tables into one table covering the date window.
"""

import logging
from datetime import tzinfo
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from icalgrid.errors import AllSourcesFailedError
from icalgrid.models.calendar_models import DateWindow, MergedTable, PerSourceTable, RawEvent
from icalgrid.models.config_models import SourceDescriptor
from icalgrid.services.event_projector import event_local_start, to_display

logger = logging.getLogger(__name__)

LoadFn = Callable[[SourceDescriptor], str]
ParseFn = Callable[[str], List[RawEvent]]


def bucket_events(events: Iterable[RawEvent], source_name: str, tz: Optional[tzinfo] = None) -> PerSourceTable:
    """Group the events of one source by the local date of their start.

    Every event is kept, including those outside the window being rendered.
    """
    table: PerSourceTable = {}
    for event in events:
        day, _ = event_local_start(event, tz)
        table.setdefault(day, []).append(to_display(event, source_name, tz))
    return table


def load_source_tables(
    calendars: Dict[str, SourceDescriptor],
    load: LoadFn,
    parse: ParseFn,
    tz: Optional[tzinfo] = None,
) -> List[Tuple[str, PerSourceTable]]:
    """
    Load, parse and bucket each source in configuration order.

    A source that fails at any stage is logged and left out.

    Raises:
        AllSourcesFailedError: if no source could be loaded
    """
    tables = []
    failed = []

    for name, source in calendars.items():
        try:
            table = bucket_events(parse(load(source)), name, tz)
        except Exception as e:
            logger.error("Error getting calendar %s: %s", name, e)
            failed.append(name)
            continue
        logger.info("got calendar %s with %d event days", name, len(table))
        tables.append((name, table))

    if not tables:
        raise AllSourcesFailedError(failed)
    return tables


def merge_tables(window: DateWindow, tables: List[Tuple[str, PerSourceTable]]) -> MergedTable:
    """
    Concatenate the events of every table for each day of the window.

    Returns:
        One (date, events) entry per day in ascending order; events is None
        when no table has anything on that day
    """
    merged: MergedTable = []
    for day in window.days():
        events = []
        for _, table in tables:
            events.extend(table.get(day, []))
        merged.append((day, events or None))
    return merged


def build_merged_table(
    window: DateWindow,
    calendars: Dict[str, SourceDescriptor],
    load: LoadFn,
    parse: ParseFn,
    tz: Optional[tzinfo] = None,
) -> MergedTable:
    """Load every source and merge them over the window."""
    return merge_tables(window, load_source_tables(calendars, load, parse, tz))
