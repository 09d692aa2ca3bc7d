#!/usr/bin/env python3
"""
Calendar Builder
Renders the configured calendars as one HTML grid for a given day.
"""

import logging
from datetime import date, tzinfo
from typing import Optional

from icalgrid.errors import EmptyWindowError
from icalgrid.models.config_models import RenderConfig
from icalgrid.services.calendar_merge import LoadFn, ParseFn, build_merged_table
from icalgrid.services.date_window import compute_window
from icalgrid.services.grid_renderer import render_grid

logger = logging.getLogger(__name__)


def render(
    config: RenderConfig,
    today: date,
    load: Optional[LoadFn] = None,
    parse: Optional[ParseFn] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Render the calendar grid for today.

    Args:
        config: Render parameters and calendar sources
        today: Date the window and the past/today/future classes are based on
        load: Fetches the raw text of a source (defaults to FeedLoader().load)
        parse: Parses raw text into events (defaults to parse_calendar_text)
        tz: Zone timed events are shown in (defaults to the system local zone)

    Returns:
        HTML table markup

    Raises:
        EmptyWindowError: if config.weeks is 0
        AllSourcesFailedError: if no calendar could be loaded
    """
    logger.info("Starting to build calendar...")
    window = compute_window(today, config.first_day, config.weeks)
    if window.is_empty():
        raise EmptyWindowError("weeks is 0, the calendar has no days to show")

    if load is None:
        from icalgrid.integrations.feed_loader import FeedLoader
        load = FeedLoader().load
    if parse is None:
        from icalgrid.integrations.ical_parser import parse_calendar_text
        parse = parse_calendar_text

    table = build_merged_table(window, config.calendars, load, parse, tz)

    logger.info("Creating table...")
    return render_grid(table, config.week_as_row, config.header, today, config.wrapper_class)
