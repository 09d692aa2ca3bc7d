#!/usr/bin/env python3
"""
Grid Renderer
Lays a merged calendar table out as an HTML table, one week per row or one
week per column.
"""

from datetime import date
from html import escape
from typing import List, Optional

from icalgrid.errors import EmptyWindowError, RenderError
from icalgrid.models.calendar_models import DisplayEvent, MergedTable
from icalgrid.services.html_builder import class_attribute, make_element

DAYS_PER_WEEK = 7
WEEKDAY_NAMES = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def temporal_class(day: date, today: date) -> str:
    """Classify a day as past, today or future."""
    if day < today:
        return "past"
    if day == today:
        return "today"
    return "future"


def day_classes(day: date, events: List[DisplayEvent], today: date) -> List[str]:
    """Weekday, temporal class, then every event class; duplicates dropped, first seen order kept."""
    classes = [weekday_name(day), temporal_class(day, today)]
    for event in events:
        classes.extend(event.classes)
    return list(dict.fromkeys(classes))


def render_event(event: DisplayEvent) -> str:
    return make_element("div", class_attribute(event.classes), escape(event.label()))


def render_day(day: date, events: List[DisplayEvent], today: date) -> str:
    """Render one <td>: the day of month followed by the day's events."""
    content = make_element("div", None, str(day.day))
    content += "".join(render_event(event) for event in events)
    return make_element("td", class_attribute(day_classes(day, events, today)), content)


def render_header_cell(day: date) -> str:
    name = weekday_name(day)
    return make_element("th", {"class": name}, make_element("div", {"class": name}, name))


def render_grid(
    table: MergedTable,
    week_as_row: bool,
    header: bool,
    today: date,
    wrapper_class: Optional[str] = None,
) -> str:
    """
    Render a merged table as an HTML <table>.

    Args:
        table: One entry per day of the window, a whole number of weeks
        week_as_row: True for one week per row, False for one week per column
        header: Add weekday labels (a header row, or a label at the start of each row)
        today: Date used for the past/today/future classes
        wrapper_class: Class of the outer <table>, if any

    Returns:
        The table markup

    Raises:
        EmptyWindowError: if the table holds no days
    """
    if not table:
        raise EmptyWindowError("the date window is empty, nothing to render")
    if len(table) % DAYS_PER_WEEK:
        raise RenderError(f"calendar of {len(table)} days is not a whole number of weeks")

    weeks = len(table) // DAYS_PER_WEEK
    if week_as_row:
        row_count, column_count, row_stride, column_stride = weeks, DAYS_PER_WEEK, DAYS_PER_WEEK, 1
    else:
        row_count, column_count, row_stride, column_stride = DAYS_PER_WEEK, weeks, 1, DAYS_PER_WEEK

    rows = []
    if week_as_row and header:
        header_cells = "".join(render_header_cell(day) for day, _ in table[:DAYS_PER_WEEK])
        rows.append(make_element("tr", None, header_cells))

    for row in range(row_count):
        cells = []
        if not week_as_row and header:
            cells.append(render_header_cell(table[row * row_stride][0]))
        for column in range(column_count):
            day, events = table[row * row_stride + column * column_stride]
            cells.append(render_day(day, events or [], today))
        rows.append(make_element("tr", None, "".join(cells)))

    attributes = {"class": wrapper_class} if wrapper_class else None
    return make_element("table", attributes, "".join(rows))
