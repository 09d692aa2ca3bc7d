#!/usr/bin/env python3
"""
Date Window Calculator
Turns today's date, a start-day policy and a week count into the range of days to render.
"""

import calendar
import logging
from datetime import date, timedelta

from icalgrid.errors import ConfigError
from icalgrid.models.calendar_models import DateWindow
from icalgrid.models.config_models import DayOfMonth, DayOfWeek, StartDayPolicy, Today

logger = logging.getLogger(__name__)

MAX_WEEKS = 255


def _aligned_day_of_month(year: int, month: int, day0: int) -> date:
    """Zero-based day of month, clamped to the last day of short months."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day0 + 1, last_day))


def window_start(today: date, policy: StartDayPolicy) -> date:
    """Find the first day shown for the given policy."""
    if isinstance(policy, Today):
        return today

    if isinstance(policy, DayOfWeek):
        if not 0 <= policy.weekday <= 6:
            raise ConfigError(f"DayOfWeek must be between 0 (Monday) and 6 (Sunday), got {policy.weekday}")
        return today - timedelta(days=(today.weekday() - policy.weekday) % 7)

    if isinstance(policy, DayOfMonth):
        if not 0 <= policy.day <= 30:
            raise ConfigError(f"DayOfMonth must be between 0 and 30, got {policy.day}")
        candidate = _aligned_day_of_month(today.year, today.month, policy.day)
        if candidate <= today:
            return candidate
        # Not reached yet this month, use last month's occurrence
        if today.month == 1:
            return _aligned_day_of_month(today.year - 1, 12, policy.day)
        return _aligned_day_of_month(today.year, today.month - 1, policy.day)

    raise ConfigError(f"Unknown start day policy: {policy!r}")


def compute_window(today: date, policy: StartDayPolicy, weeks: int) -> DateWindow:
    """
    Compute the half-open window [start, start + 7 * weeks).

    Args:
        today: The date the calendar is rendered for
        policy: Where the first row starts
        weeks: Number of weeks shown (0-255); 0 gives an empty window

    Returns:
        DateWindow covering exactly 7 * weeks days
    """
    if not 0 <= weeks <= MAX_WEEKS:
        raise ConfigError(f"weeks must be between 0 and {MAX_WEEKS}, got {weeks}")

    start = window_start(today, policy)
    end = start + timedelta(days=7 * weeks)
    logger.info("at %s, calendar will start at %s and run until %s", today, start, end)
    return DateWindow(start=start, end=end)
