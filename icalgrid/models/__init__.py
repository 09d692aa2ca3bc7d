"""Data models for calendar aggregation and rendering."""

from icalgrid.models.calendar_models import (
    DateWindow,
    DisplayEvent,
    MergedTable,
    PerSourceTable,
    RawEvent,
)
from icalgrid.models.config_models import (
    CachedUrlSource,
    CachedUrlWithRefreshAuthSource,
    DayOfMonth,
    DayOfWeek,
    FileSource,
    RenderConfig,
    SourceDescriptor,
    StartDayPolicy,
    Today,
    UrlSource,
)

__all__ = [
    'DateWindow',
    'DisplayEvent',
    'MergedTable',
    'PerSourceTable',
    'RawEvent',
    'CachedUrlSource',
    'CachedUrlWithRefreshAuthSource',
    'DayOfMonth',
    'DayOfWeek',
    'FileSource',
    'RenderConfig',
    'SourceDescriptor',
    'StartDayPolicy',
    'Today',
    'UrlSource',
]
