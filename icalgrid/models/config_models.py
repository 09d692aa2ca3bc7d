#!/usr/bin/env python3
"""
Render Configuration Models
Start-day policies, calendar source descriptors and the render configuration.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class DayOfWeek:
    """Start the window on the most recent given weekday (0 = Monday)."""
    weekday: int


@dataclass(frozen=True)
class DayOfMonth:
    """Start the window on the most recent given zero-based day of month (0 = the 1st)."""
    day: int = 0


@dataclass(frozen=True)
class Today:
    """Start the window today."""


StartDayPolicy = Union[DayOfWeek, DayOfMonth, Today]


@dataclass(frozen=True)
class UrlSource:
    """Calendar fetched over HTTP on every render."""
    url: str

    def describe(self) -> str:
        return self.url


@dataclass(frozen=True)
class FileSource:
    """Calendar read from a local file."""
    path: str

    def describe(self) -> str:
        return self.path


@dataclass(frozen=True)
class CachedUrlSource:
    """Calendar fetched over HTTP and cached on disk for refresh_hours."""
    url: str
    path: str
    refresh_hours: int

    def describe(self) -> str:
        return f"{self.url} (cached at {self.path})"


@dataclass(frozen=True)
class CachedUrlWithRefreshAuthSource:
    """Cached calendar whose fetch needs a bearer token from token_url."""
    url: str
    path: str
    refresh_hours: int
    token_url: str
    token_body: str

    def describe(self) -> str:
        return f"{self.url} (cached at {self.path}, token from {self.token_url})"


SourceDescriptor = Union[UrlSource, FileSource, CachedUrlSource, CachedUrlWithRefreshAuthSource]


@dataclass
class RenderConfig:
    """Parameters of one render pass; calendars keep their configuration order."""
    weeks: int = 4
    week_as_row: bool = True
    header: bool = True
    first_day: StartDayPolicy = field(default_factory=Today)
    wrapper_class: Optional[str] = None
    css_path: Optional[str] = None  # read by the HTTP service only
    calendars: Dict[str, SourceDescriptor] = field(default_factory=dict)
