#!/usr/bin/env python3
"""
Configuration loading.

The config file is JSON, for example:

    {
        "wrapper_class": "calendar",
        "css_path": "calendar.css",
        "weeks": 4,
        "week_as_row": true,
        "header": true,
        "first_day": {"DayOfWeek": 0},
        "calendars": {
            "work": {"URL": "https://example.com/work.ics"},
            "home": {"File": "home.ics"},
            "club": {"CachedURL": {"url": "https://example.com/club.ics", "path": "club.ics", "refresh_hours": 6}}
        }
    }

first_day is "Today", {"DayOfWeek": 0-6} or {"DayOfMonth": 0-30}.
"""

import json
import logging
import os
from typing import Dict, Literal, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from icalgrid.errors import ConfigError
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

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"
CONFIG_ENV_VAR = "ICALGRID_CONFIG"


class _Strict(BaseModel):
    model_config = ConfigDict(extra='forbid')


# first_day variants
class DayOfWeekModel(_Strict):
    DayOfWeek: int = Field(ge=0, le=6)


class DayOfMonthModel(_Strict):
    DayOfMonth: int = Field(ge=0, le=30)


# calendar source variants
class UrlModel(_Strict):
    URL: str


class FileModel(_Strict):
    File: str


class CachedUrlFields(_Strict):
    url: str
    path: str
    refresh_hours: int = Field(ge=0)


class CachedUrlModel(_Strict):
    CachedURL: CachedUrlFields


class RefreshAuthFields(CachedUrlFields):
    token_url: str
    token_body: str


class RefreshAuthModel(_Strict):
    CachedURLwithRefreshAuth: RefreshAuthFields


class ConfigFile(BaseModel):
    """Shape of the JSON configuration file."""
    wrapper_class: Optional[str] = None
    css_path: Optional[str] = None
    weeks: int = Field(default=4, ge=0, le=255)
    week_as_row: bool = True
    header: bool = True
    first_day: Union[Literal["Today"], DayOfWeekModel, DayOfMonthModel] = "Today"
    calendars: Dict[str, Union[UrlModel, FileModel, CachedUrlModel, RefreshAuthModel]]

    def to_render_config(self) -> RenderConfig:
        return RenderConfig(
            weeks=self.weeks,
            week_as_row=self.week_as_row,
            header=self.header,
            first_day=_to_policy(self.first_day),
            wrapper_class=self.wrapper_class,
            css_path=self.css_path,
            calendars={name: _to_source(source) for name, source in self.calendars.items()},
        )


def _to_policy(value) -> StartDayPolicy:
    if isinstance(value, DayOfWeekModel):
        return DayOfWeek(value.DayOfWeek)
    if isinstance(value, DayOfMonthModel):
        return DayOfMonth(value.DayOfMonth)
    return Today()


def _to_source(value) -> SourceDescriptor:
    if isinstance(value, UrlModel):
        return UrlSource(value.URL)
    if isinstance(value, FileModel):
        return FileSource(value.File)
    if isinstance(value, RefreshAuthModel):
        fields = value.CachedURLwithRefreshAuth
        return CachedUrlWithRefreshAuthSource(
            url=fields.url,
            path=fields.path,
            refresh_hours=fields.refresh_hours,
            token_url=fields.token_url,
            token_body=fields.token_body,
        )
    fields = value.CachedURL
    return CachedUrlSource(url=fields.url, path=fields.path, refresh_hours=fields.refresh_hours)


def parse_config(data: dict) -> RenderConfig:
    """Validate decoded JSON and build a RenderConfig."""
    try:
        return ConfigFile.model_validate(data).to_render_config()
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e


def load_config(path: str) -> RenderConfig:
    """
    Read and validate a JSON config file.

    Raises:
        ConfigError: if the file is missing, unreadable, not JSON or invalid
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"config file {path} is not valid JSON: {e}") from e

    config = parse_config(data)
    logger.debug("loaded config %s with %d calendars", path, len(config.calendars))
    return config


def default_config_path() -> str:
    """Config path from ICALGRID_CONFIG (a .env file is honoured), else config.json."""
    load_dotenv()
    return os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
