#!/usr/bin/env python3
"""
Feed Loader
Retrieves the raw iCalendar text of a configured source: a URL, a local
file, or a URL cached on disk (optionally behind an OAuth token endpoint).
"""

import logging
import time
from pathlib import Path
from typing import Optional

import requests

from icalgrid.errors import SourceLoadError
from icalgrid.models.config_models import (
    CachedUrlSource,
    CachedUrlWithRefreshAuthSource,
    FileSource,
    SourceDescriptor,
    UrlSource,
)

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "icalgrid/0.1"}
BOM = "\ufeff"


def needs_refresh(path: str, refresh_hours: int, now: Optional[float] = None) -> bool:
    """True when the cache file is missing or older than refresh_hours."""
    try:
        modified = Path(path).stat().st_mtime
    except OSError:
        return True
    now = time.time() if now is None else now
    return now - modified > refresh_hours * 60 * 60


def write_cache(path: str, data: str) -> None:
    """Store fetched calendar text; a failed write only costs a refetch next time."""
    try:
        Path(path).write_text(data, encoding="utf-8")
    except OSError as e:
        logger.warning("Error writing cached calendar to %s: %s", path, e)


class FeedLoader:
    """Loads calendar text for each kind of source descriptor."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 30.0):
        self.session = session or requests.Session()
        self.timeout = timeout

    def load(self, source: SourceDescriptor) -> str:
        """
        Return the raw calendar text of a source.

        Raises:
            SourceLoadError: on any network, HTTP, token or file error
        """
        try:
            if isinstance(source, UrlSource):
                return self._get(source.url)
            if isinstance(source, FileSource):
                return self._read(source.path)
            if isinstance(source, CachedUrlWithRefreshAuthSource):
                if needs_refresh(source.path, source.refresh_hours):
                    logger.info("refreshing cached calendar from %s, authenticating now...", source.url)
                    token = self._fetch_token(source)
                    text = self._get(source.url, {"Authorization": f"Bearer {token}"})
                    write_cache(source.path, text)
                    return text
                return self._read(source.path)
            if isinstance(source, CachedUrlSource):
                if needs_refresh(source.path, source.refresh_hours):
                    logger.info("refreshing cached calendar from %s", source.url)
                    text = self._get(source.url)
                    write_cache(source.path, text)
                    return text
                return self._read(source.path)
        except requests.exceptions.RequestException as e:
            raise SourceLoadError(source.describe(), f"request failed: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLoadError(source.describe(), f"cannot read file: {e}") from e

        raise SourceLoadError(repr(source), "unknown source type")

    def _get(self, url: str, headers: Optional[dict] = None) -> str:
        response = self.session.get(url, headers={**HEADERS, **(headers or {})}, timeout=self.timeout)
        response.raise_for_status()
        return response.text.lstrip(BOM)

    def _read(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8-sig")

    def _fetch_token(self, source: CachedUrlWithRefreshAuthSource) -> str:
        """POST the configured form body to the token endpoint and return the access token."""
        response = self.session.post(
            source.token_url,
            data=source.token_body,
            headers={**HEADERS, "Content-Type": "application/x-www-form-urlencoded"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        try:
            return response.json()["access_token"]
        except (KeyError, TypeError, ValueError) as e:
            raise SourceLoadError(source.describe(), f"invalid token response: {e}") from e
