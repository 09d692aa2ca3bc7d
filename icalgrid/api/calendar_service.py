# calendar_service.py
import logging
import threading
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse

from icalgrid.config import default_config_path, load_config
from icalgrid.errors import IcalGridError
from icalgrid.models.config_models import RenderConfig
from icalgrid.services.calendar_builder import render

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "<!DOCTYPE html><html><head><style>{css}</style></head><body>{calendar}</body></html>"


class CalendarCache:
    """Last rendered calendar, re-rendered only when the date changes."""

    def __init__(
        self,
        config: RenderConfig,
        render_fn: Callable[[RenderConfig, date], str] = render,
        clock: Callable[[], date] = date.today,
    ):
        self.config = config
        self.render_fn = render_fn
        self.clock = clock
        self.rendered_for: Optional[date] = None
        self._html: Optional[str] = None
        self._lock = threading.Lock()

    def prime(self, today: date, html: str) -> None:
        """Seed the cache with a calendar already rendered for today."""
        with self._lock:
            self.rendered_for = today
            self._html = html

    def get(self) -> str:
        """
        Return the calendar for the current date.

        Raises:
            IcalGridError: if a needed re-render fails; the old calendar is kept
        """
        with self._lock:
            today = self.clock()
            if self._html is None or today != self.rendered_for:
                logger.info("rendering calendar for %s", today)
                self._html = self.render_fn(self.config, today)
                self.rendered_for = today
            return self._html


def read_css(css_path: Optional[str]) -> str:
    if not css_path:
        return ""
    try:
        return Path(css_path).read_text(encoding='utf-8')
    except OSError as e:
        logger.warning("cannot read stylesheet %s: %s", css_path, e)
        return ""


def create_app(config: RenderConfig, cache: Optional[CalendarCache] = None) -> FastAPI:
    """Build the HTTP app serving the rendered calendar."""
    cache = cache or CalendarCache(config)
    app = FastAPI(title="iCal Grid Service")
    app.state.cache = cache

    @app.get("/", response_class=HTMLResponse)
    def calendar_page():
        """Serve the calendar wrapped in a page with the configured stylesheet."""
        try:
            calendar = cache.get()
        except IcalGridError as e:
            logger.error("render failed: %s", e)
            return PlainTextResponse(str(e), status_code=503)
        return HTMLResponse(PAGE_TEMPLATE.format(css=read_css(config.css_path), calendar=calendar))

    @app.get("/health")
    def health():
        rendered_for = cache.rendered_for
        return {"status": "ok", "rendered_for": rendered_for.isoformat() if rendered_for else None}

    return app


def app_from_env() -> FastAPI:
    """App factory reading the config named by ICALGRID_CONFIG."""
    return create_app(load_config(default_config_path()))

# ###########################################
# How to start:
#  uvicorn icalgrid.api.calendar_service:app_from_env --factory --host 0.0.0.0 --port 8000
# ###########################################
