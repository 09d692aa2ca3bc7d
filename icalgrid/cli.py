#!/usr/bin/env python3
"""
icalgrid command line
Renders the configured calendars once, writes the HTML to a file and/or
serves it over HTTP.
"""

import argparse
import logging
from datetime import date
from typing import List, Optional, Tuple

from icalgrid.config import default_config_path, load_config
from icalgrid.errors import IcalGridError
from icalgrid.logging_utils import configure_logging
from icalgrid.services.calendar_builder import render

logger = logging.getLogger(__name__)


def parse_address(value: str) -> Tuple[str, int]:
    """Parse HOST:PORT (HOST may be empty for all interfaces)."""
    host, sep, port = value.rpartition(':')
    if not sep or not port.isdigit():
        raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {value!r}")
    return host.strip('[]') or '0.0.0.0', int(port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Merge iCalendar feeds into an HTML calendar grid')
    parser.add_argument('-o', '--output', help='Write the rendered calendar table to this file')
    parser.add_argument('-c', '--config', default=None,
                        help='Path to the JSON config file (default: $ICALGRID_CONFIG or config.json)')
    parser.add_argument('-s', '--server', type=parse_address, metavar='HOST:PORT',
                        help='Serve the calendar over HTTP on this address')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Also write log records to this file')
    return parser


def write_output(path: str, html: str) -> bool:
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(html)
    except OSError as e:
        logger.error("Cannot write calendar to file %s: %s", path, e)
        return False
    logger.info("Calendar saved to %s", path)
    return True


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    config_path = args.config or default_config_path()
    today = date.today()
    try:
        config = load_config(config_path)
        html = render(config, today)
    except IcalGridError as e:
        logger.error("Error: %s", e)
        return 1

    if args.output:
        write_output(args.output, html)

    if args.server:
        import uvicorn
        from icalgrid.api.calendar_service import CalendarCache, create_app

        cache = CalendarCache(config)
        cache.prime(today, html)
        host, port = args.server
        uvicorn.run(create_app(config, cache), host=host, port=port)

    return 0


if __name__ == "__main__":
    exit(main())
