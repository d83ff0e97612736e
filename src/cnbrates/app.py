# src/cnbrates/app.py
"""
Application Entry Point - Command Line and Server Startup

This module serves as the composition root for cnbrates.
It sets up logging and either starts the HTTP API or prints the
current rates once.

Commands:
- serve (default)   start the JSON API on HOST:PORT
- rates             fetch the feed once, print the table and an optional conversion

Files that USE this module:
- python -m cnbrates (module entry point)
- cnbrates console script

Files that this module USES:
- cnbrates.shared.logging_conf (setup_logging for logging configuration)
- cnbrates.config (settings for configuration management)
- cnbrates.application.rates_service (get_daily_rates)
- cnbrates.application.converter (conversion arithmetic)
- cnbrates.adapters.formatting (text output)
- cnbrates.adapters.web.server (serve)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line parsing
import logging  # Standard library for logging messages and errors
from typing import List, Optional

from cnbrates.shared.logging_conf import setup_logging  # Configure logging with file rotation
from cnbrates.config import settings
from cnbrates.application.rates_service import get_daily_rates
from cnbrates.application.converter import (
    convert_from_home,
    default_rate,
    find_rate,
    parse_amount_input,
)
from cnbrates.adapters.formatting.formatter import format_conversion, format_rates_table
from cnbrates.domain.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

EXIT_UPSTREAM = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cnbrates", description="CNB daily exchange rates")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    sub = parser.add_subparsers(dest="command")

    serve_parser = sub.add_parser("serve", help="Start the JSON API server")
    serve_parser.add_argument("--host", default=None, help="Listen address (default: HOST setting)")
    serve_parser.add_argument("--port", type=int, default=None, help="Listen port (default: PORT setting)")

    rates_parser = sub.add_parser("rates", help="Print today's rates")
    rates_parser.add_argument("--convert", default=None, help="Amount of CZK to convert (decimal comma allowed)")
    rates_parser.add_argument("--code", default=None, help="Target currency code (default: first in feed)")
    # Also accepted after the subcommand without resetting a top-level --debug
    for sub_parser in (serve_parser, rates_parser):
        sub_parser.add_argument("--debug", action="store_true", default=argparse.SUPPRESS, help="Enable DEBUG logging")
    return parser


def _run_rates(convert: Optional[str], code: Optional[str]) -> int:
    try:
        response = get_daily_rates()
    except UpstreamUnavailable as e:
        logger.error("Could not fetch CNB daily rates: %s", e)
        return EXIT_UPSTREAM

    print(format_rates_table(response))

    if convert is None:
        return 0

    amount = parse_amount_input(convert)
    if amount is None:
        logger.error("Invalid amount: %s", convert)
        return EXIT_USAGE

    record = find_rate(response, code) if code else default_rate(response)
    if record is None:
        logger.error("Currency not found in today's rates: %s", code or "(none)")
        return EXIT_USAGE

    print(format_conversion(amount, record, convert_from_home(amount, record)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, set up logging and run the selected command.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )

    if args.command == "rates":
        return _run_rates(args.convert, args.code)

    from cnbrates.adapters.web.server import serve

    try:
        serve(host=getattr(args, "host", None), port=getattr(args, "port", None))
    except KeyboardInterrupt:
        logger.info("Server stopped by user (KeyboardInterrupt)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
