# src/cnbrates/application/feed_parser.py
"""
Feed Parser - CNB Daily Rates Text Feed to Domain Objects

Turns the plain-text daily feed published by the Czech National Bank into
a FeedResponse. The feed looks like:

    15 Oct 2025 #199
    Country|Currency|Amount|Code|Rate
    Australia|dollar|1|AUD|13.871
    ...

Failure handling is two-tiered:
- Structural errors (bad date header, missing columns) mean the feed format
  changed. The whole feed is discarded and an empty response is returned.
- A malformed data row is dropped and the remaining rows are kept.

All functions are pure; the module holds no state.

Files that USE this module:
- cnbrates.application.rates_service (parses fetched feed text)
- tests.test_feed_parser (unit tests)

Files that this module USES:
- cnbrates.domain.models (RateRecord, FeedResponse, ColumnIndexes)
- cnbrates.domain.errors (InvalidDateFormat, MissingHeaders)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
import math  # Finite checks for parsed numbers
import re  # Regular expressions for the strict date and numeral patterns
from datetime import date  # Calendar date for the publication date
from typing import List, Optional, Sequence

from cnbrates.domain.errors import InvalidDateFormat, MissingHeaders
from cnbrates.domain.models import ColumnIndexes, FeedResponse, RateRecord

log = logging.getLogger(__name__)  # Create logger for this module

REQUIRED_COLUMNS = ("country", "currency", "amount", "code", "rate")

# e.g. "15 Oct 2025"
_DATE_PATTERN = re.compile(r"^([0-9]{1,2}) ([A-Za-z]{3}) ([0-9]{4})$")
_MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}
_NUMERAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_LINE_BREAK = re.compile(r"\r?\n")

DEFAULT_AMOUNT = "1"


def split_lines(text: str) -> List[str]:
    """
    Split raw feed text into its non-empty lines.

    Accepts both LF and CRLF line endings. Lines are not trimmed.
    """
    return [line for line in _LINE_BREAK.split(text) if line]


def parse_header_date(first_line: str) -> date:
    """
    Parse the publication date from the first feed line.

    Everything after the first '#' is a free-text comment and is ignored.
    The remaining token must look exactly like "15 Oct 2025".

    Args:
        first_line: First line of the feed

    Returns:
        Publication date

    Raises:
        InvalidDateFormat: If the token does not match the pattern or is not a real date
    """
    token = first_line.split("#", 1)[0].strip()
    match = _DATE_PATTERN.match(token)
    if not match:
        raise InvalidDateFormat(token)

    day, month_name, year = match.groups()
    month = _MONTHS.get(month_name)
    if month is None:
        raise InvalidDateFormat(token)
    try:
        return date(int(year), month, int(day))
    except ValueError as e:
        # e.g. "31 Feb 2025" or year 0000
        raise InvalidDateFormat(token) from e


def resolve_column_indexes(header_line: str) -> ColumnIndexes:
    """
    Map the required column names to their positions in the header line.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        MissingHeaders: Naming every required column that was not found
    """
    names = [part.strip().lower() for part in header_line.split("|")]
    positions = {}
    missing = []
    for column in REQUIRED_COLUMNS:
        if column in names:
            positions[column] = names.index(column)
        else:
            missing.append(column)
    if missing:
        raise MissingHeaders(missing)
    return ColumnIndexes(**positions)


def _cell(parts: Sequence[str], index: int) -> str:
    return parts[index] if 0 <= index < len(parts) else ""


def parse_number(token: str) -> Optional[float]:
    """
    Parse a numeric feed cell.

    The feed may use a decimal comma ("23,500"); the first comma is read
    as the decimal point. Returns None for anything that is not a plain
    finite decimal numeral.
    """
    normalized = token.strip().replace(",", ".", 1)
    if not _NUMERAL_PATTERN.fullmatch(normalized):
        return None
    value = float(normalized)
    if not math.isfinite(value):
        return None
    return value


def decode_row(parts: Sequence[str], indexes: ColumnIndexes) -> Optional[RateRecord]:
    """
    Decode one data row into a RateRecord.

    Args:
        parts: Trimmed cells of the row, split on '|'
        indexes: Column positions resolved from the header line

    Returns:
        RateRecord, or None if the row has no code or a non-positive amount or rate
    """
    amount_token = _cell(parts, indexes.amount) or DEFAULT_AMOUNT
    code = _cell(parts, indexes.code)
    rate_token = _cell(parts, indexes.rate)

    amount = parse_number(amount_token)
    rate = parse_number(rate_token)
    if not code or amount is None or rate is None or amount <= 0 or rate <= 0:
        return None

    return RateRecord(
        country=_cell(parts, indexes.country),
        currency=_cell(parts, indexes.currency),
        amount=amount,
        currency_code=code,
        rate=rate,
    )


def parse_daily_feed(text: str) -> FeedResponse:
    """
    Parse the full daily feed text.

    Args:
        text: Raw feed text as fetched from upstream

    Returns:
        FeedResponse with ISO date and rates in feed order, or an empty
        FeedResponse if the feed is too short or structurally invalid
    """
    lines = split_lines(text)
    if len(lines) < 3:
        log.warning("CNB feed too short (%d non-empty lines), returning empty response", len(lines))
        return FeedResponse.empty()

    try:
        published = parse_header_date(lines[0])
        indexes = resolve_column_indexes(lines[1])
    except (InvalidDateFormat, MissingHeaders) as e:
        log.error("Error parsing CNB data: %s", e)
        return FeedResponse.empty()

    rates = []
    for line in lines[2:]:
        line = line.strip()
        if not line:
            continue
        record = decode_row([part.strip() for part in line.split("|")], indexes)
        if record is None:
            log.debug("Dropping malformed CNB row: %r", line)
            continue
        rates.append(record)

    log.info("Parsed CNB feed for %s: %d rates", published.isoformat(), len(rates))
    return FeedResponse(date=published.isoformat(), rates=tuple(rates))
