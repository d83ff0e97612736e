# src/cnbrates/adapters/formatting/formatter.py
"""
Rates Formatter - Plain Text Presentation

This module renders a parsed daily feed as a plain-text table and formats
conversion results for the command line.

Files that USE this module:
- cnbrates.app (rates command output)
- tests.test_formatter (unit tests)

Files that this module USES:
- cnbrates.domain.models (FeedResponse, RateRecord)
"""
from __future__ import annotations

from typing import List

from cnbrates.domain.models import FeedResponse, RateRecord

HOME_CURRENCY = "CZK"
TABLE_HEADERS = ("Country", "Currency", "Amount", "Code", "Rate")


def _fmt_amount(amount: float) -> str:
    """Quotation units are whole numbers in practice; drop the trailing .0."""
    return str(int(amount)) if float(amount).is_integer() else f"{amount:g}"


def _row_cells(record: RateRecord) -> List[str]:
    return [
        record.country,
        record.currency,
        _fmt_amount(record.amount),
        record.currency_code,
        f"{record.rate:.3f}",
    ]


def format_rates_table(response: FeedResponse) -> str:
    """
    Format the daily rates as an aligned text table.

    Args:
        response: Parsed daily feed

    Returns:
        Multi-line string with a source line followed by the table, or a
        notice if the feed had no usable rates
    """
    if response.is_empty or not response.rates:
        return "No exchange rates available."

    rows = [list(TABLE_HEADERS)] + [_row_cells(r) for r in response.rates]
    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_HEADERS))]

    lines = [f"Source: CNB daily rates — {response.date}"]
    for row in rows:
        # Amount and Rate are right-aligned
        cells = [
            cell.rjust(widths[i]) if i in (2, 4) else cell.ljust(widths[i])
            for i, cell in enumerate(row)
        ]
        lines.append("  ".join(cells).rstrip())
    return "\n".join(lines)


def format_conversion(amount: float, record: RateRecord, result: float) -> str:
    """Format a home-currency conversion, e.g. '1000.00 CZK = 42.55 USD'."""
    return f"{amount:.2f} {HOME_CURRENCY} = {result:.2f} {record.currency_code}"
