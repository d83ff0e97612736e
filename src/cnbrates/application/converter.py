# src/cnbrates/application/converter.py
"""
Currency Converter - Home Currency to Quoted Currency

A CNB rate is the CZK price of `amount` units of the foreign currency, so
one foreign unit costs rate / amount CZK and X CZK buys
X * (amount / rate) foreign units.

Files that USE this module:
- cnbrates.app (rates command --convert option)
- tests.test_converter (unit tests)

Files that this module USES:
- cnbrates.domain.models (FeedResponse, RateRecord)
- cnbrates.shared.validators (validate_numeric_input)
"""
from __future__ import annotations

from typing import Optional

from cnbrates.domain.errors import DomainError
from cnbrates.domain.models import FeedResponse, RateRecord
from cnbrates.shared.validators import validate_numeric_input


def parse_amount_input(text: str) -> Optional[float]:
    """Parse a user-entered amount; a decimal comma is accepted."""
    normalized = str(text).strip().replace(",", ".", 1)
    if not validate_numeric_input(normalized):
        return None
    return float(normalized)


def find_rate(response: FeedResponse, code: str) -> Optional[RateRecord]:
    for record in response.rates:
        if record.currency_code == code:
            return record
    return None


def default_rate(response: FeedResponse) -> Optional[RateRecord]:
    """First record of the feed, pre-selected when no code is given."""
    return response.rates[0] if response.rates else None


def convert_from_home(amount: float, record: RateRecord) -> float:
    """
    Convert an amount of home currency into the record's currency.

    Raises:
        DomainError: If the record does not carry a positive rate and amount
    """
    if record.rate <= 0 or record.amount <= 0:
        raise DomainError(f"Cannot convert with non-positive rate for {record.currency_code}")
    return amount * (record.amount / record.rate)
