# src/cnbrates/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- A single currency quotation from the daily feed
- The parsed daily feed
- Column positions resolved from the feed header

Files that USE this module:
- cnbrates.application.* (parser, rates service and converter build and read these)
- cnbrates.adapters.* (web views serialize FeedResponse, formatter renders it)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class RateRecord:
    """
    One currency quotation from the daily feed.

    Attributes:
        country: Country name as published in the feed
        currency: Display name of the currency
        amount: Quotation unit the rate is expressed per (e.g. 1, 100)
        currency_code: Short currency code (e.g. "USD")
        rate: Home-currency price per `amount` units
    """
    country: str
    currency: str
    amount: float
    currency_code: str
    rate: float

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON shape served to clients."""
        return {
            "country": self.country,
            "currency": self.currency,
            # Whole quotation units serialize as 1 / 100, not 1.0 / 100.0
            "amount": int(self.amount) if float(self.amount).is_integer() else self.amount,
            "currencyCode": self.currency_code,
            "rate": self.rate,
        }


@dataclass(frozen=True)
class FeedResponse:
    """
    Parsed daily feed.

    Attributes:
        date: Publication date as YYYY-MM-DD, or "" when parsing failed
        rates: Rate records in feed line order
    """
    date: str
    rates: Tuple[RateRecord, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # A failed parse never carries rates
        if not self.date and self.rates:
            raise ValueError("FeedResponse without a date cannot carry rates")

    @classmethod
    def empty(cls) -> FeedResponse:
        return cls(date="", rates=())

    @property
    def is_empty(self) -> bool:
        return not self.date

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON shape served to clients."""
        return {
            "date": self.date,
            "rates": [record.to_dict() for record in self.rates],
        }


@dataclass(frozen=True)
class ColumnIndexes:
    """Zero-based positions of the required columns in a feed row."""
    country: int
    currency: int
    amount: int
    code: int
    rate: int
