# src/cnbrates/domain/errors.py
"""
Domain Errors - Feed Parsing and Upstream Exceptions

This module defines domain-specific exceptions raised while fetching
and parsing the CNB daily rates feed.

Structural errors (InvalidDateFormat, MissingHeaders) are caught by the
feed parser and degrade to an empty response. UpstreamUnavailable is the
one error allowed to reach the serving layer.
"""

from __future__ import annotations

from typing import Iterable


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidDateFormat(DomainError):
    """Raised when the feed header does not carry a valid publication date."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid date format in CNB data: {token}")


class MissingHeaders(DomainError):
    """Raised when the column header line lacks one or more required columns."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required headers in CNB data: {', '.join(self.missing)}")


class UpstreamUnavailable(DomainError):
    """Raised when the upstream feed cannot be fetched or has the wrong content type."""
    pass
