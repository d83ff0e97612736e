"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from cnbrates.domain.models import (
    ColumnIndexes,
    FeedResponse,
    RateRecord,
)
from cnbrates.domain.errors import (
    DomainError,
    InvalidDateFormat,
    MissingHeaders,
    UpstreamUnavailable,
)

__all__ = [
    "RateRecord",
    "FeedResponse",
    "ColumnIndexes",
    "DomainError",
    "InvalidDateFormat",
    "MissingHeaders",
    "UpstreamUnavailable",
]
