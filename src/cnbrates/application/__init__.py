"""
Application Layer - Use Cases and Services

This package contains the feed parser and the services built on it.
No direct I/O outside the injected feed provider.
"""

from cnbrates.application.feed_parser import parse_daily_feed
from cnbrates.application.rates_service import RatesService, get_daily_rates
from cnbrates.application.converter import convert_from_home, find_rate

__all__ = [
    "parse_daily_feed",
    "RatesService",
    "get_daily_rates",
    "convert_from_home",
    "find_rate",
]
