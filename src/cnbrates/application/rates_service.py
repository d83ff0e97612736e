# src/cnbrates/application/rates_service.py
"""
Rates Service - Fetch and Parse the Daily Rates Feed

This module wires the feed provider to the feed parser. Upstream failures
propagate as UpstreamUnavailable; a fetched but malformed feed yields an
empty FeedResponse so callers can tell the two cases apart.

Files that USE this module:
- cnbrates.adapters.web.views (daily rates endpoint)
- cnbrates.app (rates command)
- tests.test_rates_service (unit tests)

Files that this module USES:
- cnbrates.adapters.providers (FeedProvider, CNBFeedProvider)
- cnbrates.application.feed_parser (parse_daily_feed)
- cnbrates.domain.models (FeedResponse)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from typing import Optional

from cnbrates.adapters.providers.base import FeedProvider
from cnbrates.adapters.providers.cnb import CNBFeedProvider
from cnbrates.application.feed_parser import parse_daily_feed
from cnbrates.domain.models import FeedResponse

log = logging.getLogger(__name__)


class RatesService:
    def __init__(self, provider: Optional[FeedProvider] = None):
        self.provider = provider or CNBFeedProvider()

    def daily_rates(self) -> FeedResponse:
        """
        Fetch today's feed and parse it.

        Raises:
            UpstreamUnavailable: If the feed cannot be fetched
        """
        text = self.provider.fetch_text()
        response = parse_daily_feed(text)
        if response.is_empty:
            log.warning("CNB feed fetched but produced no usable data")
        return response


def get_daily_rates(provider: Optional[FeedProvider] = None) -> FeedResponse:
    """Fetch and parse the daily feed with a default or supplied provider."""
    return RatesService(provider=provider).daily_rates()
