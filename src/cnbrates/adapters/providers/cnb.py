# src/cnbrates/adapters/providers/cnb.py
"""
CNB Daily Feed Provider

This module implements the HTTP client that downloads the Czech National
Bank daily exchange rate feed (daily.txt). It only fetches and checks the
response; parsing lives in cnbrates.application.feed_parser.

Files that USE this module:
- cnbrates.application.rates_service (builds CNBFeedProvider by default)
- cnbrates.adapters.web.views (feed provider factory)
- tests.test_providers (unit tests)

Files that this module USES:
- cnbrates.adapters.providers.base (FeedProvider interface)
- cnbrates.config (settings for feed URL and timeout)
- cnbrates.domain.errors (UpstreamUnavailable)
"""
import logging
from typing import Optional

import requests

from cnbrates.adapters.providers.base import FeedProvider
from cnbrates.config import settings
from cnbrates.domain.errors import UpstreamUnavailable

log = logging.getLogger(__name__)

ACCEPTED_CONTENT_TYPES = ("text/plain", "text/html")


class CNBFeedProvider(FeedProvider):
    def __init__(self, url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize CNB feed provider.

        Args:
            url: Optional feed URL (defaults to settings.cnb_daily_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.url = url or settings.cnb_daily_url
        self.timeout = timeout or settings.http_timeout_seconds

    def fetch_text(self) -> str:
        """
        Download the daily feed.

        Returns:
            Feed text

        Raises:
            UpstreamUnavailable: On timeout, network error, non-2xx status or
                a content type other than text/plain or text/html
        """
        try:
            log.info("Fetching CNB daily feed from %s", self.url)
            resp = requests.get(self.url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("CNB feed timeout after %d seconds", self.timeout)
            raise UpstreamUnavailable(f"CNB feed timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.warning("CNB feed request failed (network/connection error): %s", e)
            raise UpstreamUnavailable(f"CNB feed request failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            log.error("CNB feed returned HTTP %d", resp.status_code)
            raise UpstreamUnavailable(f"CNB response HTTP {resp.status_code}")

        content_type = resp.headers.get("content-type", "")
        if not any(accepted in content_type for accepted in ACCEPTED_CONTENT_TYPES):
            log.error("CNB feed returned unexpected content type: %s", content_type)
            raise UpstreamUnavailable(f"Unexpected content type: {content_type}")

        return resp.text
