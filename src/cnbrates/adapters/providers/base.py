# src/cnbrates/adapters/providers/base.py
"""
Base Provider Interface for Daily Rate Feeds

This module defines the abstract base class for feed providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- cnbrates.adapters.providers.cnb (CNBFeedProvider implements FeedProvider)
- cnbrates.application.rates_service (depends on the FeedProvider interface)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod


class FeedProvider(ABC):
    @abstractmethod
    def fetch_text(self) -> str:
        """Return the raw feed text. Raise UpstreamUnavailable on failure."""
        raise NotImplementedError
