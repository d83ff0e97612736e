"""
Provider Adapters - External Feed Clients

This package contains adapters for upstream rate feeds.
All providers implement the FeedProvider interface.
"""

from cnbrates.adapters.providers.base import FeedProvider
from cnbrates.adapters.providers.cnb import CNBFeedProvider

__all__ = [
    "FeedProvider",
    "CNBFeedProvider",
]
