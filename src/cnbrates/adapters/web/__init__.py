"""
Web Adapters - Django JSON API

This package exposes the parsed daily feed over HTTP.
Import cnbrates.adapters.web.server and call configure_django() before
using the views.
"""

__all__ = []
