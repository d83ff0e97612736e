# src/cnbrates/shared/validators.py
"""
Input Validation Utilities - Configuration and User Input Validation

This module provides validation functions for configuration values and
user-entered amounts so that bad settings fail fast at startup.

Files that USE this module:
- cnbrates.config.settings (uses validation functions in Settings field validators)
- cnbrates.application.converter (validate_numeric_input for user amounts)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from typing import Optional
from urllib.parse import urlparse


def validate_http_url(url: str) -> bool:
    """
    Validate that a URL is an absolute http(s) URL with a host.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or url.isspace():
        return False

    parsed = urlparse(url.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_host(host: str) -> bool:
    """
    Validate a listen host (hostname, IPv4 address or "localhost").

    Args:
        host: Host to validate

    Returns:
        True if valid, False otherwise
    """
    if not host:
        return False

    pattern = r'^[A-Za-z0-9]([A-Za-z0-9.-]{0,251}[A-Za-z0-9])?$'
    return bool(re.match(pattern, host))


def validate_numeric_input(value: str, min_val: Optional[float] = None,
                          max_val: Optional[float] = None) -> bool:
    """
    Validate numeric input string.

    Args:
        value: String value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        num_val = float(value)
    except ValueError:
        return False
    if not math.isfinite(num_val):
        return False
    if min_val is not None and num_val < min_val:
        return False
    if max_val is not None and num_val > max_val:
        return False
    return True
