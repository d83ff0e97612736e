"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from cnbrates.shared.validators import (
    validate_host,
    validate_http_url,
    validate_numeric_input,
)
from cnbrates.shared.logging_conf import setup_logging

__all__ = [
    "validate_http_url",
    "validate_host",
    "validate_numeric_input",
    "setup_logging",
]
