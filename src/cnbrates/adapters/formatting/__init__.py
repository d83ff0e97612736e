"""
Formatting Adapters - Text Output

This package contains plain-text formatting for the command line.
"""

from cnbrates.adapters.formatting.formatter import (
    format_conversion,
    format_rates_table,
)

__all__ = [
    "format_rates_table",
    "format_conversion",
]
