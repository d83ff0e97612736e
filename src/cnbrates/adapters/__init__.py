"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (upstream feed)
- Web (JSON API)
- Formatting (text output)
"""

__all__ = []
