"""
Utility modules for Country Lookup.

Provides:
- Structured logging configuration
"""

from country_lookup.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
