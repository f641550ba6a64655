"""
Configuration module for Country Lookup.

This module provides:
- Pydantic configuration models
- YAML configuration loading
- Configuration validation
"""

from country_lookup.config.models import (
    LookupConfig,
    TableConfig,
    CountryTableConfig,
    LanguageTableConfig,
    LoggingConfig,
)
from country_lookup.config.loader import load_config
from country_lookup.config.validation import ConfigurationError, validate_config

__all__ = [
    "LookupConfig",
    "TableConfig",
    "CountryTableConfig",
    "LanguageTableConfig",
    "LoggingConfig",
    "load_config",
    "validate_config",
    "ConfigurationError",
]
