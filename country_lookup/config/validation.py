"""
Configuration validation for Country Lookup.

Checks what the Pydantic models cannot: log level names and search paths on disk.
"""

from country_lookup.config.models import LookupConfig, TableConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    pass


def _search_path_warnings(label: str, table: TableConfig) -> list[str]:
    warnings = []
    for path in table.search_paths:
        if not path.exists():
            warnings.append(f"{label} search path does not exist: {path}")
        elif not path.is_dir():
            warnings.append(f"{label} search path is not a directory: {path}")
    return warnings


def validate_config(config: LookupConfig) -> list[str]:
    """
    Validate configuration.

    Args:
        config: LookupConfig to validate

    Returns:
        List of warning messages (non-fatal issues)

    Raises:
        ConfigurationError: If configuration has fatal issues
    """
    if config.logging.level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {config.logging.level!r}; expected one of {', '.join(LOG_LEVELS)}"
        )

    warnings = _search_path_warnings("countries", config.countries)
    warnings += _search_path_warnings("languages", config.languages)

    return warnings
