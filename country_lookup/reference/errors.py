"""
Errors raised while building a reference table index.

All of them are construction-time failures: no index is created when one is
raised. Per-row problems never surface here.
"""

from collections.abc import Sequence


class ReferenceTableError(Exception):
    """Base class for reference table load failures."""

    pass


class ResourceNotFoundError(ReferenceTableError):
    """Raised when none of the candidate locations holds the resource."""

    def __init__(self, resource_name: str, attempted: Sequence[str]):
        self.resource_name = resource_name
        self.attempted = list(attempted)
        super().__init__(
            f"Resource {resource_name!r} not found. Tried: {', '.join(self.attempted)}. "
            f"Place {resource_name} in the package data directory "
            "(country_lookup/data/) or in one of the configured search paths."
        )


class EmptyResourceError(ReferenceTableError):
    """Raised when the resource has no header line."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Empty reference table: {source}")


class MalformedHeaderError(ReferenceTableError):
    """Raised when the header lacks a name column or a code column."""

    def __init__(self, columns: Sequence[str], expected: str):
        self.columns = list(columns)
        super().__init__(f"Header must contain {expected} columns. Got: {self.columns}")


class EmptyResultSetError(ReferenceTableError):
    """Raised when the header is valid but no data row survives validation."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(
            f"Parsed 0 entries from {source}; check file format and location."
        )


class LoadError(ReferenceTableError):
    """Raised when reading an opened resource fails."""

    def __init__(self, location: str, cause: BaseException):
        self.location = location
        self.cause = cause
        super().__init__(f"Failed to load/parse resource {location}: {cause}")
