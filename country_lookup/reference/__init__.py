"""
Reference table module for Country Lookup.

Provides:
- Delimiter and header detection for small delimited tables
- Immutable bidirectional name/code indexes
- Loaders for the packaged country and language tables
"""

from country_lookup.reference.errors import (
    EmptyResourceError,
    EmptyResultSetError,
    LoadError,
    MalformedHeaderError,
    ReferenceTableError,
    ResourceNotFoundError,
)
from country_lookup.reference.index import ReferenceTableIndex
from country_lookup.reference.models import (
    COUNTRY_LAYOUT,
    LANGUAGE_LAYOUT,
    Entry,
    TableLayout,
)
from country_lookup.reference.tables import (
    load_country_index,
    load_language_index,
    load_table,
)

__all__ = [
    # Index
    "ReferenceTableIndex",
    "Entry",
    "TableLayout",
    "COUNTRY_LAYOUT",
    "LANGUAGE_LAYOUT",
    # Loaders
    "load_table",
    "load_country_index",
    "load_language_index",
    # Errors
    "ReferenceTableError",
    "ResourceNotFoundError",
    "EmptyResourceError",
    "MalformedHeaderError",
    "EmptyResultSetError",
    "LoadError",
]
