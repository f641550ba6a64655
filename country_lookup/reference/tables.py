"""
Loaders for the reference tables shipped with the package.
"""

from collections.abc import Sequence
from pathlib import Path

from country_lookup.reference.index import ReferenceTableIndex
from country_lookup.reference.models import COUNTRY_LAYOUT, LANGUAGE_LAYOUT, TableLayout
from country_lookup.reference.resolver import default_candidates

COUNTRY_TABLE = "country-codes.txt"
LANGUAGE_TABLE = "language-codes.txt"


def load_table(
    resource_name: str,
    layout: TableLayout,
    search_paths: Sequence[Path | str] = (),
) -> ReferenceTableIndex:
    """
    Load a table, trying extra search paths before the packaged defaults.

    Args:
        resource_name: Filename of the table
        layout: Header naming rules
        search_paths: Directories tried first, in order

    Returns:
        A ready index
    """
    candidates = [Path(p) for p in search_paths] + default_candidates()
    return ReferenceTableIndex.load(resource_name, candidates, layout=layout)


def load_country_index(search_paths: Sequence[Path | str] = ()) -> ReferenceTableIndex:
    """Load the country name / alpha-3 code table."""
    return load_table(COUNTRY_TABLE, COUNTRY_LAYOUT, search_paths)


def load_language_index(search_paths: Sequence[Path | str] = ()) -> ReferenceTableIndex:
    """Load the language name / ISO 639-1 code table."""
    return load_table(LANGUAGE_TABLE, LANGUAGE_LAYOUT, search_paths)
