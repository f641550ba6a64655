"""
Shared test fixtures for Country Lookup tests.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from country_lookup.reference.index import ReferenceTableIndex


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


# =============================================================================
# Reference Table Fixtures
# =============================================================================


COUNTRY_TSV = (
    "Country\tAlpha-2 code\tAlpha-3 code\tNumeric\n"
    "Canada\tCA\tCAN\t124\n"
    "France\tFR\tFRA\t250\n"
    "Germany\tDE\tDEU\t276\n"
    "# Territories are listed below\n"
    "\n"
    "Côte d'Ivoire\tCI\tCIV\t384\n"
)

COUNTRY_CSV = (
    "Alpha-3 code,Country\n"
    "CAN,Canada\n"
    "FRA,France\n"
)


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes table text into tmp_path and returns its directory."""

    def _write(text: str | bytes, name: str = "country-codes.txt", subdir: str = "tables") -> Path:
        table_dir = tmp_path / subdir
        table_dir.mkdir(parents=True, exist_ok=True)
        path = table_dir / name
        if isinstance(text, bytes):
            path.write_bytes(text)
        else:
            path.write_text(text, encoding="utf-8")
        return table_dir

    return _write


@pytest.fixture
def country_table_dir(write_table) -> Path:
    """Directory holding a small tab-delimited country table."""
    return write_table(COUNTRY_TSV)


@pytest.fixture
def country_index(country_table_dir: Path) -> ReferenceTableIndex:
    """Index over the small tab-delimited country table."""
    return ReferenceTableIndex.load("country-codes.txt", [country_table_dir])


@pytest.fixture
def country_csv_dir(write_table) -> Path:
    """Directory holding a small comma-delimited country table."""
    return write_table(COUNTRY_CSV, subdir="csv")
