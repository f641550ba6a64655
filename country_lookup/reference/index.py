"""
Bidirectional name/code index built from a delimited reference table.
"""

import io
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

import structlog

from country_lookup.reference.errors import (
    EmptyResourceError,
    EmptyResultSetError,
    LoadError,
)
from country_lookup.reference.models import COUNTRY_LAYOUT, TAB, Entry, TableLayout
from country_lookup.reference.parser import (
    parse_header,
    parse_row,
    sniff_delimiter,
    strip_bom,
)
from country_lookup.reference.resolver import Location, default_candidates, open_first

logger = structlog.get_logger()


def _normalize(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip().lower()


class ReferenceTableIndex:
    """
    Immutable code→name and name→code lookups over one reference table.

    Both mappings are filled together, row by row, in a single pass. On
    duplicate keys the later row wins. Instances are read-only and safe to
    share between threads.

    Usage:
        index = ReferenceTableIndex.load("country-codes.txt")
        index.name_for_code(" CAN ")   # "Canada"
        index.code_for_name("canada")  # "can"
    """

    def __init__(
        self,
        code_to_name: Mapping[str, str],
        name_to_code: Mapping[str, str],
        delimiter: str,
        source: str,
    ):
        """
        Wrap already-built mappings. Use load() or from_lines() instead.

        Args:
            code_to_name: Normalized code -> display name
            name_to_code: Normalized name -> normalized code
            delimiter: Delimiter the table was parsed with
            source: Where the table came from
        """
        self._code_to_name = MappingProxyType(dict(code_to_name))
        self._name_to_code = MappingProxyType(dict(name_to_code))
        self._delimiter = delimiter
        self._source = source

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def load(
        cls,
        resource_name: str,
        candidates: Sequence[Location] | None = None,
        layout: TableLayout = COUNTRY_LAYOUT,
    ) -> "ReferenceTableIndex":
        """
        Load a table from the first candidate location that holds it.

        Args:
            resource_name: Filename of the table
            candidates: Locations tried in order (default: package root, then
                        the package data directory)
            layout: Header naming rules

        Returns:
            A ready index

        Raises:
            ResourceNotFoundError: If no candidate holds the resource
            EmptyResourceError: If the resource has no header line
            MalformedHeaderError: If the header lacks a required column
            EmptyResultSetError: If no data row survives validation
            LoadError: If reading or decoding fails after the resource opened
        """
        if candidates is None:
            candidates = default_candidates()

        with open_first(resource_name, candidates) as (location, stream):
            text = io.TextIOWrapper(stream, encoding="utf-8")
            try:
                return cls.from_lines(text, layout=layout, source=location)
            except (OSError, UnicodeDecodeError) as e:
                raise LoadError(location, e) from e

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        layout: TableLayout = COUNTRY_LAYOUT,
        source: str = "<memory>",
    ) -> "ReferenceTableIndex":
        """
        Build an index from text lines, the first of which is the header.

        Blank lines, ``#`` comments, short rows and rows with an empty name or
        code are skipped without error.
        """
        iterator = iter(lines)
        header = next(iterator, None)
        if header is None:
            raise EmptyResourceError(source)

        header = strip_bom(header.rstrip("\r\n"))
        delimiter = sniff_delimiter(header)
        name_idx, code_idx = parse_header(header, delimiter, layout)

        code_to_name: dict[str, str] = {}
        name_to_code: dict[str, str] = {}
        skipped = 0

        for line in iterator:
            entry = parse_row(line, delimiter, name_idx, code_idx)
            if entry is None:
                skipped += 1
                continue
            code_to_name[entry.code] = entry.name
            name_to_code[entry.name.lower()] = entry.code

        if not code_to_name:
            raise EmptyResultSetError(source)

        logger.info(
            "reference_table_loaded",
            source=source,
            delimiter="tab" if delimiter == TAB else "comma",
            entries=len(code_to_name),
            skipped=skipped,
        )

        return cls(code_to_name, name_to_code, delimiter, source)

    # =========================================================================
    # Queries
    # =========================================================================

    def name_for_code(self, code: str | None) -> str | None:
        """Return the display name for a code, or None."""
        key = _normalize(code)
        if key is None:
            return None
        return self._code_to_name.get(key)

    def code_for_name(self, name: str | None) -> str | None:
        """Return the normalized code for a name, or None."""
        key = _normalize(name)
        if key is None:
            return None
        return self._name_to_code.get(key)

    def size(self) -> int:
        """Number of indexed entries."""
        return len(self._code_to_name)

    def codes(self) -> list[str]:
        """All normalized codes, sorted."""
        return sorted(self._code_to_name)

    def names(self) -> list[str]:
        """All display names, sorted case-insensitively."""
        return sorted(self._code_to_name.values(), key=str.lower)

    def entries(self) -> list[Entry]:
        """All entries, sorted by code."""
        return [Entry(name=self._code_to_name[c], code=c) for c in self.codes()]

    @property
    def code_to_name(self) -> Mapping[str, str]:
        return self._code_to_name

    @property
    def name_to_code(self) -> Mapping[str, str]:
        return self._name_to_code

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def source(self) -> str:
        return self._source

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        return _normalize(code) in self._code_to_name

    def __repr__(self) -> str:
        return f"ReferenceTableIndex(source={self._source!r}, entries={self.size()})"
