"""
Line-level parsing for delimited reference tables.

The header decides everything: its delimiter (tab if it contains one, comma
otherwise) and the positions of the name and code columns. Data rows are
split positionally with no quoting support.
"""

from country_lookup.reference.errors import MalformedHeaderError
from country_lookup.reference.models import COMMA, TAB, Entry, TableLayout

BOM = "\ufeff"
COMMENT_PREFIX = "#"


def strip_bom(text: str) -> str:
    """Remove byte-order marks from text."""
    return text.replace(BOM, "")


def sniff_delimiter(header: str) -> str:
    """Return tab if the header contains one, comma otherwise."""
    return TAB if TAB in header else COMMA


def parse_header(header: str, delimiter: str, layout: TableLayout) -> tuple[int, int]:
    """
    Locate the name and code columns in a header line.

    When several columns match the same role, the last one wins.

    Args:
        header: Header line with its BOM and line terminator removed
        delimiter: Delimiter returned by sniff_delimiter
        layout: Column naming rules

    Returns:
        (name column index, code column index)

    Raises:
        MalformedHeaderError: If either column is missing
    """
    columns = header.split(delimiter)
    name_idx = -1
    code_idx = -1

    for i, column in enumerate(columns):
        label = column.strip().lower()
        if label in layout.name_columns:
            name_idx = i
        if label.startswith(layout.code_prefix):
            code_idx = i

    if name_idx < 0 or code_idx < 0:
        raise MalformedHeaderError(columns, layout.describe())

    return name_idx, code_idx


def parse_row(line: str, delimiter: str, name_idx: int, code_idx: int) -> Entry | None:
    """
    Turn one data line into an Entry.

    Returns None for lines that are skipped: blank lines, comments, rows too
    short to reach both columns, and rows whose name or code is empty.
    """
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    parts = line.split(delimiter)
    if len(parts) <= max(name_idx, code_idx):
        return None

    name = parts[name_idx].strip()
    code = strip_bom(parts[code_idx]).strip().lower()

    if not name or not code:
        return None

    return Entry(name=name, code=code)
