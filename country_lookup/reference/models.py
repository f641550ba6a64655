"""
Pydantic models for reference table rows and layouts.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


TAB = "\t"
COMMA = ","


class Entry(BaseModel):
    """One accepted row of a reference table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display name, original case")
    code: str = Field(..., min_length=1, description="Normalized lowercase code")


class TableLayout(BaseModel):
    """
    Header names that identify the name and code columns.

    A header column is the name column when its trimmed, lowercased text is
    one of ``name_columns``. It is the code column when that text starts
    with ``code_prefix``.
    """

    model_config = ConfigDict(frozen=True)

    name_columns: tuple[str, ...] = Field(
        default=("country", "name"),
        min_length=1,
        description="Exact header names for the display-name column",
    )
    code_prefix: str = Field(
        default="alpha-3",
        min_length=1,
        description="Header prefix for the code column",
    )

    @field_validator("name_columns")
    @classmethod
    def normalize_name_columns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Store name columns trimmed and lowercased."""
        return tuple(c.strip().lower() for c in v)

    @field_validator("code_prefix")
    @classmethod
    def normalize_code_prefix(cls, v: str) -> str:
        """Store the code prefix trimmed and lowercased."""
        return v.strip().lower()

    def describe(self) -> str:
        """Human-readable summary used in header errors."""
        names = "/".join(repr(c) for c in self.name_columns)
        return f"a {names} column and a {self.code_prefix!r}* column"


COUNTRY_LAYOUT = TableLayout()
LANGUAGE_LAYOUT = TableLayout(name_columns=("language", "name"), code_prefix="iso 639-1")
