"""
Pydantic configuration models for Country Lookup.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from country_lookup.reference.models import COUNTRY_LAYOUT, LANGUAGE_LAYOUT, TableLayout


class TableConfig(BaseModel):
    """Where to find one reference table and how to read its header."""

    resource_name: str = Field(..., min_length=1, description="Filename of the table")
    search_paths: list[Path] = Field(
        default_factory=list,
        description="Directories tried before the packaged data, in order",
    )
    layout: TableLayout = Field(
        default=COUNTRY_LAYOUT,
        description="Header names of the name and code columns",
    )


class CountryTableConfig(TableConfig):
    """Country name / alpha-3 code table."""

    resource_name: str = Field(default="country-codes.txt", min_length=1)
    layout: TableLayout = Field(default=COUNTRY_LAYOUT)


class LanguageTableConfig(TableConfig):
    """Language name / ISO 639-1 code table."""

    resource_name: str = Field(default="language-codes.txt", min_length=1)
    layout: TableLayout = Field(default=LANGUAGE_LAYOUT)


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: str = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Store the level name in upper case."""
        return v.strip().upper()


class LookupConfig(BaseModel):
    """Root configuration."""

    countries: CountryTableConfig = Field(default_factory=CountryTableConfig)
    languages: LanguageTableConfig = Field(default_factory=LanguageTableConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
