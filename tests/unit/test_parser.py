"""
Unit tests for delimiter sniffing, header classification and row parsing.
"""

import pytest

from country_lookup.reference.errors import MalformedHeaderError
from country_lookup.reference.models import (
    COUNTRY_LAYOUT,
    LANGUAGE_LAYOUT,
    TableLayout,
)
from country_lookup.reference.parser import (
    parse_header,
    parse_row,
    sniff_delimiter,
    strip_bom,
)


class TestSniffDelimiter:
    def test_tab_in_header_means_tab(self):
        assert sniff_delimiter("Name\tAlpha-3") == "\t"

    def test_tab_wins_over_comma(self):
        assert sniff_delimiter("Country, long form\tAlpha-3 code") == "\t"

    def test_no_tab_means_comma(self):
        assert sniff_delimiter("Country,Alpha-3 code") == ","

    def test_single_column_falls_back_to_comma(self):
        assert sniff_delimiter("Country") == ","


class TestParseHeader:
    def test_country_and_alpha3_columns(self):
        assert parse_header("Country,Alpha-3 code", ",", COUNTRY_LAYOUT) == (0, 1)

    def test_column_order_is_irrelevant(self):
        header = "Numeric\tAlpha-3 code\tAlpha-2 code\tName"
        assert parse_header(header, "\t", COUNTRY_LAYOUT) == (3, 1)

    def test_labels_are_trimmed_and_case_insensitive(self):
        assert parse_header("  COUNTRY , ALPHA-3 ", ",", COUNTRY_LAYOUT) == (0, 1)

    def test_name_column_must_match_exactly(self):
        with pytest.raises(MalformedHeaderError) as exc_info:
            parse_header("Country name,Alpha-3 code", ",", COUNTRY_LAYOUT)

        assert exc_info.value.columns == ["Country name", "Alpha-3 code"]

    def test_missing_code_column_raises(self):
        with pytest.raises(MalformedHeaderError, match="Alpha-2 code"):
            parse_header("Country,Alpha-2 code", ",", COUNTRY_LAYOUT)

    def test_last_matching_column_wins(self):
        assert parse_header("Name,Country,Alpha-3", ",", COUNTRY_LAYOUT) == (1, 2)

    def test_language_layout(self):
        assert parse_header("ISO 639-1\tLanguage", "\t", LANGUAGE_LAYOUT) == (1, 0)

    def test_custom_layout_is_normalized(self):
        layout = TableLayout(name_columns=(" Region ",), code_prefix=" UN M49")
        assert layout.name_columns == ("region",)
        assert parse_header("region,UN M49 code", ",", layout) == (0, 1)


class TestParseRow:
    def test_accepts_row(self):
        entry = parse_row("Canada,CAN\n", ",", 0, 1)

        assert entry is not None
        assert entry.name == "Canada"
        assert entry.code == "can"

    def test_trims_fields(self):
        entry = parse_row("  United States of America ,  USA  ", ",", 0, 1)

        assert entry.name == "United States of America"
        assert entry.code == "usa"

    @pytest.mark.parametrize("line", ["", "   \n", "# comment", "  #Canada,CAN"])
    def test_blank_and_comment_lines_are_skipped(self, line):
        assert parse_row(line, ",", 0, 1) is None

    def test_short_row_is_skipped(self):
        assert parse_row("Canada", ",", 0, 1) is None

    def test_empty_name_is_skipped(self):
        assert parse_row(",XXX", ",", 0, 1) is None

    def test_empty_code_is_skipped(self):
        assert parse_row("France,", ",", 0, 1) is None

    def test_bom_is_stripped_from_code(self):
        entry = parse_row("Canada,\ufeffCAN", ",", 0, 1)
        assert entry.code == "can"

    def test_code_of_only_bom_is_skipped(self):
        assert parse_row("Canada,\ufeff", ",", 0, 1) is None

    def test_no_quote_handling(self):
        entry = parse_row('"Korea, Republic of",KOR', ",", 0, 2)
        assert entry is not None
        assert entry.name == '"Korea'
        assert entry.code == "kor"


def test_strip_bom():
    assert strip_bom("\ufeffCountry") == "Country"
    assert strip_bom("Country") == "Country"
