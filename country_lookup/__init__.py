"""
Country Lookup
==============

Bidirectional lookups between country names and ISO-style three-letter codes.

The reference tables are small delimited text files whose delimiter and column
order are detected at load time. See ``country_lookup.reference``.
"""

__version__ = "0.1.0"
__author__ = "Country Lookup"
