"""
colfmt core defaults.

Defines fallback formats, sort-rank sentinels and culture defaults consumed by the
resolver, the translators and ``colfmt.io.config.FormatSettings``. This module is
zero-IO and uses only the Python standard library.

Notes:
    - FormatSettings reads these as its defaults; change them here, not there.
    - ``FALLBACK_FORMAT`` is the last link of every format chain: an empty format
      never leaves the resolver.
"""

from __future__ import annotations

__all__ = [
    "FALLBACK_FORMAT",
    "DEFAULT_NUMERIC_FORMAT",
    "DEFAULT_DATETIME_FORMAT",
    "DEFAULT_CULTURE",
    "DEFAULT_CHART_AXIS_FORMAT",
    "UNRANKED_SORT",
    "ENUM_SORT_PREFIX_WIDTH",
    "PERCENTAGE_DEFAULT_FORMAT",
]

# Last-resort format when neither the element, its column, nor the global defaults provide one.
FALLBACK_FORMAT: str = "0"

# Global defaults applied when the element and its column carry no format.
DEFAULT_NUMERIC_FORMAT: str = "N0"
DEFAULT_DATETIME_FORMAT: str = "d"
DEFAULT_CULTURE: str = "en-US"

# d3 "general" format, used for chart axes of non-numeric, non-date elements.
DEFAULT_CHART_AXIS_FORMAT: str = "g"

# Rank of an element the report pass did not sort.
UNRANKED_SORT: int = 99999

# Width of the zero-padded positional prefix of enum sort keys (e.g. "000002").
ENUM_SORT_PREFIX_WIDTH: int = 6

# Format forced when a calculation option is switched on.
PERCENTAGE_DEFAULT_FORMAT: str = "P0"
