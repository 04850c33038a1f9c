"""
Date/time pattern rewriting for the chart-axis (d3-time-format) and calendar
(moment.js) dialects.

Pipeline for both dialects:
1) expand a standard code (d D t T g G f F) to the culture's concrete pattern;
2) rewrite the pattern with the maximal-munch scanner (``colfmt.formats.tokens``), the
   unquoted "/" date placeholder mapping to the culture's actual date separator.

Target tokens are emitted once and never rescanned, so "%d" produced from "dd" is not
turned into "%%e" by a later match of "d".

Examples:
    >>> from colfmt.core.cultures import get_culture
    >>> from colfmt.formats.dates import chart_axis_datetime, calendar_datetime
    >>> chart_axis_datetime("d", get_culture("en-US"))
    '%m/%e/%Y'
    >>> calendar_datetime("d", get_culture("en-US"))
    'M/D/YYYY'
"""

from __future__ import annotations

from typing import Final

from colfmt.core.schema import Culture

from .tokens import rewrite

__all__ = [
    "CHART_AXIS_DATETIME_TOKENS",
    "CALENDAR_DATETIME_TOKENS",
    "chart_axis_datetime",
    "calendar_datetime",
]

CHART_AXIS_DATETIME_TOKENS: Final[dict[str, str]] = {
    "dddd": "%A",
    "ddd": "%a",
    "dd": "%d",
    "d": "%e",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "yyyy": "%Y",
    "yyy": "%Y",
    "yy": "%y",
    "y": "%y",
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%I",
    "mm": "%M",
    "m": "%M",
    "ss": "%S",
    "s": "%S",
    "fff": "%L",
    "FFF": "%L",
    "tt": "%p",
}

CALENDAR_DATETIME_TOKENS: Final[dict[str, str]] = {
    "dddd": "dddd",
    "ddd": "ddd",
    "dd": "DD",
    "d": "D",
    "MMMM": "MMMM",
    "MMM": "MMM",
    "MM": "MM",
    "M": "M",
    "yyyy": "YYYY",
    "yyy": "YYYY",
    "yy": "YY",
    "y": "YY",
    "HH": "HH",
    "H": "H",
    "hh": "hh",
    "h": "h",
    "mm": "mm",
    "m": "m",
    "ss": "ss",
    "s": "s",
    "fff": "SSS",
    "FFF": "SSS",
    "tt": "A",
    "zzz": "Z",
}


def _d3_literal(text: str) -> str:
    return text.replace("%", "%%")


def _moment_literal(text: str) -> str:
    return f"[{text}]"


def _with_separator(table: dict[str, str], culture: Culture) -> dict[str, str]:
    # "/" is the date separator placeholder; quoted "/" stays literal.
    return {**table, "/": culture.date_separator}


def chart_axis_datetime(fmt: str, culture: Culture) -> str:
    """d3-time-format specifier for a canonical date/time code or custom pattern."""
    pattern = culture.expand_datetime_code(fmt)
    table = _with_separator(CHART_AXIS_DATETIME_TOKENS, culture)
    return rewrite(pattern, table, literal=_d3_literal)


def calendar_datetime(fmt: str, culture: Culture) -> str:
    """moment.js pattern for a canonical date/time code or custom pattern."""
    pattern = culture.expand_datetime_code(fmt)
    table = _with_separator(CALENDAR_DATETIME_TOKENS, culture)
    return rewrite(pattern, table, literal=_moment_literal)
