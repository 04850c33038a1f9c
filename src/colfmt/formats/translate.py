"""
Dialect translators: canonical format code -> renderer format string.

Three stateless functions share one signature ``(fmt, culture, kind) -> str`` and depend
on no report or column, so they can be exercised in isolation. ``kind`` is the resolved
classification of the element (Count aggregates are numeric whatever the column type);
it disambiguates codes such as "D" (numeric integer vs. long date).

| dialect     | numeric (table) | numeric (other)     | date/time              | text        |
|-------------|-----------------|---------------------|------------------------|-------------|
| chart axis  | d3-format       | passthrough         | expanded, d3 tokens    | "g"         |
| calendar    | passthrough     | passthrough         | expanded, moment.js    | passthrough |
| spreadsheet | Excel format    | "" (std. families)  | expanded culture form  | passthrough |
"""

from __future__ import annotations

from collections.abc import Callable

from colfmt.core.constants import DEFAULT_CHART_AXIS_FORMAT
from colfmt.core.grammar import FormatDialect, FormatKind
from colfmt.core.schema import Culture

from .dates import calendar_datetime, chart_axis_datetime
from .numeric import chart_axis_numeric, spreadsheet_numeric

__all__ = [
    "to_chart_axis_format",
    "to_calendar_format",
    "to_spreadsheet_format",
    "translate",
]


def to_chart_axis_format(fmt: str, culture: Culture, kind: FormatKind) -> str:
    """
    Translate to a chart-axis (d3-format / d3-time-format) specifier.

    Args:
        fmt (str): Resolved canonical format.
        culture (Culture): Culture supplying date patterns and separators.
        kind (FormatKind): Resolved classification of the element.

    Returns:
        str: The d3 specifier; numeric codes outside the table are returned unchanged.

    Examples:
        >>> from colfmt.core.cultures import get_culture
        >>> to_chart_axis_format("C0", get_culture("en-US"), FormatKind.NUMERIC)
        '$,.0f'
    """
    if kind is FormatKind.NUMERIC:
        found = chart_axis_numeric(fmt)
        return found if found is not None else fmt
    if kind is FormatKind.DATETIME:
        return chart_axis_datetime(fmt, culture)
    return DEFAULT_CHART_AXIS_FORMAT


def to_calendar_format(fmt: str, culture: Culture, kind: FormatKind) -> str:
    """
    Translate to a calendar-widget (moment.js) pattern.

    Examples:
        >>> from colfmt.core.cultures import get_culture
        >>> to_calendar_format("t", get_culture("en-US"), FormatKind.DATETIME)
        'h:mm A'
    """
    if kind is FormatKind.DATETIME:
        return calendar_datetime(fmt, culture)
    return fmt


def to_spreadsheet_format(fmt: str, culture: Culture, kind: FormatKind) -> str:
    """
    Translate to an Excel number format.

    Dates use the culture's concrete .NET pattern as-is: Excel accepts the same
    day/month/year letters, so no token rewriting is done.

    Examples:
        >>> from colfmt.core.cultures import get_culture
        >>> to_spreadsheet_format("N2", get_culture("en-US"), FormatKind.NUMERIC)
        '#,##0.00'
    """
    if kind is FormatKind.NUMERIC:
        return spreadsheet_numeric(fmt)
    if kind is FormatKind.DATETIME:
        return culture.expand_datetime_code(fmt)
    return fmt


_DIALECTS: dict[FormatDialect, Callable[[str, Culture, FormatKind], str]] = {
    FormatDialect.CHART_AXIS: to_chart_axis_format,
    FormatDialect.CALENDAR: to_calendar_format,
    FormatDialect.SPREADSHEET: to_spreadsheet_format,
}


def translate(fmt: str, culture: Culture, kind: FormatKind, dialect: FormatDialect) -> str:
    """Dispatch to the translator of ``dialect``."""
    return _DIALECTS[dialect](fmt, culture, kind)
