"""
Display-value rendering: runtime value + canonical format + culture -> text.

Numbers (int, float, Decimal) honour the standard numeric codes (C, D, E, F, G, N, P with
optional precision) and the custom "0" pattern; date/time values honour the standard
date codes and .NET custom patterns, tokenized with the same maximal-munch scanner as
the dialect translators.

``format_value`` raises FormatCodeError when a value cannot be rendered with the code
(e.g. "D2" on a float, a custom numeric pattern); ``display_value`` is the public,
never-raising entry point that falls back to ``str(value)``.

Examples:
    >>> from decimal import Decimal
    >>> from colfmt.core.cultures import get_culture
    >>> display_value(Decimal("1234.5"), "N2", get_culture("en-US"))
    '1,234.50'
    >>> display_value(1234.5, "N2", get_culture("de-DE"))
    '1.234,50'
    >>> display_value(1.5, "D2", get_culture("en-US"))
    '1.5'
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Final

from colfmt.core.errors import FormatCodeError
from colfmt.core.grammar import split_numeric_code
from colfmt.core.schema import Culture

from .tokens import scan

__all__ = [
    "format_value",
    "format_number",
    "format_datetime",
    "display_value",
]

logger = logging.getLogger(__name__)

Number = int | float | Decimal
_Temporal = dt.date | dt.time

# ----------------------------
# Numbers
# ----------------------------


def _localize(text: str, culture: Culture) -> str:
    # Python renders with "," groups and "." decimals; swap in one pass.
    table = str.maketrans(
        {",": culture.number_group_separator, ".": culture.number_decimal_separator}
    )
    return text.translate(table)


def _precision(decimals: int | None, default: int) -> int:
    return default if decimals is None else decimals


def _exponent_net(text: str) -> str:
    # Python "1.5E+03" -> .NET "1.5E+003"
    mantissa, _, exponent = text.partition("E")
    sign, digits = exponent[0], exponent[1:]
    return f"{mantissa}E{sign}{digits.zfill(3)}"


def format_number(value: Number, fmt: str, culture: Culture) -> str:
    """
    Render a number with a standard numeric code.

    Raises:
        FormatCodeError: For custom patterns other than "0", unknown families, and
            "D" applied to a non-integer.
    """
    if fmt == "0":
        return str(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    parts = split_numeric_code(fmt)
    if parts is None:
        raise FormatCodeError(f"unsupported numeric pattern {fmt!r}")
    family, decimals = parts

    if family == "N":
        return _localize(f"{value:,.{_precision(decimals, 2)}f}", culture)
    if family == "F":
        return _localize(f"{value:.{_precision(decimals, 2)}f}", culture)
    if family == "D":
        if not isinstance(value, int):
            raise FormatCodeError(
                f"format {fmt!r} requires an integer (got {type(value).__name__})"
            )
        digits = str(abs(value)).zfill(_precision(decimals, 0))
        return f"-{digits}" if value < 0 else digits
    if family == "P":
        body = _localize(f"{value * 100:,.{_precision(decimals, 2)}f}", culture)
        return f"{body} %" if culture.percent_spaced else f"{body}%"
    if family == "C":
        body = _localize(f"{abs(value):,.{_precision(decimals, 2)}f}", culture)
        sign = "-" if value < 0 else ""
        if culture.currency_symbol_first:
            return f"{sign}{culture.currency_symbol}{body}"
        return f"{sign}{body} {culture.currency_symbol}"
    if family == "E":
        return _localize(_exponent_net(f"{value:.{_precision(decimals, 6)}E}"), culture)
    if family == "G":
        if isinstance(value, int) and decimals is None:
            return str(value)
        return _localize(f"{value:.{_precision(decimals, 15) or 15}g}", culture)
    raise FormatCodeError(f"unsupported numeric format family {family!r}")


# ----------------------------
# Dates and times
# ----------------------------


def _hour12(v: _Temporal) -> int:
    h = getattr(v, "hour", 0) % 12
    return h or 12


def _designator(v: _Temporal, c: Culture) -> str:
    return c.am_designator if getattr(v, "hour", 0) < 12 else c.pm_designator


def _fraction(v: _Temporal) -> str:
    return f"{getattr(v, 'microsecond', 0) // 1000:03d}"


_DATE_PARTS: Final[dict[str, Callable[[Any, Culture], str]]] = {
    "dddd": lambda v, c: c.day_names[v.weekday()],
    "ddd": lambda v, c: c.abbreviated_day_names[v.weekday()],
    "dd": lambda v, c: f"{v.day:02d}",
    "d": lambda v, c: str(v.day),
    "MMMM": lambda v, c: c.month_names[v.month - 1],
    "MMM": lambda v, c: c.abbreviated_month_names[v.month - 1],
    "MM": lambda v, c: f"{v.month:02d}",
    "M": lambda v, c: str(v.month),
    "yyyy": lambda v, c: f"{v.year:04d}",
    "yyy": lambda v, c: f"{v.year:03d}",
    "yy": lambda v, c: f"{v.year % 100:02d}",
    "y": lambda v, c: str(v.year % 100),
    "HH": lambda v, c: f"{getattr(v, 'hour', 0):02d}",
    "H": lambda v, c: str(getattr(v, "hour", 0)),
    "hh": lambda v, c: f"{_hour12(v):02d}",
    "h": lambda v, c: str(_hour12(v)),
    "mm": lambda v, c: f"{getattr(v, 'minute', 0):02d}",
    "m": lambda v, c: str(getattr(v, "minute", 0)),
    "ss": lambda v, c: f"{getattr(v, 'second', 0):02d}",
    "s": lambda v, c: str(getattr(v, "second", 0)),
    "fff": lambda v, c: _fraction(v),
    "FFF": lambda v, c: _fraction(v).rstrip("0"),
    "tt": lambda v, c: _designator(v, c),
    "t": lambda v, c: _designator(v, c)[:1],
    "/": lambda v, c: c.date_separator,
    ":": lambda v, c: c.time_separator,
}


def format_datetime(value: _Temporal, fmt: str, culture: Culture) -> str:
    """
    Render a date, datetime or time with a standard code or custom pattern.

    Raises:
        FormatCodeError: If the pattern needs a component the value lacks
            (e.g. "yyyy" on a ``datetime.time``).
    """
    pattern = culture.expand_datetime_code(fmt)
    parts: list[str] = []
    for seg in scan(pattern, _DATE_PARTS.keys()):
        if seg.token is None:
            parts.append(seg.text)
            continue
        try:
            parts.append(_DATE_PARTS[seg.token](value, culture))
        except AttributeError as exc:
            raise FormatCodeError(
                f"token {seg.token!r} not applicable to {type(value).__name__}"
            ) from exc
    return "".join(parts)


# ----------------------------
# Entry points
# ----------------------------


def format_value(value: Any, fmt: str, culture: Culture) -> str:
    """
    Render a value with a canonical format; raises on unformattable input.

    Values that carry no format semantics (str, bool, None, other objects) are returned
    as ``str(value)`` ("" for None) without consulting ``fmt``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float, Decimal)):
        return format_number(value, fmt, culture)
    if isinstance(value, (dt.date, dt.time)):
        return format_datetime(value, fmt, culture)
    return str(value)


def display_value(value: Any, fmt: str, culture: Culture) -> str:
    """
    Render a value for display, never raising.

    Formatting failures fall back to the value's default text.
    """
    try:
        return format_value(value, fmt, culture)
    except (FormatCodeError, ValueError, TypeError, IndexError, ArithmeticError) as exc:
        logger.debug(f"Cannot format {value!r} with {fmt!r}: {exc}")
        return str(value)
