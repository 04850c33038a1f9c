"""
Core exception types raised by grammar parsing, culture lookup, and value formatting.

Provides typed exceptions for core-domain failures:
- GrammarError for enum parsing/naming violations.
- FormatCodeError for values that cannot be rendered with a canonical format code.
- CultureError for strict culture lookups that miss the registry.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Resolution and dialect translation never raise these; they degrade to defaults.
      Only the strict helpers (``*_from_value``, ``get_culture(..., strict=True)``)
      and the inner display formatter raise, and the formatter's errors are caught
      by ``colfmt.formats.display.display_value``.

Examples:
    Catch a parse failure.

    >>> from colfmt.core.errors import GrammarError
    >>> from colfmt.core.grammar import sort_order_from_value
    >>> try:
    ...     sort_order_from_value("Ascendant")
    ... except GrammarError as e:
    ...     msg = str(e)
    >>> "lower_snake" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "GrammarError",
    "FormatCodeError",
    "CultureError",
]


class GrammarError(ValueError):
    """Grammar/naming normalization failure (e.g., not lower_snake or unknown enum value)."""


class FormatCodeError(ValueError):
    """A value cannot be rendered with the given canonical format code."""


class CultureError(LookupError):
    """Unknown culture name requested with strict lookup."""
