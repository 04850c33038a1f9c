"""
Canonical colfmt grammar and helpers.

Defines column types, pivot positions, aggregate functions, sort orders, calculation
options and the canonical format-code vocabulary. Includes zero-IO validators and
parse helpers used across the resolver, the translators and the configuration layer.

Responsibilities
- Define enums with lower_snake serialized values.
- Provide parse helpers that turn serialized values back into enums.
- Classify canonical format codes (generic numeric, numeric family + decimals,
  standard date/time codes).

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (persisted report documents): lower_snake
   - Human labels (editor lists, synthesized display names) live in lookup tables,
     never in enum values.

2) Canonical format codes are .NET-style and case-sensitive:
   - "0", "N", "D", "G": generic numeric
   - "N0".."N8", "D0".."D8", "G0".."G8": fixed point with 0-8 decimals
   - "P0".."P8": percentage, "C0".."C8": currency
   - "d", "D", "t", "T", "g", "G", "f", "F": standard date/time codes
   "D" and "G" are both numeric and date codes; the resolved FormatKind decides.

Examples
--------
>>> from colfmt.core.grammar import split_numeric_code, is_datetime_code
>>> split_numeric_code("P2")
('P', 2)
>>> split_numeric_code("N")
('N', None)
>>> split_numeric_code("#,##0") is None
True
>>> is_datetime_code("g")
True
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final

from .errors import GrammarError

__all__ = [
    "ColumnType",
    "PivotPosition",
    "AggregateFunction",
    "YesNoDefault",
    "SortOrder",
    "CalculationOption",
    "FormatKind",
    "FormatDialect",
    "DATETIME_CODES",
    "GENERIC_NUMERIC_CODES",
    "MAX_TABLE_DECIMALS",
    # helpers/validators
    "is_lower_snake",
    "assert_lower_snake",
    "column_type_from_value",
    "pivot_position_from_value",
    "aggregate_function_from_value",
    "sort_order_from_value",
    "calculation_option_from_value",
    "aggregate_description",
    "sort_order_label",
    "sort_direction",
    "split_numeric_code",
    "is_generic_numeric_code",
    "is_percentage_code",
    "is_datetime_code",
    "ensure_all_enum_values_lower_snake",
]


# ============================================================================
# COLUMN METADATA
# ============================================================================


class ColumnType(Enum):
    """
    Data type of a source column or an element override.

    Notes:
      DEFAULT on an element means "inherit from the referenced column".
    """

    NUMERIC = "numeric"
    TEXT = "text"
    UNICODE_TEXT = "unicode_text"
    DATETIME = "datetime"
    DEFAULT = "default"


class PivotPosition(Enum):
    """Structural placement of an element in the cross table."""

    ROW = "row"
    COLUMN = "column"
    PAGE = "page"
    DATA = "data"


class AggregateFunction(Enum):
    """
    Aggregate applied to Data elements (and to totals).

    ``sql_name`` is the SQL function emitted in column expressions, e.g.
    ``Sum(amount)``; COUNT_DISTINCT emits ``Count(DISTINCT amount)``.
    """

    SUM = "sum"
    MIN = "min"
    MAX = "max"
    COUNT = "count"
    AVG = "avg"
    COUNT_DISTINCT = "count_distinct"

    @property
    def sql_name(self) -> str:
        return _AGGREGATE_SQL[self]


class YesNoDefault(Enum):
    """Tri-state override; DEFAULT inherits the column's own flag."""

    YES = "yes"
    NO = "no"
    DEFAULT = "default"


class SortOrder(Enum):
    """Sort policy chosen in the report definition."""

    AUTOMATIC_ASCENDANT = "automatic_ascendant"
    AUTOMATIC_DESCENDANT = "automatic_descendant"
    NOT_SORTED = "not_sorted"
    ASCENDANT = "ascendant"
    DESCENDANT = "descendant"


class CalculationOption(Enum):
    """Table calculation applied to numeric Data elements."""

    NO = "no"
    PERCENTAGE_ROW = "percentage_row"
    PERCENTAGE_COLUMN = "percentage_column"
    PERCENTAGE_ALL = "percentage_all"


# ============================================================================
# FORMAT CLASSIFICATION
# ============================================================================


class FormatKind(Enum):
    """Resolved classification handed to the dialect translators."""

    NUMERIC = "numeric"
    DATETIME = "datetime"
    TEXT = "text"


class FormatDialect(Enum):
    """Downstream renderer grammars."""

    CHART_AXIS = "chart_axis"
    CALENDAR = "calendar"
    SPREADSHEET = "spreadsheet"


DATETIME_CODES: Final[frozenset[str]] = frozenset("dDtTgGfF")
GENERIC_NUMERIC_CODES: Final[frozenset[str]] = frozenset({"0", "N", "D", "G"})

# Decimal places covered by the translation tables.
MAX_TABLE_DECIMALS: Final[int] = 8

_AGGREGATE_SQL: Final[dict[AggregateFunction, str]] = {
    AggregateFunction.SUM: "Sum",
    AggregateFunction.MIN: "Min",
    AggregateFunction.MAX: "Max",
    AggregateFunction.COUNT: "Count",
    AggregateFunction.AVG: "Avg",
    AggregateFunction.COUNT_DISTINCT: "Count",
}

_AGGREGATE_DESCRIPTIONS: Final[dict[AggregateFunction, str]] = {
    AggregateFunction.SUM: "Sum",
    AggregateFunction.MIN: "Minimum",
    AggregateFunction.MAX: "Maximum",
    AggregateFunction.COUNT: "Count",
    AggregateFunction.AVG: "Average",
    AggregateFunction.COUNT_DISTINCT: "Count Distinct",
}

_SORT_LABELS: Final[dict[SortOrder, str]] = {
    SortOrder.AUTOMATIC_ASCENDANT: "Automatic Ascendant",
    SortOrder.AUTOMATIC_DESCENDANT: "Automatic Descendant",
    SortOrder.NOT_SORTED: "Not sorted",
    SortOrder.ASCENDANT: "Ascendant",
    SortOrder.DESCENDANT: "Descendant",
}

_SORT_DIRECTIONS: Final[dict[SortOrder, str | None]] = {
    SortOrder.AUTOMATIC_ASCENDANT: "ASC",
    SortOrder.AUTOMATIC_DESCENDANT: "DESC",
    SortOrder.NOT_SORTED: None,
    SortOrder.ASCENDANT: "ASC",
    SortOrder.DESCENDANT: "DESC",
}


# ============================================================================
# Helpers & Validators (zero I/O)
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")
_NUMERIC_CODE_RE: Final[re.Pattern[str]] = re.compile(r"^([A-Z])(\d{1,2})?$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Examples:
      >>> is_lower_snake("automatic_ascendant")
      True
      >>> is_lower_snake("Automatic Ascendant")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Raises:
      GrammarError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise GrammarError(f"{what} must be lower_snake (got: {value!r})")


def _parse(enum_cls: type[Enum], s: str, what: str) -> Enum:
    assert_lower_snake(s, what)
    try:
        return enum_cls(s)
    except ValueError as exc:
        allowed = sorted(m.value for m in enum_cls)
        raise GrammarError(f"{what} must be one of {allowed} (got {s!r})") from exc


def column_type_from_value(s: str) -> ColumnType:
    """Parse a lower_snake column type (e.g. "unicode_text")."""
    return _parse(ColumnType, s, "column_type")  # type: ignore[return-value]


def pivot_position_from_value(s: str) -> PivotPosition:
    """Parse a lower_snake pivot position (e.g. "data")."""
    return _parse(PivotPosition, s, "pivot_position")  # type: ignore[return-value]


def aggregate_function_from_value(s: str) -> AggregateFunction:
    """Parse a lower_snake aggregate function (e.g. "count_distinct")."""
    return _parse(AggregateFunction, s, "aggregate_function")  # type: ignore[return-value]


def sort_order_from_value(s: str) -> SortOrder:
    """Parse a lower_snake sort order (e.g. "automatic_descendant")."""
    return _parse(SortOrder, s, "sort_order")  # type: ignore[return-value]


def calculation_option_from_value(s: str) -> CalculationOption:
    """Parse a lower_snake calculation option (e.g. "percentage_row")."""
    return _parse(CalculationOption, s, "calculation_option")  # type: ignore[return-value]


def aggregate_description(fn: AggregateFunction) -> str:
    """
    Human description of an aggregate, used in synthesized display names.

    Examples:
      >>> aggregate_description(AggregateFunction.AVG)
      'Average'
    """
    return _AGGREGATE_DESCRIPTIONS[fn]


def sort_order_label(order: SortOrder) -> str:
    """Editor label of a sort order (e.g. "Automatic Ascendant")."""
    return _SORT_LABELS[order]


def sort_direction(order: SortOrder) -> str | None:
    """SQL direction ("ASC"/"DESC") of a sort order, None when not sorted."""
    return _SORT_DIRECTIONS[order]


def split_numeric_code(code: str) -> tuple[str, int | None] | None:
    """
    Split a standard numeric code into (family letter, decimals).

    Args:
      code (str): Candidate canonical code.

    Returns:
      tuple[str, int | None] | None: ("N", 2) for "N2", ("P", None) for "P",
      None when the code is not a single upper-case letter optionally followed by
      up to two digits (custom patterns such as "#,##0.00").
    """
    match = _NUMERIC_CODE_RE.match(code or "")
    if match is None:
        return None
    digits = match.group(2)
    return match.group(1), (int(digits) if digits is not None else None)


def is_generic_numeric_code(code: str) -> bool:
    return code in GENERIC_NUMERIC_CODES


def is_percentage_code(code: str) -> bool:
    """True for "P" and "P0".."P99"."""
    parts = split_numeric_code(code)
    return parts is not None and parts[0] == "P"


def is_datetime_code(code: str) -> bool:
    """True for the eight standard date/time codes (d D t T g G f F)."""
    return code in DATETIME_CODES


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.

    Examples:
      >>> ensure_all_enum_values_lower_snake([ColumnType, PivotPosition, SortOrder])
    """
    for E in enums:
        for m in E:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{E.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
