"""
Pydantic v2 models for the inputs of element resolution: enumerated lists, source
columns, the owning metadata catalog, and culture settings.

Responsibilities
- Define the read-only input contracts handed to the resolver by the report/column layer.
- Normalize loose enum-like strings (e.g. column types from a report document) via
  grammar helpers.
- Expose small lookup helpers (enum entries by id or display value, columns by id).

Style
- Zero-IO (stdlib + pydantic only).
- Google-style docstrings with Attributes, Returns and Examples where useful.

References
- grammar: src/colfmt/core/grammar.py (enums, format-code vocabulary)
- cultures: src/colfmt/core/cultures.py (built-in Culture registry)
- tests: tests/core/*
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .grammar import ColumnType, column_type_from_value
from .typing import ColumnId, EnumId

__all__ = [
    "EnumValue",
    "EnumList",
    "ColumnRef",
    "MetaCatalog",
    "Culture",
]


# ============================================================================
# Enumerated lists
# ============================================================================


class EnumValue(BaseModel):
    """
    One entry of an enumerated list.

    Attributes:
        id (str): Stored value (what the database returns).
        display_value (str): Value shown to users (before translation).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    display_value: str = ""

    @field_validator("display_value", mode="before")
    @classmethod
    def _default_display(cls, v: Any) -> Any:
        return "" if v is None else v


class EnumList(BaseModel):
    """
    Ordered list of enumerated values.

    Attributes:
        id (str): Identifier used by element overrides (``enum_override_id``).
        name (str): Human name of the list.
        values (list[EnumValue]): Entries in declaration order.
        use_position (bool): If True, sorted elements order values by their position
            in ``values`` rather than alphabetically.

    Examples:
        >>> from colfmt.core.schema import EnumList, EnumValue
        >>> en = EnumList(id="e1", values=[EnumValue(id="1", display_value="Low")])
        >>> en.find_by_display_value("Low").id
        '1'
    """

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str = ""
    values: list[EnumValue] = Field(default_factory=list)
    use_position: bool = True

    def find_by_id(self, value_id: str) -> EnumValue | None:
        return next((v for v in self.values if v.id == value_id), None)

    def find_by_display_value(self, display_value: str) -> EnumValue | None:
        return next((v for v in self.values if v.display_value == display_value), None)

    def last_index_of(self, value: EnumValue) -> int:
        """Position of the last entry equal to ``value``; -1 if absent."""
        for index in range(len(self.values) - 1, -1, -1):
            if self.values[index] == value:
                return index
        return -1


# ============================================================================
# Columns and catalog
# ============================================================================


class ColumnRef(BaseModel):
    """
    Source column definition, owned by the metadata layer and read-only here.

    Attributes:
        id (str): Identifier referenced by ``ElementDescriptor.column_id``.
        name (str): SQL name of the column (used in column expressions).
        display_name (str): Default display name.
        type (ColumnType): Base data type; accepts enum members or lower_snake strings.
        format (str): Default canonical format; "" means none.
        is_aggregate (bool): True if the column is already an aggregate expression.
        enum (EnumList | None): Optional enumerated list of the column.

    Examples:
        >>> from colfmt.core.schema import ColumnRef
        >>> ColumnRef(id="c1", name="amount", type="numeric").type.value
        'numeric'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: ColumnId
    name: str
    display_name: str = ""
    type: ColumnType = ColumnType.DEFAULT
    format: str = ""
    is_aggregate: bool = False
    enum: EnumList | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return column_type_from_value(v)
        return v

    @field_validator("format", "display_name", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class MetaCatalog(BaseModel):
    """
    Owning collection of columns and standalone enumerated lists.

    Passed explicitly to resolvers; there is no global registry of columns.

    Attributes:
        columns (dict[str, ColumnRef]): Columns keyed by id.
        enums (dict[str, EnumList]): Standalone lists keyed by id.
    """

    model_config = ConfigDict(extra="forbid")

    columns: dict[ColumnId, ColumnRef] = Field(default_factory=dict)
    enums: dict[EnumId, EnumList] = Field(default_factory=dict)

    @classmethod
    def of(cls, columns: list[ColumnRef], enums: list[EnumList] | None = None) -> MetaCatalog:
        """Build a catalog from lists, keying each entry by its id."""
        return cls(
            columns={c.id: c for c in columns},
            enums={e.id: e for e in (enums or [])},
        )

    def column(self, column_id: str | None) -> ColumnRef | None:
        if not column_id:
            return None
        return self.columns.get(ColumnId(column_id))

    def enum(self, enum_id: str | None) -> EnumList | None:
        if not enum_id:
            return None
        return self.enums.get(EnumId(enum_id))


# ============================================================================
# Culture
# ============================================================================


class Culture(BaseModel):
    """
    Locale data used by the translators and the display formatter.

    Patterns use .NET custom date/time syntax; "/" and ":" inside a pattern stand for
    the culture's date and time separators.

    Attributes:
        name (str): Culture name (e.g. "en-US"); "" for the invariant culture.
        date_separator (str): Actual date separator character(s).
        time_separator (str): Actual time separator character(s).
        short_date_pattern / long_date_pattern (str): Expansions of "d" / "D".
        short_time_pattern / long_time_pattern (str): Expansions of "t" / "T".
        day_names / abbreviated_day_names (list[str]): Monday-first names.
        month_names / abbreviated_month_names (list[str]): January-first names.
        am_designator / pm_designator (str): 12-hour clock suffixes.
        number_group_separator / number_decimal_separator (str): Numeric separators.
        currency_symbol (str): Currency sign.
        currency_symbol_first (bool): True renders "$1.00", False renders "1,00 €".
        percent_spaced (bool): True renders "12 %" instead of "12%".

    Examples:
        >>> from colfmt.core.cultures import get_culture
        >>> get_culture("en-US").expand_datetime_code("g")
        'M/d/yyyy h:mm tt'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    date_separator: str = "/"
    time_separator: str = ":"
    short_date_pattern: str = "MM/dd/yyyy"
    long_date_pattern: str = "dddd, dd MMMM yyyy"
    short_time_pattern: str = "HH:mm"
    long_time_pattern: str = "HH:mm:ss"
    day_names: list[str] = Field(
        default_factory=lambda: [
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ]
    )
    abbreviated_day_names: list[str] = Field(
        default_factory=lambda: ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    )
    month_names: list[str] = Field(
        default_factory=lambda: [
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ]
    )
    abbreviated_month_names: list[str] = Field(
        default_factory=lambda: [
            "Jan",
            "Feb",
            "Mar",
            "Apr",
            "May",
            "Jun",
            "Jul",
            "Aug",
            "Sep",
            "Oct",
            "Nov",
            "Dec",
        ]
    )
    am_designator: str = "AM"
    pm_designator: str = "PM"
    number_group_separator: str = ","
    number_decimal_separator: str = "."
    currency_symbol: str = "¤"
    currency_symbol_first: bool = True
    percent_spaced: bool = False

    @field_validator("day_names", "abbreviated_day_names")
    @classmethod
    def _seven_days(cls, v: list[str]) -> list[str]:
        if len(v) != 7:
            raise ValueError(f"expected 7 day names (got {len(v)})")
        return v

    @field_validator("month_names", "abbreviated_month_names")
    @classmethod
    def _twelve_months(cls, v: list[str]) -> list[str]:
        if len(v) != 12:
            raise ValueError(f"expected 12 month names (got {len(v)})")
        return v

    def expand_datetime_code(self, code: str) -> str:
        """
        Expand a standard date/time code to this culture's concrete pattern.

        Args:
            code (str): One of d D t T g G f F, or any custom pattern.

        Returns:
            str: The concrete pattern; custom patterns are returned unchanged.
        """
        if code == "d":
            return self.short_date_pattern
        if code == "D":
            return self.long_date_pattern
        if code == "t":
            return self.short_time_pattern
        if code == "T":
            return self.long_time_pattern
        if code == "g":
            return f"{self.short_date_pattern} {self.short_time_pattern}"
        if code == "G":
            return f"{self.short_date_pattern} {self.long_time_pattern}"
        if code == "f":
            return f"{self.long_date_pattern} {self.short_time_pattern}"
        if code == "F":
            return f"{self.long_date_pattern} {self.long_time_pattern}"
        return code
