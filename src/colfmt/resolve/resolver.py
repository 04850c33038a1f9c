"""
Element resolver: effective type, format, aggregation, naming and dialect formats of a
report element.

Every derived property follows a short override chain, queried in order, first present
value wins:

    element override -> referenced column -> global default (FormatSettings) -> fallback

Resolution never raises. A dangling column reference yields empty names, the fallback
format "0" and type DEFAULT, so a broken reference cannot crash report layout.

Responsibilities
- Lazily look up the referenced ColumnRef in the catalog passed at construction (no
  global registry); ``change_column`` is the only cache invalidation.
- Classify the element (numeric/text/date/enum), with Data+Count always numeric.
- Apply the coupled mutations: default aggregates, calculation option -> percentage
  format, type change -> format reset, column change -> override reset.
- Hand the resolved format, kind and culture to the stateless translators.

Examples:
    >>> from colfmt.core.schema import ColumnRef, MetaCatalog
    >>> from colfmt.resolve import ElementDescriptor, ElementResolver
    >>> catalog = MetaCatalog.of([ColumnRef(id="c1", name="amount", display_name="Amount",
    ...                                     type="numeric")])
    >>> r = ElementResolver(ElementDescriptor(column_id="c1", pivot_position="data"), catalog)
    >>> r.resolve_format(), r.resolve_sql_expression()
    ('N0', 'Sum(amount)')
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from colfmt.core.constants import FALLBACK_FORMAT, PERCENTAGE_DEFAULT_FORMAT
from colfmt.core.grammar import (
    AggregateFunction,
    CalculationOption,
    ColumnType,
    FormatKind,
    PivotPosition,
    YesNoDefault,
    aggregate_description,
    is_percentage_code,
)
from colfmt.core.schema import ColumnRef, EnumList, MetaCatalog
from colfmt.formats import display_value as _display_value
from colfmt.formats import to_calendar_format, to_chart_axis_format, to_spreadsheet_format
from colfmt.formats.tokens import scan
from colfmt.io.config import FormatSettings

from .context import ReportContext
from .descriptor import ElementDescriptor
from .sorting import enum_sort_key
from .sorting import final_sort_rank as _final_sort_rank
from .sorting import is_sorted as _is_sorted

__all__ = ["ElementResolver"]

logger = logging.getLogger(__name__)

_TIME_TOKENS: frozenset[str] = frozenset(
    {"HH", "H", "hh", "h", "mm", "m", "ss", "s", "fff", "FFF", "tt"}
)


def _first_present(*providers: Callable[[], str | None]) -> str | None:
    for provider in providers:
        value = provider()
        if value:
            return value
    return None


def _aggregate_sql(fn: AggregateFunction, column_name: str) -> str:
    if fn is AggregateFunction.COUNT_DISTINCT:
        return f"{fn.sql_name}(DISTINCT {column_name})"
    return f"{fn.sql_name}({column_name})"


class ElementResolver:
    """
    Resolves one ElementDescriptor against its catalog, report context and settings.

    Args:
        descriptor (ElementDescriptor): Element state; mutated only through this resolver.
        catalog (MetaCatalog): Owning collection of columns and standalone enum lists.
        context (ReportContext | None): Culture and translations; defaults to the
            settings' culture with no translations.
        settings (FormatSettings | None): Global default formats; defaults to
            ``FormatSettings()``.

    Notes:
        The column cache is idempotent: concurrent first reads may both look the column
        up, and both store the same value. No locking is needed.
    """

    def __init__(
        self,
        descriptor: ElementDescriptor,
        catalog: MetaCatalog,
        context: ReportContext | None = None,
        settings: FormatSettings | None = None,
    ) -> None:
        self.descriptor = descriptor
        self.catalog = catalog
        self.settings = settings or FormatSettings()
        self.context = context or ReportContext(culture=self.settings.culture_info())
        self._column: ColumnRef | None = None

    def __repr__(self) -> str:
        d = self.descriptor
        return (
            f"ElementResolver(id={d.id!r}, column_id={d.column_id!r}, "
            f"position={d.pivot_position.value})"
        )

    # ----------------------------
    # Column reference
    # ----------------------------

    @property
    def column(self) -> ColumnRef | None:
        """Referenced column, looked up on first access and cached."""
        if self._column is None and not self.descriptor.is_free_standing:
            found = self.catalog.column(self.descriptor.column_id)
            if found is None:
                logger.debug(f"Column {self.descriptor.column_id!r} not found in catalog")
            self._column = found
        return self._column

    def change_column(self, column_id: str) -> None:
        """Point the element at another column; clears the cache and column-bound overrides."""
        d = self.descriptor
        self._column = None
        d.column_id = column_id
        d.type_override = ColumnType.DEFAULT
        d.format_override = ""
        d.display_name = ""

    # ----------------------------
    # Type and classification
    # ----------------------------

    def _is_count_data(self) -> bool:
        d = self.descriptor
        return (
            d.pivot_position is PivotPosition.DATA
            and d.aggregate_function is AggregateFunction.COUNT
        )

    def base_type(self) -> ColumnType:
        """Override or column type, before the Count short-circuit."""
        d = self.descriptor
        if d.type_override is not ColumnType.DEFAULT or d.is_free_standing:
            return d.type_override
        col = self.column
        return col.type if col is not None else ColumnType.DEFAULT

    def resolve_type(self) -> ColumnType:
        """Effective type; a Data element counting values is always numeric."""
        if self._is_count_data():
            return ColumnType.NUMERIC
        return self.base_type()

    def is_enum(self) -> bool:
        if self._is_count_data():
            return False
        return self.resolve_enum() is not None

    def is_numeric(self) -> bool:
        return self.resolve_type() is ColumnType.NUMERIC

    def is_text(self) -> bool:
        return self.resolve_type() in (ColumnType.TEXT, ColumnType.UNICODE_TEXT)

    def is_datetime(self) -> bool:
        return self.resolve_type() is ColumnType.DATETIME

    def format_kind(self) -> FormatKind:
        if self.is_numeric():
            return FormatKind.NUMERIC
        if self.is_datetime():
            return FormatKind.DATETIME
        return FormatKind.TEXT

    def set_type_override(self, column_type: ColumnType | str) -> None:
        """Change the type override; a real change on a bound element resets the format."""
        column_type = ColumnType(column_type)
        d = self.descriptor
        if column_type is not d.type_override and self.column is not None:
            d.format_override = ""
        d.type_override = column_type

    def apply_defaults(self) -> None:
        """
        Seed the aggregate functions from the settled type.

        enum -> Count; numeric -> Sum; date/time -> Max (totals Max); otherwise Count.
        Classification uses the base type, so the current aggregate (e.g. Count) does
        not feed back into the default. Callers decide when the type is settled; reads
        never call this.
        """
        d = self.descriptor
        column_type = self.base_type()
        if self.resolve_enum() is not None:
            d.aggregate_function = AggregateFunction.COUNT
        elif column_type is ColumnType.NUMERIC:
            d.aggregate_function = AggregateFunction.SUM
        elif column_type is ColumnType.DATETIME:
            d.aggregate_function = AggregateFunction.MAX
            d.total_aggregate_function = AggregateFunction.MAX
        else:
            d.aggregate_function = AggregateFunction.COUNT

    # ----------------------------
    # Format
    # ----------------------------

    def _global_default_format(self) -> str:
        if self.is_numeric():
            return self.settings.numeric_format
        if self.is_datetime():
            return self.settings.datetime_format
        return FALLBACK_FORMAT

    def resolve_format(self) -> str:
        """Element format -> column format -> global default -> "0"; never empty."""
        d = self.descriptor
        if d.is_free_standing:
            return d.format_override or FALLBACK_FORMAT
        col = self.column
        result = _first_present(
            lambda: d.format_override,
            lambda: col.format if col is not None else None,
            self._global_default_format,
        )
        return result or FALLBACK_FORMAT

    def has_time(self) -> bool:
        """True for date/time elements whose format shows hours, minutes, seconds or AM/PM."""
        if not self.is_datetime():
            return False
        pattern = self.context.culture.expand_datetime_code(self.resolve_format())
        return any(seg.token is not None for seg in scan(pattern, _TIME_TOKENS))

    def set_calculation_option(self, option: CalculationOption | str) -> None:
        """
        Change the calculation option, coupling the format to it.

        Transitions:
            no -> any other: format set to "P0" when the element has no format override.
            any other -> no: a percentage format override is cleared (inherit again).
        Setting the current value again has no side effect.
        Accepts enum members or their lower_snake values.
        """
        d = self.descriptor
        option = CalculationOption(option)
        if option is not d.calculation_option:
            if option is not CalculationOption.NO and not d.format_override:
                d.format_override = PERCENTAGE_DEFAULT_FORMAT
            elif option is CalculationOption.NO and is_percentage_code(d.format_override):
                d.format_override = ""
        d.calculation_option = option

    # ----------------------------
    # Names
    # ----------------------------

    def raw_display_name(self) -> str:
        """Column-derived name; "Average of Amount" style for aggregated Data elements."""
        col = self.column
        if col is None:
            return ""
        d = self.descriptor
        if (
            d.pivot_position is PivotPosition.DATA
            and d.aggregate_function is not AggregateFunction.SUM
            and not col.is_aggregate
        ):
            prefix = self.context.translate(f"{aggregate_description(d.aggregate_function)} of")
            return f"{prefix} {col.display_name}"
        return col.display_name

    def resolve_display_name(self) -> str:
        d = self.descriptor
        if d.display_name:
            return d.display_name
        if d.is_free_standing:
            return d.name
        return self.raw_display_name()

    def set_display_name(self, value: str | None) -> None:
        """Store a display name; the raw (column-derived) name is stored as "" (no override)."""
        d = self.descriptor
        value = value or ""
        if self.column is not None and value == self.raw_display_name():
            value = ""
        d.display_name = value

    def translated_display_name(self) -> str:
        return self.context.translate(self.resolve_display_name())

    # ----------------------------
    # Enum, aggregate flag, SQL
    # ----------------------------

    def resolve_enum(self) -> EnumList | None:
        d = self.descriptor
        if d.enum_override_id:
            found = self.catalog.enum(d.enum_override_id)
            if found is not None:
                return found
            logger.debug(f"Enum {d.enum_override_id!r} not found in catalog")
        if d.is_free_standing:
            return None
        col = self.column
        return col.enum if col is not None else None

    def resolve_aggregate_flag(self) -> bool:
        d = self.descriptor
        if d.force_aggregate is YesNoDefault.YES:
            return True
        if d.force_aggregate is YesNoDefault.NO:
            return False
        col = self.column
        return col.is_aggregate if col is not None else False

    def raw_sql_expression(self) -> str:
        """Synthesized expression: column name, aggregated for Data elements."""
        d = self.descriptor
        if d.is_free_standing:
            return d.name
        col = self.column
        if col is None:
            return ""
        if d.pivot_position is PivotPosition.DATA and not col.is_aggregate:
            return _aggregate_sql(d.aggregate_function, col.name)
        return col.name

    def resolve_sql_expression(self) -> str:
        return self.descriptor.sql or self.raw_sql_expression()

    def resolve_sql_column_name(self) -> str:
        d = self.descriptor
        if d.sql_column_name:
            return d.sql_column_name
        col = self.column
        return col.name if col is not None else d.name

    # ----------------------------
    # Sorting
    # ----------------------------

    @property
    def is_sorted(self) -> bool:
        return _is_sorted(self.descriptor.sort_order)

    @property
    def final_sort_rank(self) -> int:
        return _final_sort_rank(self.descriptor.final_sort_order)

    def compute_enum_sort_key(self, value: str, by_display_value: bool = False) -> str:
        """
        Lexicographic sort key of an enum value within this element's domain.

        Positional prefixes are used when the element is sorted and its list uses
        positional ordering. Elements without an enumerated list return ``value``.
        """
        en = self.resolve_enum()
        if en is None:
            return value
        return enum_sort_key(
            en,
            value,
            by_display_value=by_display_value,
            positional=self.is_sorted and en.use_position,
            display=self.context.enum_display_value,
        )

    # ----------------------------
    # Display and dialects
    # ----------------------------

    def display_value(self, value: Any) -> str:
        """Value rendered with the resolved format; falls back to ``str(value)``."""
        return _display_value(value, self.resolve_format(), self.context.culture)

    def chart_axis_format(self) -> str:
        return to_chart_axis_format(
            self.resolve_format(), self.context.culture, self.format_kind()
        )

    def calendar_format(self) -> str:
        return to_calendar_format(
            self.resolve_format(), self.context.culture, self.format_kind()
        )

    def spreadsheet_format(self) -> str:
        return to_spreadsheet_format(
            self.resolve_format(), self.context.culture, self.format_kind()
        )
