"""
Report element descriptor: the locally stored overrides of one displayable column.

The descriptor is plain data. Everything derived (effective type, format, display name,
SQL expression, dialect formats) is computed by ``ElementResolver``, which is also the
only component that applies coupled mutations (calculation option, type change, column
change).

Notes:
    - Empty strings mean "inherit" for ``format_override``, ``display_name`` and ``sql``.
    - ``ColumnType.DEFAULT`` means "inherit" for ``type_override``.
    - An empty ``column_id`` marks a free-standing value (common restriction value): the
      element then resolves from its own ``name``/``format_override``.
"""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from colfmt.core.grammar import (
    AggregateFunction,
    CalculationOption,
    ColumnType,
    PivotPosition,
    SortOrder,
    YesNoDefault,
)

__all__ = ["ElementDescriptor"]


class ElementDescriptor(BaseModel):
    """
    Stored state of a report element.

    Attributes:
        id (str): Unique element identifier (uuid4 hex when created via ``create``).
        name (str): Local name, used by free-standing values.
        column_id (str): Identifier of the referenced ColumnRef; "" for free-standing values.
        pivot_position (PivotPosition): Row, Column, Page or Data; never None.
        type_override (ColumnType): DEFAULT inherits the column type.
        format_override (str): Canonical format; "" inherits.
        display_name (str): Display name override; "" inherits.
        aggregate_function (AggregateFunction): Aggregate of Data elements.
        total_aggregate_function (AggregateFunction): Aggregate used for totals.
        force_aggregate (YesNoDefault): Overrides the column's aggregate flag.
        sort_order (SortOrder): Sort policy.
        final_sort_order (str | None): "<rank> ASC|DESC", written by the report pass.
        calculation_option (CalculationOption): Table calculation of numeric Data elements.
        enum_override_id (str | None): Standalone enumerated list replacing the column's.
        sql (str): Raw SQL replacing the synthesized column expression; "" for none.
        sql_column_name (str): SQL alias override; "" uses the column name.

    Examples:
        >>> from colfmt.resolve.descriptor import ElementDescriptor
        >>> el = ElementDescriptor.create(column_id="c1", pivot_position="data")
        >>> el.pivot_position.value, len(el.id)
        ('data', 32)
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: str = ""
    name: str = ""
    column_id: str = ""
    pivot_position: PivotPosition = PivotPosition.ROW
    type_override: ColumnType = ColumnType.DEFAULT
    format_override: str = ""
    display_name: str = ""
    aggregate_function: AggregateFunction = AggregateFunction.SUM
    total_aggregate_function: AggregateFunction = AggregateFunction.SUM
    force_aggregate: YesNoDefault = YesNoDefault.DEFAULT
    sort_order: SortOrder = SortOrder.AUTOMATIC_ASCENDANT
    final_sort_order: str | None = None
    calculation_option: CalculationOption = CalculationOption.NO
    enum_override_id: str | None = None
    sql: str = ""
    sql_column_name: str = ""

    @field_validator(
        "name", "column_id", "format_override", "display_name", "sql", "sql_column_name",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def create(cls, **fields: Any) -> ElementDescriptor:
        """Create a descriptor with a fresh unique identifier."""
        fields.setdefault("id", uuid.uuid4().hex)
        return cls(**fields)

    @property
    def is_free_standing(self) -> bool:
        return not self.column_id
