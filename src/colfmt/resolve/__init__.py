"""
colfmt.resolve — Report element resolution (type, format, names, SQL, sort keys).

## Responsibilities
- Hold the locally stored overrides of a report element (ElementDescriptor).
- Resolve every derived property through the element -> column -> global default
  -> fallback chain (ElementResolver); resolution never raises.
- Derive sort keys and run the report pass that assigns final sort orders.

## Public API
- ElementDescriptor — pydantic model of the stored element state.
- ElementResolver — derived properties and coupled mutations of one element.
- ReportContext — culture and translations of the executing report.
- assign_final_sort_orders / final_sort_rank / final_sort_direction / enum_sort_key.

## Import DAG discipline
- Depends on colfmt.core, colfmt.formats and colfmt.io.config.
- MUST NOT import colfmt.viz.

## Examples
```python
from colfmt.core.schema import ColumnRef, MetaCatalog
from colfmt.resolve import ElementDescriptor, ElementResolver

catalog = MetaCatalog.of([ColumnRef(id="c1", name="ts", display_name="Date", type="datetime")])
r = ElementResolver(ElementDescriptor(column_id="c1"), catalog)
r.resolve_format()      # 'd'
r.chart_axis_format()   # '%m/%e/%Y'
```
"""

from __future__ import annotations

from .context import ReportContext
from .descriptor import ElementDescriptor
from .resolver import ElementResolver
from .sorting import (
    assign_final_sort_orders,
    enum_sort_key,
    final_sort_direction,
    final_sort_rank,
    is_sorted,
)

__all__ = [
    "ElementDescriptor",
    "ElementResolver",
    "ReportContext",
    "assign_final_sort_orders",
    "enum_sort_key",
    "final_sort_direction",
    "final_sort_rank",
    "is_sorted",
]
