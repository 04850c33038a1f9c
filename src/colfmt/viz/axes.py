"""
Altair axis helpers driven by a resolved report element.

The axis ``format`` is the chart-axis translation of the element's resolved format
(d3-format for numbers, d3-time-format for dates). Text elements are categorical:
their axes carry no format so labels are rendered as-is.
"""

from __future__ import annotations

from typing import Any

import altair as alt

from colfmt.core.grammar import FormatKind, sort_direction
from colfmt.resolve import ElementResolver

__all__ = ["axis_for", "encoding_type", "x_for", "y_for"]

_FORMAT_TYPES: dict[FormatKind, str] = {
    FormatKind.NUMERIC: "number",
    FormatKind.DATETIME: "time",
}

_ENCODING_TYPES: dict[FormatKind, str] = {
    FormatKind.NUMERIC: "quantitative",
    FormatKind.DATETIME: "temporal",
    FormatKind.TEXT: "nominal",
}

_SORTS: dict[str, str] = {"ASC": "ascending", "DESC": "descending"}


def encoding_type(resolver: ElementResolver) -> str:
    """Vega-Lite measurement type of the element ("quantitative", "temporal" or "nominal")."""
    return _ENCODING_TYPES[resolver.format_kind()]


def axis_for(resolver: ElementResolver, **kwargs: Any) -> alt.Axis:
    """
    Axis formatted like the element.

    Args:
        resolver (ElementResolver): Resolved element.
        **kwargs: Extra ``alt.Axis`` properties; an explicit ``format`` wins.

    Returns:
        alt.Axis: Axis with ``format`` and ``formatType`` set for numeric and date/time
        elements; ``title`` defaults to the translated display name.
    """
    kind = resolver.format_kind()
    props: dict[str, Any] = {"title": resolver.translated_display_name()}
    if kind in _FORMAT_TYPES:
        props["format"] = resolver.chart_axis_format()
        props["formatType"] = _FORMAT_TYPES[kind]
    props.update(kwargs)
    return alt.Axis(**props)


def _channel_props(resolver: ElementResolver, field: str | None) -> dict[str, Any]:
    props: dict[str, Any] = {
        "field": field or resolver.resolve_sql_column_name(),
        "type": encoding_type(resolver),
        "axis": axis_for(resolver),
    }
    direction = sort_direction(resolver.descriptor.sort_order)
    if direction is not None:
        props["sort"] = _SORTS[direction]
    return props


def x_for(resolver: ElementResolver, field: str | None = None, **kwargs: Any) -> alt.X:
    """X encoding of the element; ``field`` defaults to its SQL column name."""
    props = _channel_props(resolver, field)
    props.update(kwargs)
    return alt.X(**props)


def y_for(resolver: ElementResolver, field: str | None = None, **kwargs: Any) -> alt.Y:
    """Y encoding of the element; ``field`` defaults to its SQL column name."""
    props = _channel_props(resolver, field)
    props.update(kwargs)
    return alt.Y(**props)
