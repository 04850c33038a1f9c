from __future__ import annotations

import datetime as dt

from colfmt.core.schema import ColumnRef, MetaCatalog
from colfmt.io.config import FormatSettings
from colfmt.resolve import ElementDescriptor, ElementResolver, ReportContext


def _resolver(context=None, settings=None, **fields) -> ElementResolver:
    catalog = MetaCatalog.of(
        [
            ColumnRef(id="amount", name="amount", display_name="Amount", type="numeric"),
            ColumnRef(id="created", name="created_at", display_name="Created", type="datetime"),
            ColumnRef(id="region", name="region", display_name="Region", type="text"),
        ]
    )
    return ElementResolver(ElementDescriptor(**fields), catalog, context=context, settings=settings)


def test_percentage_element_in_all_dialects() -> None:
    r = _resolver(column_id="amount", pivot_position="data", format_override="P2")
    assert r.chart_axis_format() == ",.2%"
    assert r.spreadsheet_format() == "0.00%"
    assert r.calendar_format() == "P2"


def test_date_element_uses_context_culture() -> None:
    us = _resolver(column_id="created")
    assert us.chart_axis_format() == "%m/%e/%Y"
    assert us.calendar_format() == "M/D/YYYY"
    assert us.spreadsheet_format() == "M/d/yyyy"

    de = _resolver(ReportContext.for_culture("de-DE"), column_id="created")
    assert de.chart_axis_format() == "%d.%m.%Y"


def test_settings_culture_is_the_default_context() -> None:
    r = _resolver(settings=FormatSettings(culture="de-DE"), column_id="created")
    assert r.context.culture.name == "de-DE"
    assert r.calendar_format() == "DD.MM.YYYY"


def test_text_element_and_counted_text_element() -> None:
    assert _resolver(column_id="region").chart_axis_format() == "g"
    counted = _resolver(column_id="region", pivot_position="data", aggregate_function="count")
    assert counted.chart_axis_format() == ",.0f"
    assert counted.spreadsheet_format() == "#,##0"


def test_display_value() -> None:
    assert _resolver(column_id="amount", format_override="N2").display_value(1234.5) == "1,234.50"
    assert _resolver(column_id="created").display_value(dt.date(2024, 3, 5)) == "3/5/2024"
    assert _resolver(column_id="amount").display_value("n/a") == "n/a"
    assert _resolver(column_id="amount").display_value(None) == ""
