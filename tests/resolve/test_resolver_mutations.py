from __future__ import annotations

from colfmt.core.grammar import CalculationOption, ColumnType
from colfmt.core.schema import ColumnRef, MetaCatalog
from colfmt.resolve import ElementDescriptor, ElementResolver


def _resolver(**fields) -> ElementResolver:
    catalog = MetaCatalog.of(
        [
            ColumnRef(id="amount", name="amount", display_name="Amount", type="numeric"),
            ColumnRef(id="created", name="created_at", display_name="Created", type="datetime"),
        ]
    )
    fields.setdefault("column_id", "amount")
    fields.setdefault("pivot_position", "data")
    return ElementResolver(ElementDescriptor(**fields), catalog)


def test_calculation_option_on_sets_percentage_format() -> None:
    r = _resolver()
    r.set_calculation_option(CalculationOption.PERCENTAGE_ROW)
    assert r.descriptor.format_override == "P0"
    assert r.resolve_format() == "P0"


def test_calculation_option_on_keeps_explicit_format() -> None:
    r = _resolver(format_override="N2")
    r.set_calculation_option(CalculationOption.PERCENTAGE_ALL)
    assert r.descriptor.format_override == "N2"


def test_calculation_option_off_clears_any_percentage_format() -> None:
    r = _resolver()
    r.set_calculation_option(CalculationOption.PERCENTAGE_COLUMN)
    r.descriptor.format_override = "P3"
    r.set_calculation_option(CalculationOption.NO)
    assert r.descriptor.format_override == ""
    assert r.resolve_format() == "N0"


def test_calculation_option_off_keeps_non_percentage_format() -> None:
    r = _resolver(format_override="N2", calculation_option="percentage_row")
    r.set_calculation_option(CalculationOption.NO)
    assert r.descriptor.format_override == "N2"


def test_calculation_option_same_value_has_no_side_effect() -> None:
    r = _resolver()
    r.set_calculation_option(CalculationOption.PERCENTAGE_ROW)
    r.descriptor.format_override = ""
    r.set_calculation_option(CalculationOption.PERCENTAGE_ROW)
    assert r.descriptor.format_override == ""
    assert r.descriptor.calculation_option is CalculationOption.PERCENTAGE_ROW


def test_type_change_resets_format_on_bound_element() -> None:
    r = _resolver(format_override="N2")
    r.set_type_override(ColumnType.NUMERIC)
    assert r.descriptor.format_override == ""
    r.descriptor.format_override = "N3"
    r.set_type_override(ColumnType.NUMERIC)
    assert r.descriptor.format_override == "N3"


def test_type_change_keeps_format_on_free_standing_value() -> None:
    r = _resolver(column_id="", name="x", format_override="N2")
    r.set_type_override(ColumnType.NUMERIC)
    assert r.descriptor.format_override == "N2"
    assert r.descriptor.type_override is ColumnType.NUMERIC


def test_change_column_resets_column_bound_overrides() -> None:
    r = _resolver(format_override="N2", display_name="Revenue", type_override="numeric")
    assert r.column.id == "amount"
    r.change_column("created")
    d = r.descriptor
    assert (d.format_override, d.display_name, d.type_override) == ("", "", ColumnType.DEFAULT)
    assert r.column.id == "created"
    assert r.is_datetime()


def test_lower_snake_values_behave_like_enum_members() -> None:
    r = _resolver()
    r.set_calculation_option("no")
    assert r.descriptor.format_override == ""
    r.set_calculation_option("percentage_row")
    assert r.descriptor.format_override == "P0"
    assert r.descriptor.calculation_option is CalculationOption.PERCENTAGE_ROW
    r.set_calculation_option("no")
    assert r.descriptor.format_override == ""

    r = _resolver(type_override="numeric", format_override="N3")
    r.set_type_override("numeric")
    assert r.descriptor.format_override == "N3"
    r.set_type_override("text")
    assert r.descriptor.format_override == ""
    assert r.descriptor.type_override is ColumnType.TEXT
