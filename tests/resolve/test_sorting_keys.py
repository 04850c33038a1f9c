from __future__ import annotations

import pytest

from colfmt.core.constants import UNRANKED_SORT
from colfmt.core.schema import ColumnRef, EnumList, EnumValue, MetaCatalog
from colfmt.resolve import (
    ElementDescriptor,
    ElementResolver,
    ReportContext,
    assign_final_sort_orders,
    final_sort_direction,
    final_sort_rank,
)


def _catalog(use_position: bool = True) -> MetaCatalog:
    levels = EnumList(
        id="levels",
        use_position=use_position,
        values=[
            EnumValue(id="L", display_value="Low"),
            EnumValue(id="M", display_value="Medium"),
            EnumValue(id="H", display_value="High"),
        ],
    )
    return MetaCatalog.of(
        [
            ColumnRef(id="level", name="level", display_name="Level", type="text", enum=levels),
            ColumnRef(id="amount", name="amount", display_name="Amount", type="numeric"),
        ]
    )


def _resolver(catalog: MetaCatalog | None = None, context=None, **fields) -> ElementResolver:
    fields.setdefault("column_id", "level")
    return ElementResolver(ElementDescriptor(**fields), catalog or _catalog(), context=context)


@pytest.mark.parametrize(
    ("final", "rank"),
    [
        ("2 DESC", 2),
        ("1 ASC", 1),
        (None, UNRANKED_SORT),
        ("", UNRANKED_SORT),
        ("x ASC", UNRANKED_SORT),
        ("3", UNRANKED_SORT),
    ],
)
def test_final_sort_rank(final, rank: int) -> None:
    assert final_sort_rank(final) == rank


def test_final_sort_direction() -> None:
    assert final_sort_direction("2 desc") == "DESC"
    assert final_sort_direction("1 ASC") == "ASC"
    assert final_sort_direction(None) is None
    assert final_sort_direction("1 sideways") is None


def test_positional_keys_follow_declaration_order() -> None:
    r = _resolver()
    keys = [r.compute_enum_sort_key(v) for v in ("L", "M", "H")]
    assert keys == ["000000Low", "000001Medium", "000002High"]
    assert sorted(keys) == keys


def test_unmatched_value_gets_zero_prefix() -> None:
    assert _resolver().compute_enum_sort_key("X") == "000000X"


def test_match_by_display_value() -> None:
    assert _resolver().compute_enum_sort_key("High", by_display_value=True) == "000002High"


def test_unsorted_or_non_positional_elements_use_display_text() -> None:
    assert _resolver(sort_order="not_sorted").compute_enum_sort_key("H") == "High"
    assert _resolver(sort_order="not_sorted").compute_enum_sort_key("X") == "X"
    assert _resolver(_catalog(use_position=False)).compute_enum_sort_key("H") == "High"


def test_sort_key_uses_translated_display_value() -> None:
    ctx = ReportContext.for_culture("fr-FR", {"Low": "Bas"})
    assert _resolver(context=ctx).compute_enum_sort_key("L") == "000000Bas"


def test_element_without_enum_returns_value() -> None:
    assert _resolver(column_id="amount").compute_enum_sort_key("42") == "42"


def test_assign_final_sort_orders_ranks_by_position_then_declaration() -> None:
    catalog = _catalog()
    data = _resolver(catalog, column_id="amount", pivot_position="data")
    row_a = _resolver(catalog, pivot_position="row")
    page = _resolver(catalog, pivot_position="page", sort_order="not_sorted")
    col = _resolver(catalog, pivot_position="column", sort_order="descendant")
    row_b = _resolver(catalog, pivot_position="row", sort_order="automatic_descendant")
    page.descriptor.final_sort_order = "9 ASC"

    assign_final_sort_orders([data, row_a, page, col, row_b])

    assert page.descriptor.final_sort_order is None
    assert row_a.descriptor.final_sort_order == "1 ASC"
    assert row_b.descriptor.final_sort_order == "2 DESC"
    assert col.descriptor.final_sort_order == "3 DESC"
    assert data.descriptor.final_sort_order == "4 ASC"
    assert [r.final_sort_rank for r in (row_a, row_b, col, data, page)] == [
        1,
        2,
        3,
        4,
        UNRANKED_SORT,
    ]
    assert row_a.is_sorted and not page.is_sorted
