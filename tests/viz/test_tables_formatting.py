from __future__ import annotations

import datetime as dt

import polars as pl

from colfmt.core.schema import ColumnRef, MetaCatalog
from colfmt.resolve import ElementDescriptor, ElementResolver
from colfmt.viz import format_frame, format_series


def _resolver(**fields) -> ElementResolver:
    catalog = MetaCatalog.of(
        [
            ColumnRef(id="amount", name="amount", display_name="Amount", type="numeric"),
            ColumnRef(id="created", name="created_at", display_name="Created", type="datetime"),
        ]
    )
    return ElementResolver(ElementDescriptor(**fields), catalog)


def test_format_series_renders_display_text() -> None:
    r = _resolver(column_id="amount", pivot_position="data", format_override="N2")
    out = format_series(r, pl.Series("amount", [1234.5, None, 2.0]))
    assert out.name == "amount"
    assert out.dtype == pl.String
    assert out.to_list() == ["1,234.50", "", "2.00"]


def test_format_series_dates_and_empty() -> None:
    r = _resolver(column_id="created")
    assert format_series(r, pl.Series("d", [dt.date(2024, 3, 5)])).to_list() == ["3/5/2024"]
    empty = format_series(r, pl.Series("d", [], dtype=pl.Date))
    assert len(empty) == 0
    assert empty.dtype == pl.String


def test_format_frame_formats_only_known_columns() -> None:
    df = pl.DataFrame(
        {
            "amount": [1.5, 10.0],
            "created_at": [dt.date(2024, 3, 5), dt.date(2024, 12, 31)],
            "other": [1, 2],
        }
    )
    resolvers = {
        "amount": _resolver(column_id="amount", pivot_position="data", format_override="N1"),
        "created_at": _resolver(column_id="created"),
        "missing": _resolver(column_id="amount"),
    }

    out = format_frame(df, resolvers)

    assert out.columns == ["amount", "created_at", "other"]
    assert out["amount"].to_list() == ["1.5", "10.0"]
    assert out["created_at"].to_list() == ["3/5/2024", "12/31/2024"]
    assert out["other"].to_list() == [1, 2]
    assert df["amount"].dtype == pl.Float64  # source untouched


def test_format_frame_rename_to_display_names() -> None:
    df = pl.DataFrame({"amount": [1.0], "created_at": [dt.date(2024, 3, 5)]})
    resolvers = {
        "amount": _resolver(column_id="amount", pivot_position="data", aggregate_function="avg"),
        "created_at": _resolver(column_id="created"),
    }
    out = format_frame(df, resolvers, rename=True)
    assert out.columns == ["Average of Amount", "Created"]


def test_format_frame_without_matches_returns_copy() -> None:
    df = pl.DataFrame({"x": [1, 2]})
    out = format_frame(df, {"y": _resolver(column_id="amount")})
    assert out.equals(df)
