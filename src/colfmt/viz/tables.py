"""
Polars helpers that pre-format columns with resolved element formats.

Values are rendered through ``ElementResolver.display_value`` so tables show exactly
what the report shows; nulls render as "". The output columns are ``pl.String``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import polars as pl

from colfmt.resolve import ElementResolver

__all__ = ["format_series", "format_frame"]

logger = logging.getLogger(__name__)


def format_series(resolver: ElementResolver, series: pl.Series) -> pl.Series:
    """Return ``series`` rendered as display text (same name, dtype String)."""
    values = [resolver.display_value(v) for v in series.to_list()]
    return pl.Series(series.name, values, dtype=pl.String)


def format_frame(
    df: pl.DataFrame,
    resolvers: Mapping[str, ElementResolver],
    *,
    rename: bool = False,
) -> pl.DataFrame:
    """
    Format the columns of ``df`` that have a resolver.

    Args:
        df (pl.DataFrame): Source frame; not modified.
        resolvers (Mapping[str, ElementResolver]): Column name -> element resolver.
            Names absent from ``df`` are skipped; columns without a resolver are kept
            unchanged.
        rename (bool): Also rename formatted columns to their translated display names.

    Returns:
        pl.DataFrame: A new frame.
    """
    present = {name: r for name, r in resolvers.items() if name in df.columns}
    missing = sorted(set(resolvers) - set(present))
    if missing:
        logger.debug(f"Skipping resolvers without a frame column: {missing}")
    if not present:
        return df.clone()
    out = df.with_columns([format_series(r, df.get_column(name)) for name, r in present.items()])
    if rename:
        mapping = {name: r.translated_display_name() or name for name, r in present.items()}
        out = out.rename(mapping)
    return out
