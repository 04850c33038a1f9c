"""
colfmt.viz — Rendering adapters: resolved element formats applied to altair and polars.

## Responsibilities
- Build altair axes and positional encodings whose label format comes from the
  chart-axis translator of a resolved element.
- Pre-format polars columns for tabular display with the element's canonical format.
- Never mutate element state; read-only over ElementResolver.

## Public API
- axes — axis_for, encoding_type, x_for, y_for.
- tables — format_series, format_frame.

## Import DAG discipline
- Depends on: colfmt.resolve, colfmt.core, altair, polars (and stdlib).
- No pandas; frames are polars.

## Examples
```python
import altair as alt
import polars as pl
from colfmt.viz import axis_for, format_frame

ch = alt.Chart(df).mark_line().encode(x="ts:T", y=alt.Y("amount:Q", axis=axis_for(amount)))
table = format_frame(df, {"amount": amount, "ts": ts})  # doctest: +SKIP
```
"""

from __future__ import annotations

from .axes import axis_for, encoding_type, x_for, y_for
from .tables import format_frame, format_series

__all__ = [
    "axis_for",
    "encoding_type",
    "x_for",
    "y_for",
    "format_series",
    "format_frame",
]
