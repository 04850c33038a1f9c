"""
colfmt.formats — Stateless translation of canonical format codes.

## Responsibilities
- Translate a resolved canonical format (.NET-style) into renderer dialects: chart axis
  (d3-format / d3-time-format), calendar widget (moment.js), spreadsheet (Excel).
- Render runtime values for display with a canonical format and a culture.

## Public API
- to_chart_axis_format / to_calendar_format / to_spreadsheet_format:
  `(fmt, culture, kind) -> str`.
- translate — dispatch by FormatDialect.
- display_value — never-raising value rendering.
- tokens.scan / tokens.rewrite — maximal-munch pattern scanner.

## Import DAG discipline
- Depends only on stdlib and colfmt.core.
- MUST NOT import colfmt.resolve: translators know nothing about reports or columns.

## Examples
```python
from colfmt.core.cultures import get_culture
from colfmt.core.grammar import FormatKind
from colfmt.formats import to_chart_axis_format, to_spreadsheet_format

us = get_culture("en-US")
to_chart_axis_format("d", us, FormatKind.DATETIME)  # '%m/%e/%Y'
to_chart_axis_format("P2", us, FormatKind.NUMERIC)  # ',.2%'
to_spreadsheet_format("P2", us, FormatKind.NUMERIC)  # '0.00%'
to_spreadsheet_format("N9", us, FormatKind.NUMERIC)  # ''
```
"""

from __future__ import annotations

from .display import display_value
from .translate import to_calendar_format, to_chart_axis_format, to_spreadsheet_format, translate

__all__ = [
    "to_chart_axis_format",
    "to_calendar_format",
    "to_spreadsheet_format",
    "translate",
    "display_value",
]
