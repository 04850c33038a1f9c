"""
Numeric format tables for the chart-axis (d3-format) and spreadsheet (Excel) dialects.

Both tables are keyed by canonical code and cover 0-8 decimals for the fixed-point
(N/D/G), percentage (P) and currency (C) families. The two dialects disagree on codes
outside the tables:

- chart axis: no translation (``chart_axis_numeric`` returns None, callers pass the
  code through);
- spreadsheet: any other code of the C/D/E/F/G/H/N/P families maps to "" (no number
  format) so Excel never receives a .NET code; custom patterns pass through.

Examples:
    >>> from colfmt.formats.numeric import chart_axis_numeric, spreadsheet_numeric
    >>> chart_axis_numeric("P2"), spreadsheet_numeric("P2")
    (',.2%', '0.00%')
    >>> chart_axis_numeric("N9") is None, spreadsheet_numeric("N9")
    (True, '')
"""

from __future__ import annotations

from typing import Final

from colfmt.core.grammar import GENERIC_NUMERIC_CODES, MAX_TABLE_DECIMALS, split_numeric_code

__all__ = [
    "CHART_AXIS_NUMERIC",
    "SPREADSHEET_NUMERIC",
    "chart_axis_numeric",
    "spreadsheet_numeric",
]

# Families that must never reach a spreadsheet untranslated.
_SPREADSHEET_BLANK_FAMILIES: Final[frozenset[str]] = frozenset("CDEFGHNP")


def _decimals(n: int) -> str:
    return "." + "0" * n if n else ""


def _build_chart_axis() -> dict[str, str]:
    table = {code: ".0f" for code in GENERIC_NUMERIC_CODES}
    for n in range(MAX_TABLE_DECIMALS + 1):
        for family in "NDG":
            table[f"{family}{n}"] = f",.{n}f"
        table[f"P{n}"] = f",.{n}%"
        table[f"C{n}"] = f"$,.{n}f"
    return table


def _build_spreadsheet() -> dict[str, str]:
    table = {"N": "#,##0", "D": "#,##0", "P": "0%", "C": "$ #,##0"}
    for n in range(MAX_TABLE_DECIMALS + 1):
        for family in "ND":
            table[f"{family}{n}"] = f"#,##0{_decimals(n)}"
        table[f"P{n}"] = f"0{_decimals(n)}%"
        table[f"C{n}"] = f"$ #,##0{_decimals(n)}"
    return table


CHART_AXIS_NUMERIC: Final[dict[str, str]] = _build_chart_axis()
SPREADSHEET_NUMERIC: Final[dict[str, str]] = _build_spreadsheet()


def chart_axis_numeric(code: str) -> str | None:
    """d3-format specifier for a canonical numeric code, None when not in the table."""
    return CHART_AXIS_NUMERIC.get(code)


def spreadsheet_numeric(code: str) -> str:
    """
    Excel number format for a canonical numeric code.

    Returns:
        str: Table entry; "" for other codes of the standard families (e.g. "N9",
        "E2", "G"); the code itself for custom patterns (e.g. "0", "#,##0.0").
    """
    found = SPREADSHEET_NUMERIC.get(code)
    if found is not None:
        return found
    parts = split_numeric_code(code)
    if parts is not None and parts[0] in _SPREADSHEET_BLANK_FAMILIES:
        return ""
    return code
