"""
Lightweight typing aliases used across core schemas.

Provides minimal NewTypes to improve readability and static checks of catalog keys.
This module contains no runtime logic and is zero-IO.

Examples:
    >>> from colfmt.core.typing import ColumnId, EnumId
    >>> def describe(col: ColumnId, en: EnumId) -> str:
    ...     return f"{col}:{en}"
    >>> describe(ColumnId("c1"), EnumId("levels"))
    'c1:levels'
"""

from __future__ import annotations

from typing import NewType

__all__ = [
    "ColumnId",
    "EnumId",
]

ColumnId = NewType("ColumnId", str)
EnumId = NewType("EnumId", str)
