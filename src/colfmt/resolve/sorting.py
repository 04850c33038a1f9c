"""
Sort-key derivation for report elements.

- Final sort order: the report pass ranks sorted elements (Page, then Row, Column, Data,
  in declaration order) and writes "<rank> ASC|DESC" on each descriptor; the integer
  rank is read back with ``final_sort_rank`` (UNRANKED_SORT when absent or malformed).
- Enum sort keys: strings compared lexicographically within ONE element's domain. With
  positional ordering, the key is the zero-padded position of the entry in its list
  followed by its translated display text, so declaration order wins over alphabetical
  order. Keys of different elements must not be compared with each other.

Examples:
    >>> final_sort_rank("2 DESC"), final_sort_rank(None), final_sort_rank("x ASC")
    (2, 99999, 99999)
    >>> final_sort_direction("2 DESC")
    'DESC'
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from colfmt.core.constants import ENUM_SORT_PREFIX_WIDTH, UNRANKED_SORT
from colfmt.core.grammar import PivotPosition, SortOrder, sort_direction
from colfmt.core.schema import EnumList

if TYPE_CHECKING:
    from .resolver import ElementResolver

__all__ = [
    "is_sorted",
    "final_sort_rank",
    "final_sort_direction",
    "enum_sort_key",
    "assign_final_sort_orders",
]

# Order in which the report pass ranks elements.
_RANKING_POSITIONS: tuple[PivotPosition, ...] = (
    PivotPosition.PAGE,
    PivotPosition.ROW,
    PivotPosition.COLUMN,
    PivotPosition.DATA,
)


def is_sorted(order: SortOrder) -> bool:
    return order is not SortOrder.NOT_SORTED


def final_sort_rank(final_sort_order: str | None) -> int:
    """Integer rank of a "<rank> <direction>" string; UNRANKED_SORT when absent or malformed."""
    if not final_sort_order or " " not in final_sort_order:
        return UNRANKED_SORT
    try:
        return int(final_sort_order.split(" ")[0])
    except ValueError:
        return UNRANKED_SORT


def final_sort_direction(final_sort_order: str | None) -> str | None:
    """Direction part ("ASC"/"DESC") of a final sort order, None when absent."""
    if not final_sort_order or " " not in final_sort_order:
        return None
    direction = final_sort_order.split(" ", 1)[1].strip().upper()
    return direction if direction in ("ASC", "DESC") else None


def enum_sort_key(
    enum_list: EnumList,
    value: str,
    *,
    by_display_value: bool,
    positional: bool,
    display: Callable[[EnumList, str], str],
) -> str:
    """
    Sort key of ``value`` within ``enum_list``.

    Args:
        enum_list (EnumList): The element's resolved enumerated list.
        value (str): Raw value (an id, or a display value when ``by_display_value``).
        by_display_value (bool): Match entries by display value instead of id.
        positional (bool): Prefix with the zero-padded last index of the entry.
        display (Callable): Renders the display text of an entry id (translation hook).

    Returns:
        str: "<prefix><display text>" when found, "<zeros><value>" otherwise.
    """
    if by_display_value:
        entry = enum_list.find_by_display_value(value)
    else:
        entry = enum_list.find_by_id(value)

    if entry is not None:
        prefix = ""
        if positional:
            prefix = f"{enum_list.last_index_of(entry):0{ENUM_SORT_PREFIX_WIDTH}d}"
        return prefix + display(enum_list, entry.id)
    prefix = "0" * ENUM_SORT_PREFIX_WIDTH if positional else ""
    return prefix + value


def assign_final_sort_orders(resolvers: Iterable[ElementResolver]) -> None:
    """
    Report pass: rank every sorted element and write its final sort order.

    Elements are ranked Page, Row, Column, Data, keeping declaration order inside each
    position. Ranks start at 1. Unsorted elements get ``final_sort_order = None``.
    """
    items = list(resolvers)
    rank = 1
    for position in _RANKING_POSITIONS:
        for resolver in items:
            d = resolver.descriptor
            if d.pivot_position is not position:
                continue
            direction = sort_direction(d.sort_order)
            if direction is None:
                d.final_sort_order = None
                continue
            d.final_sort_order = f"{rank} {direction}"
            rank += 1
