"""
Maximal-munch tokenizer for .NET custom date/time patterns.

At each scan position the longest token of the table that matches wins ("yyyy" is
tried before "yyy", "yy" and "y"); characters that start no token are copied through.
Quoted text ('...' or "...") and backslash-escaped characters are literal and never
tokenized.

The same scanner backs three consumers:
- chart-axis rewriting (d3 time tokens),
- calendar rewriting (moment.js tokens),
- display rendering (token -> value callback, see ``colfmt.formats.display``).

Examples:
    >>> from colfmt.formats.tokens import rewrite
    >>> rewrite("yyyyy", {"yyyy": "%Y", "y": "%y"})
    '%Y%y'
    >>> rewrite("d 'de' d", {"d": "%e"})
    '%e de %e'
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

__all__ = [
    "Segment",
    "scan",
    "rewrite",
]

_QUOTES = ("'", '"')


@dataclass(slots=True, frozen=True)
class Segment:
    """
    One scanned piece of a pattern.

    Attributes:
        text (str): Source text (token, literal run, or passthrough run).
        token (str | None): The matched table token, None for non-token text.
        quoted (bool): True when the text came from a quoted/escaped literal.
    """

    text: str
    token: str | None = None
    quoted: bool = False


def _index_tokens(tokens: Iterable[str]) -> dict[str, list[str]]:
    by_first: dict[str, list[str]] = {}
    for token in tokens:
        if token:
            by_first.setdefault(token[0], []).append(token)
    for candidates in by_first.values():
        candidates.sort(key=len, reverse=True)
    return by_first


def _append_text(out: list[Segment], text: str, quoted: bool) -> None:
    if out and out[-1].token is None and out[-1].quoted == quoted:
        out[-1] = Segment(out[-1].text + text, None, quoted)
    else:
        out.append(Segment(text, None, quoted))


def scan(pattern: str, tokens: Iterable[str]) -> list[Segment]:
    """
    Split a pattern into token and text segments, longest token first.

    Args:
        pattern (str): .NET custom pattern (already expanded from a standard code).
        tokens (Iterable[str]): Token table keys.

    Returns:
        list[Segment]: Segments in source order; adjacent text is merged.
    """
    by_first = _index_tokens(tokens)
    out: list[Segment] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch in _QUOTES:
            end = pattern.find(ch, i + 1)
            if end < 0:
                end = n
            if end > i + 1:
                _append_text(out, pattern[i + 1 : end], True)
            i = end + 1
            continue
        if ch == "\\" and i + 1 < n:
            _append_text(out, pattern[i + 1], True)
            i += 2
            continue
        for candidate in by_first.get(ch, ()):
            if pattern.startswith(candidate, i):
                out.append(Segment(candidate, candidate))
                i += len(candidate)
                break
        else:
            _append_text(out, ch, False)
            i += 1
    return out


def rewrite(
    pattern: str,
    table: Mapping[str, str],
    *,
    literal: Callable[[str], str] | None = None,
) -> str:
    """
    Rewrite every token of ``pattern`` through ``table``.

    Args:
        pattern (str): Source pattern.
        table (Mapping[str, str]): Source token -> target token.
        literal (Callable[[str], str] | None): Renders quoted literal text in the target
            grammar (e.g. moment.js "[text]"); defaults to the bare text.

    Returns:
        str: The rewritten pattern. Replacements are emitted once and never rescanned.
    """
    parts: list[str] = []
    for seg in scan(pattern, table.keys()):
        if seg.token is not None:
            parts.append(table[seg.token])
        elif seg.quoted and literal is not None:
            parts.append(literal(seg.text))
        else:
            parts.append(seg.text)
    return "".join(parts)
