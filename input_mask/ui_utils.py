from __future__ import annotations

"""
Terminal rendering helpers for masked values (display-cell aware).
"""

import functools
import unicodedata

from wcwidth import wcwidth


_ZERO_WIDTH = {
    "\u200b",  # ZERO WIDTH SPACE
    "\u200c",  # ZERO WIDTH NON-JOINER
    "\u200d",  # ZERO WIDTH JOINER
    "\ufeff",  # ZERO WIDTH NO-BREAK SPACE (BOM)
    "\ufe0e",  # VARIATION SELECTOR-15
    "\ufe0f",  # VARIATION SELECTOR-16
}


def _is_zero_width(ch: str) -> bool:
    return ch in _ZERO_WIDTH or unicodedata.category(ch) == "Cf" or bool(unicodedata.combining(ch))


@functools.lru_cache(maxsize=4096)
def _char_width(ch: str) -> int:
    if _is_zero_width(ch):
        return 0
    w = wcwidth(ch)
    # control characters report -1; give them one cell like a replacement glyph
    return w if w >= 0 else 1


def display_width(s: str) -> int:
    return sum(_char_width(ch) for ch in (s or ""))


def truncate_to_width(s: str, width: int) -> str:
    """Trim string so its display width is <= width."""
    if width <= 0:
        return ""
    out: list[str] = []
    cols = 0
    for ch in (s or ""):
        w = _char_width(ch)
        if w == 0:
            if out:
                out.append(ch)
            continue
        if cols + w > width:
            break
        out.append(ch)
        cols += w
    return "".join(out)


def caret_column(value: str, caret: int) -> int:
    value = value or ""
    caret = max(0, min(len(value), int(caret)))
    return display_width(value[:caret])


def visible_window(value: str, caret: int, width: int) -> tuple[int, str, int]:
    """Scroll ``value`` horizontally so the caret stays inside ``width`` cells.

    Returns (start_index, visible_text, caret_col) where caret_col is relative
    to the window. One cell is kept free for the caret at the very end.
    """
    width = max(1, int(width))
    value = value or ""
    caret = max(0, min(len(value), int(caret)))
    start = 0
    while start < caret and display_width(value[start:caret]) > width - 1:
        start += 1
    text = truncate_to_width(value[start:], width)
    return start, text, caret_column(value[start:], caret - start)


__all__ = [
    "display_width",
    "truncate_to_width",
    "caret_column",
    "visible_window",
]
