from __future__ import annotations

"""
Rendering a partial value in its masked display form, and clearing ranges.

Without a placeholder the display is compact: it grows with the input and
stops at the first unfilled editable slot. With a placeholder it always has
the full mask length.
"""

from typing import Optional

from .inserter import insert_string_at_position
from .parse_mask import CompiledMask
from .predicates import is_position_editable


def format_value(compiled: CompiledMask, value: str) -> str:
    mask = compiled.mask
    value = value or ''
    if mask is None:
        return value
    if not compiled.placeholder:
        value = insert_string_at_position(compiled, '', value, 0)
        while len(value) < len(mask) and not is_position_editable(compiled, len(value)):
            value += mask[len(value)]  # type: ignore[operator]
        return value
    return insert_string_at_position(compiled, compiled.placeholder, value, 0)


def clear_range(compiled: CompiledMask, value: str, start: Optional[int], length: Optional[int]) -> str:
    """Reset ``value[start:start + length]`` to its unfilled state and reformat.

    Literals inside the range are restored, editable slots get the placeholder
    glyph (or vanish in compact mode). In compact mode literals after the range
    are dropped too, so the tail re-flows onto the cleared slots.
    """
    mask = compiled.mask
    if mask is None or start is None or not length or length < 0:
        return value
    end = start + length
    placeholder = compiled.placeholder
    cleared: list[str] = []
    for i, character in enumerate(value or ''):
        editable = is_position_editable(compiled, i)
        if not placeholder and i >= end and not editable:
            cleared.append('')
        elif i < start or i >= end:
            cleared.append(character)
        elif not editable:
            cleared.append(mask[i] if i < len(mask) else '')  # type: ignore[arg-type]
        elif placeholder:
            cleared.append(placeholder[i])
        else:
            cleared.append('')
    return format_value(compiled, ''.join(cleared))


__all__ = ['format_value', 'clear_range']
