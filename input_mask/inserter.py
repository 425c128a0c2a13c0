from __future__ import annotations

"""
Writing typed or pasted characters into a masked value.

- insert_character_at_position: one character, skipping literal separators
- insert_string_at_position: many characters, then reconcile the old tail
- get_string_filling_length_at_position: how far a string reaches when typed
"""

from typing import Optional

from .parse_mask import CompiledMask
from .predicates import (
    get_right_editable_position,
    is_character_allowed_at_position,
    is_position_editable,
    is_value_filled,
)


def insert_character_at_position(compiled: CompiledMask, value: str, character: str, position: Optional[int]) -> str:
    """Write ``character`` at ``position``; the result is cut to end right after it.

    On a literal position the literal is written. If the typed character was
    not that literal it moves on to the next position, unless it is the
    placeholder glyph of the next editable slot. A character rejected by an
    editable position leaves ``value`` unchanged.
    """
    mask = compiled.mask
    if mask is None or position is None:
        return value
    position = max(0, int(position))
    placeholder = compiled.placeholder
    while position < len(mask):
        allowed = is_character_allowed_at_position(compiled, character, position)
        editable = is_position_editable(compiled, position)
        if allowed or not editable:
            value = value[:position] + (character if allowed else mask[position])
        if allowed or editable:
            break
        nxt = get_right_editable_position(compiled, position)
        if placeholder and nxt is not None and character == placeholder[nxt]:
            break
        position += 1
    return value


def insert_string_at_position(compiled: CompiledMask, value: str, string: str, position: Optional[int]) -> str:
    mask = compiled.mask
    if mask is None or position is None:
        return value
    position = int(position)
    if not string or position < 0 or position >= len(mask):
        return value

    is_fixed_length = bool(compiled.placeholder) or is_value_filled(compiled, value)
    value_after = value[position:]

    value = value[:position]
    for character in string:
        value = insert_character_at_position(compiled, value, character, len(value))

    if is_fixed_length:
        value += value_after[len(value) - position:]
    elif is_value_filled(compiled, value):
        value += compiled.literals(len(value))
    else:
        # tail indices are relative to the old value
        editable_after = [
            character
            for i, character in enumerate(value_after)
            if is_position_editable(compiled, position + i)
        ]
        for character in editable_after:
            nxt = get_right_editable_position(compiled, len(value))
            if nxt is None:
                break
            if not is_position_editable(compiled, len(value)):
                value += compiled.literals(len(value), nxt)
            value = insert_character_at_position(compiled, value, character, len(value))
    return value


def get_string_filling_length_at_position(compiled: CompiledMask, string: str, position: Optional[int]) -> int:
    if position is None:
        return 0
    position = max(0, int(position))
    value = ' ' * position
    for character in string or '':
        value = insert_character_at_position(compiled, value, character, len(value))
    return len(value) - position


__all__ = [
    'insert_character_at_position',
    'insert_string_at_position',
    'get_string_filling_length_at_position',
]
