from __future__ import annotations

"""
Pure queries over a CompiledMask and a (possibly partial) masked value.

Positions may be None ("no anchor") or out of range; every query answers
False / None for those rather than raising.
"""

from typing import Optional

from .parse_mask import CompiledMask


def _matches(matcher: object, character: str) -> bool:
    search = getattr(matcher, 'search', None)
    if search is not None:
        return search(character) is not None
    return bool(matcher(character))  # type: ignore[operator]


def is_position_editable(compiled: CompiledMask, position: Optional[int]) -> bool:
    if compiled.mask is None or position is None:
        return False
    return 0 <= position < len(compiled.mask) and position not in compiled.permanents


def is_character_filling_position(compiled: CompiledMask, character: str, position: Optional[int]) -> bool:
    mask = compiled.mask
    if mask is None or position is None:
        return False
    if not character or position < 0 or position >= len(mask):
        return False
    if not is_position_editable(compiled, position):
        return mask[position] == character
    return _matches(mask[position], character)


def is_character_allowed_at_position(compiled: CompiledMask, character: str, position: Optional[int]) -> bool:
    """True if ``character`` fills ``position`` or re-types its placeholder glyph."""
    if is_character_filling_position(compiled, character, position):
        return True
    placeholder = compiled.placeholder
    if not placeholder or position is None or not 0 <= position < len(placeholder):
        return False
    return placeholder[position] == character


def is_value_empty(compiled: CompiledMask, value: str) -> bool:
    return all(
        not is_position_editable(compiled, i) or not is_character_filling_position(compiled, ch, i)
        for i, ch in enumerate(value or '')
    )


def get_filled_length(compiled: CompiledMask, value: str) -> int:
    value = value or ''
    for i in range(len(value) - 1, -1, -1):
        if is_position_editable(compiled, i) and is_character_filling_position(compiled, value[i], i):
            return i + 1
    return 0


def is_value_filled(compiled: CompiledMask, value: str) -> bool:
    if compiled.last_editable_position is None:
        return False
    return get_filled_length(compiled, value) == compiled.last_editable_position + 1


def get_left_editable_position(compiled: CompiledMask, position: Optional[int]) -> Optional[int]:
    """Nearest editable index at or before ``position``."""
    if compiled.mask is None or position is None:
        return None
    for i in range(min(position, len(compiled.mask) - 1), -1, -1):
        if is_position_editable(compiled, i):
            return i
    return None


def get_right_editable_position(compiled: CompiledMask, position: Optional[int]) -> Optional[int]:
    """Nearest editable index at or after ``position``."""
    if compiled.mask is None or position is None:
        return None
    for i in range(max(0, position), len(compiled.mask)):
        if is_position_editable(compiled, i):
            return i
    return None


__all__ = [
    'is_position_editable',
    'is_character_filling_position',
    'is_character_allowed_at_position',
    'is_value_empty',
    'is_value_filled',
    'get_filled_length',
    'get_left_editable_position',
    'get_right_editable_position',
]
