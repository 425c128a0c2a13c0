from __future__ import annotations

"""
Change processing: given the last committed masked state and the raw state
right after the environment applied an edit, work out what was typed or
removed, re-apply the mask and place the cursor.

- process_change: one edit → ChangeResult(value, entered_string, selection)
- get_default_selection_for_value: cursor on focus, after the filled part

Position 0 is an ordinary position here; only None means "no anchor".
"""

from .config import dbg
from .formatting import clear_range, format_value
from .inserter import get_string_filling_length_at_position, insert_string_at_position
from .parse_mask import CompiledMask
from .predicates import get_filled_length, get_left_editable_position, get_right_editable_position
from .state import ChangeResult, ChangeState, Selection


def _place_cursor(compiled: CompiledMask, cursor: int, entered_length: int) -> int:
    mask_length = compiled.length
    prefix_length = len(compiled.prefix or '')
    last_editable = compiled.last_editable_position
    cursor += entered_length
    if cursor >= mask_length:
        return mask_length
    if cursor < prefix_length and not entered_length:
        return prefix_length
    if entered_length and last_editable is not None and prefix_length <= cursor < last_editable:
        nxt = get_right_editable_position(compiled, cursor)
        return cursor if nxt is None else nxt
    return cursor


def process_change(
    previous_state: ChangeState,
    current_state: ChangeState,
    compiled: CompiledMask,
) -> ChangeResult:
    """Turn a raw post-edit snapshot into the next committed masked state.

    The new value is rebuilt from ``previous_state.value``; the raw current
    value is only used to read what was entered. With the no-mask sentinel the
    previous value is kept and the cursor collapses to where the edit began.
    """
    value = current_state.value or ''
    selection = current_state.selection
    previous_value = previous_state.value or ''
    previous_selection = previous_state.selection

    if previous_selection.start is None or selection.start is None or selection.end is None:
        dbg("process_change: no selection anchor, keeping %r", previous_value)
        return ChangeResult(previous_value, '', previous_selection)

    entered_string = ''
    entered_length = 0
    removed_length = 0
    cursor = min(previous_selection.start, selection.start)

    if selection.end > previous_selection.start:
        entered_string = value[previous_selection.start:selection.end]
        entered_length = get_string_filling_length_at_position(compiled, entered_string, cursor)
        removed_length = (previous_selection.length or 0) if entered_length else 0
    elif len(value) < len(previous_value):
        removed_length = len(previous_value) - len(value)

    if compiled.mask is None:
        return ChangeResult(previous_value, entered_string, Selection.collapsed(cursor))

    new_value = previous_value

    if removed_length > 0:
        if removed_length == 1 and not previous_selection.length:
            if previous_selection.start == selection.start:
                snapped = get_right_editable_position(compiled, selection.start)
            else:
                snapped = get_left_editable_position(compiled, selection.start)
            # nothing editable in that direction: leave the value alone
            if snapped is not None:
                cursor = snapped
                new_value = clear_range(compiled, new_value, cursor, removed_length)
        else:
            new_value = clear_range(compiled, new_value, cursor, removed_length)

    new_value = insert_string_at_position(compiled, new_value, entered_string, cursor)
    new_value = format_value(compiled, new_value)

    position = _place_cursor(compiled, cursor, entered_length)
    dbg(
        "process_change: entered=%r removed=%d %r -> %r cursor=%d",
        entered_string, removed_length, previous_value, new_value, position,
    )
    return ChangeResult(new_value, entered_string, Selection.collapsed(position))


def get_default_selection_for_value(compiled: CompiledMask, value: str) -> Selection:
    """First editable slot after the filled part, or the end of the value if none is left."""
    value = value or ''
    position = get_right_editable_position(compiled, get_filled_length(compiled, value))
    if position is None:
        position = len(value)
    return Selection.collapsed(position)


__all__ = ['process_change', 'get_default_selection_for_value']
