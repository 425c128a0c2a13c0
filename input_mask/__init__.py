"""Masked text input engine.

Compiles a mask template into an immutable CompiledMask and keeps a masked
value consistent across typing, pasting, deleting and replacing selections.
All editing operations are pure functions of (compiled mask, snapshot).
"""

from .error_codes import MaskError
from .formatting import clear_range, format_value
from .inserter import (
    get_string_filling_length_at_position,
    insert_character_at_position,
    insert_string_at_position,
)
from .masked_input import MaskedInput
from .parse_mask import NO_MASK, CompiledMask, compile_mask
from .predicates import (
    get_filled_length,
    is_character_allowed_at_position,
    is_character_filling_position,
    is_position_editable,
    is_value_empty,
    is_value_filled,
)
from .processor import get_default_selection_for_value, process_change
from .state import ChangeResult, ChangeState, Selection

__all__ = [
    "MaskError",
    "CompiledMask",
    "NO_MASK",
    "compile_mask",
    "is_position_editable",
    "is_character_filling_position",
    "is_character_allowed_at_position",
    "is_value_empty",
    "is_value_filled",
    "get_filled_length",
    "format_value",
    "clear_range",
    "insert_character_at_position",
    "insert_string_at_position",
    "get_string_filling_length_at_position",
    "Selection",
    "ChangeState",
    "ChangeResult",
    "process_change",
    "get_default_selection_for_value",
    "MaskedInput",
]
