from __future__ import annotations

"""
Masked input session shared by front-ends.

Wraps the committed (value, selection) pair so that every edit goes through
the same path: apply the keystroke to a raw SelectEditor, hand the raw result
and the last committed state to process_change, then commit. Also owns the
focus/blur policy for showing the placeholder.
"""

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from .config import dbg, format_chars_from_env
from .formatting import format_value
from .parse_mask import NO_MASK, CompiledMask, MaskLike, compile_mask
from .predicates import is_value_empty
from .processor import get_default_selection_for_value, process_change
from .selection_editor import SelectEditor
from .state import ChangeState, Selection
from .ui_utils import visible_window


BeforeChange = Callable[[ChangeState, ChangeState, str], ChangeState]


@dataclass
class MaskedInput:
    compiled: CompiledMask = NO_MASK
    value: str = ""
    selection: Selection = field(default_factory=Selection)
    focused: bool = False
    always_show_mask: bool = False
    before_masked_state_change: Optional[BeforeChange] = None
    caret: Optional[int] = None  # active end of the selection
    format_chars: Optional[Mapping[str, object]] = None

    @classmethod
    def create(
        cls,
        mask: MaskLike,
        placeholder: Optional[str] = None,
        value: str = "",
        *,
        always_show_mask: bool = False,
        before_masked_state_change: Optional[BeforeChange] = None,
        format_chars: Optional[Mapping[str, object]] = None,
    ) -> 'MaskedInput':
        """Compile ``mask`` and start a session holding ``value``.

        Without ``format_chars`` the table named by INPUT_MASK_FORMAT_CHARS (or
        the defaults) is used; the same table is reused by set_mask.
        """
        table = format_chars_from_env() if format_chars is None else format_chars
        inp = cls(
            compile_mask(mask, placeholder, table),
            format_chars=table,
            always_show_mask=always_show_mask,
            before_masked_state_change=before_masked_state_change,
        )
        inp.set_value(value)
        return inp

    @property
    def state(self) -> ChangeState:
        return ChangeState(self.value, self.selection)

    def _show_mask(self) -> bool:
        return self.focused or self.always_show_mask

    def _normalize(self, value: str) -> str:
        if self.compiled.mask is None:
            return value or ""
        if not value and not self._show_mask():
            return ""
        formatted = format_value(self.compiled, value)
        if not self._show_mask() and is_value_empty(self.compiled, formatted):
            return ""
        return formatted

    def _commit(self, state: ChangeState, caret: Optional[int] = None) -> None:
        self.value = state.value
        sel = state.selection
        if sel.start is not None:
            n = len(self.value)
            start = max(0, min(n, int(sel.start)))
            end = start if sel.end is None else max(start, min(n, int(sel.end)))
            sel = Selection(start, end)
        self.selection = sel
        self.caret = caret if caret is not None and caret in (sel.start, sel.end) else sel.end

    def _edit(self, action: Callable[[SelectEditor], object]) -> None:
        previous = self.state
        # typing into an unfocused empty field starts from the full mask
        if not previous.value and self.compiled.mask is not None:
            shown = format_value(self.compiled, "")
            start = len(self.compiled.prefix or "")
            previous = ChangeState(shown, Selection.collapsed(min(start, len(shown))))
        if previous.selection.start is None:
            previous = ChangeState(previous.value, get_default_selection_for_value(self.compiled, previous.value))
        ed = SelectEditor.from_state(previous)
        action(ed)
        current = ed.snapshot()
        if self.compiled.mask is None:
            # plain input: nothing to mask
            self._commit(current, ed.caret)
            return
        result = process_change(previous, current, self.compiled)
        next_state = result.as_state()
        if self.before_masked_state_change is not None:
            next_state = self.before_masked_state_change(next_state, previous, result.entered_string)
        dbg("edit: %r -> %r (entered %r)", previous.value, next_state.value, result.entered_string)
        self._commit(next_state)

    def set_mask(
        self,
        mask: MaskLike,
        placeholder: Optional[str] = None,
        format_chars: Optional[Mapping[str, object]] = None,
    ) -> None:
        if format_chars is not None:
            self.format_chars = format_chars
        elif self.format_chars is None:
            self.format_chars = format_chars_from_env()
        self.compiled = compile_mask(mask, placeholder, self.format_chars)
        self.set_value(self.value)

    def set_value(self, value: str) -> None:
        """Replace the value from outside (not an edit); the caret goes to the default slot."""
        formatted = self._normalize(value)
        if formatted:
            selection = get_default_selection_for_value(self.compiled, formatted)
        else:
            selection = Selection.collapsed(0)
        self._commit(ChangeState(formatted, selection))

    def focus(self) -> None:
        self.focused = True
        formatted = self._normalize(self.value)
        self._commit(ChangeState(formatted, get_default_selection_for_value(self.compiled, formatted)))

    def blur(self) -> None:
        self.focused = False
        self._commit(ChangeState(self._normalize(self.value), self.selection))

    def select(self, start: int, end: Optional[int] = None) -> None:
        end = start if end is None else end
        self._commit(ChangeState(self.value, Selection(min(start, end), max(start, end))))

    def insert_text(self, data: str) -> None:
        if not data:
            return
        normalized = data.replace('\r\n', '').replace('\r', '').replace('\n', '')
        self._edit(lambda ed: ed.insert(normalized))

    def paste(self, data: str) -> None:
        self.insert_text(data)

    def backspace(self) -> None:
        self._edit(SelectEditor.backspace)

    def delete_forward(self) -> None:
        self._edit(SelectEditor.delete)

    def cut(self) -> str:
        start, end = self.selection.start, self.selection.end
        if start is None or end is None or start == end:
            return ""
        removed = self.value[start:end]
        self._edit(SelectEditor.cut)
        return removed

    def _move(self, action: Callable[[SelectEditor], object]) -> None:
        ed = SelectEditor.from_state(self.state, self.caret)
        action(ed)
        self._commit(ed.snapshot(), ed.caret)

    def move_left(self) -> None:
        self._move(SelectEditor.move_left)

    def move_right(self) -> None:
        self._move(SelectEditor.move_right)

    def select_left(self) -> None:
        self._move(SelectEditor.select_left)

    def select_right(self) -> None:
        self._move(SelectEditor.select_right)

    def view(self, width: int) -> tuple[str, int]:
        """Return (visible_text, caret_col) for a field ``width`` cells wide."""
        caret = self.caret if self.caret is not None else len(self.value)
        _, text, col = visible_window(self.value, caret, width)
        return text, col


__all__ = ['MaskedInput', 'BeforeChange']
