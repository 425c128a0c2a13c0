from __future__ import annotations

"""
Raw (unmasked) single-line editor with a caret and a selection.

It plays the part of the text control: it applies a keystroke the way a
plain input would, and its snapshot() is the "current" state handed to
process_change together with the last committed masked state.
"""

from dataclasses import dataclass
from typing import Optional

from .state import ChangeState, Selection


@dataclass
class SelectEditor:
    text: str = ""
    caret: int = 0
    sel_start: int = 0
    sel_end: int = 0

    @classmethod
    def from_state(cls, state: ChangeState, caret: Optional[int] = None) -> 'SelectEditor':
        text = state.value or ""
        start = state.selection.start
        end = state.selection.end
        if start is None:
            start = len(text)
        if end is None:
            end = start
        # caret sits on one end of the selection, the other end is the anchor
        if caret not in (start, end):
            caret = end
        ed = cls(text, int(caret), int(start), int(end))
        ed._clamp_all()
        return ed

    def snapshot(self) -> ChangeState:
        a, b = self.bounds()
        return ChangeState(self.text, Selection(a, b))

    def bounds(self) -> tuple[int, int]:
        a, b = int(self.sel_start), int(self.sel_end)
        return min(a, b), max(a, b)

    def _clamp_all(self) -> None:
        n = len(self.text)
        self.caret = max(0, min(n, int(self.caret)))
        self.sel_start = max(0, min(n, int(self.sel_start)))
        self.sel_end = max(0, min(n, int(self.sel_end)))

    def has_selection(self) -> bool:
        return int(self.sel_start) != int(self.sel_end)

    def clear_selection(self) -> None:
        self.sel_start = self.caret
        self.sel_end = self.caret

    def select(self, start: int, end: int) -> None:
        self.sel_start = int(start)
        self.sel_end = int(end)
        self.caret = int(end)
        self._clamp_all()

    def _delete_range(self, a: int, b: int) -> None:
        a, b = min(a, b), max(a, b)
        self.text = self.text[:a] + self.text[b:]
        self.caret = a
        self.clear_selection()
        self._clamp_all()

    def insert(self, s: str) -> None:
        if not s:
            return
        a, b = self.bounds() if self.has_selection() else (int(self.caret), int(self.caret))
        self.text = self.text[:a] + s + self.text[b:]
        self.caret = a + len(s)
        self.clear_selection()
        self._clamp_all()

    def backspace(self) -> None:
        if self.has_selection():
            self._delete_range(self.sel_start, self.sel_end)
            return
        if self.caret <= 0:
            return
        a = int(self.caret) - 1
        self.text = self.text[:a] + self.text[a + 1:]
        self.caret = a
        self.clear_selection()
        self._clamp_all()

    def delete(self) -> None:
        if self.has_selection():
            self._delete_range(self.sel_start, self.sel_end)
            return
        if self.caret >= len(self.text):
            return
        a = int(self.caret)
        self.text = self.text[:a] + self.text[a + 1:]
        self.clear_selection()
        self._clamp_all()

    def cut(self) -> str:
        if not self.has_selection():
            return ""
        a, b = self.bounds()
        removed = self.text[a:b]
        self._delete_range(a, b)
        return removed

    def move_left(self) -> None:
        if self.has_selection():
            self.caret = self.bounds()[0]
        elif self.caret > 0:
            self.caret -= 1
        self.clear_selection()
        self._clamp_all()

    def move_right(self) -> None:
        if self.has_selection():
            self.caret = self.bounds()[1]
        elif self.caret < len(self.text):
            self.caret += 1
        self.clear_selection()
        self._clamp_all()

    def select_left(self) -> None:
        # Anchor stays put; the side matching the caret follows it.
        prev = int(self.caret)
        if self.caret > 0:
            self.caret -= 1
        if not self.has_selection():
            self.sel_start = prev
            self.sel_end = self.caret
        elif prev == int(self.sel_start):
            self.sel_start = self.caret
        else:
            self.sel_end = self.caret
        self._clamp_all()

    def select_right(self) -> None:
        prev = int(self.caret)
        if self.caret < len(self.text):
            self.caret += 1
        if not self.has_selection():
            self.sel_start = prev
            self.sel_end = self.caret
        elif prev == int(self.sel_end):
            self.sel_end = self.caret
        else:
            self.sel_start = self.caret
        self._clamp_all()


__all__ = ["SelectEditor"]
