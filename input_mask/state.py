from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Selection:
    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def length(self) -> Optional[int]:
        if self.start is None or self.end is None:
            return None
        return self.end - self.start

    @classmethod
    def collapsed(cls, position: Optional[int]) -> 'Selection':
        return cls(position, position)


@dataclass(frozen=True)
class ChangeState:
    value: str = ""
    selection: Selection = field(default_factory=Selection)


@dataclass(frozen=True)
class ChangeResult:
    value: str
    entered_string: str
    selection: Selection

    def as_state(self) -> ChangeState:
        return ChangeState(self.value, self.selection)


__all__ = ['Selection', 'ChangeState', 'ChangeResult']
