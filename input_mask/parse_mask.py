from __future__ import annotations

"""
Mask compiler: turns a mask template (or an explicit per-position sequence)
plus a placeholder into an immutable CompiledMask.

String masks use format characters from the table passed in ('9', 'a', '*' by
default); any other character is a literal, and a backslash makes the next
character literal. Explicit masks are sequences where plain strings are
literals and regex patterns / callables are editable positions.
"""

import re
from dataclasses import dataclass
from typing import Callable, FrozenSet, Mapping, Optional, Sequence, Tuple, Union

from .config import DEFAULT_FORMAT_CHARS
from .error_codes import MaskError


Matcher = Union[re.Pattern, Callable[[str], object]]
MaskEntry = Union[str, Matcher]
MaskLike = Union[str, Sequence[object], None]


@dataclass(frozen=True)
class CompiledMask:
    # Literal positions hold a one-character str, editable ones a matcher.
    mask: Optional[Tuple[MaskEntry, ...]] = None
    permanents: FrozenSet[int] = frozenset()
    prefix: Optional[str] = None
    placeholder: Optional[str] = None
    last_editable_position: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.mask) if self.mask is not None else 0

    def literals(self, start: int, end: Optional[int] = None) -> str:
        """Concatenate the literal characters of mask[start:end], skipping editable slots."""
        if self.mask is None:
            return ''
        stop = len(self.mask) if end is None else min(end, len(self.mask))
        return ''.join(self.mask[i] for i in range(max(0, start), stop) if i in self.permanents)  # type: ignore[misc]


NO_MASK = CompiledMask()


def _coerce_matcher(entry: object, stage: str) -> Matcher:
    if isinstance(entry, re.Pattern):
        return entry
    if isinstance(entry, str):
        try:
            return re.compile(entry)
        except re.error as exc:
            raise MaskError('M003', stage, f"{entry!r}: {exc}") from exc
    if callable(entry):
        return entry  # type: ignore[return-value]
    raise MaskError('M003', stage, f"{entry!r} is neither a pattern nor a callable")


def _parse_string_mask(mask: str, format_chars: Mapping[str, object]) -> Tuple[list, list]:
    permanents: list[int] = []
    chars: list[str] = []
    escaped = False
    for ch in mask:
        if not escaped and ch == '\\':
            escaped = True
            continue
        if escaped or ch not in format_chars:
            permanents.append(len(chars))
        chars.append(ch)
        escaped = False
    entries: list = []
    fixed = set(permanents)
    for i, ch in enumerate(chars):
        if i in fixed:
            entries.append(ch)
        else:
            entries.append(_coerce_matcher(format_chars[ch], 'compile.format_chars'))
    return entries, permanents


def _parse_sequence_mask(mask: Sequence[object]) -> Tuple[list, list]:
    permanents: list[int] = []
    entries: list = []
    for i, entry in enumerate(mask):
        if isinstance(entry, str):
            if len(entry) != 1:
                raise MaskError('M002', 'compile', f"entry {i}: {entry!r}")
            permanents.append(i)
            entries.append(entry)
        else:
            entries.append(_coerce_matcher(entry, 'compile'))
    return entries, permanents


def validate_placeholder(mask_length: int, placeholder: Optional[str]) -> None:
    if not placeholder:
        return
    if len(placeholder) != 1 and len(placeholder) != mask_length:
        raise MaskError(
            'M001',
            'compile',
            f"placeholder has {len(placeholder)} characters, mask has {mask_length}",
        )


def _expand_placeholder(entries: list, permanents: list, placeholder: Optional[str]) -> Optional[str]:
    if not placeholder:
        return None
    validate_placeholder(len(entries), placeholder)
    if len(placeholder) == 1:
        glyphs = [placeholder] * len(entries)
    else:
        glyphs = list(placeholder)
    # literals always win over the placeholder
    for position in permanents:
        glyphs[position] = entries[position]
    return ''.join(glyphs)


def compile_mask(
    mask: MaskLike,
    placeholder: Optional[str] = None,
    format_chars: Optional[Mapping[str, object]] = None,
) -> CompiledMask:
    """Compile ``mask`` and ``placeholder`` into a CompiledMask.

    An empty or missing mask yields the no-mask sentinel. Raises MaskError for
    a placeholder whose length is neither 1 nor the mask length, and for
    malformed explicit entries or matchers.
    """
    if not mask:
        return NO_MASK
    table = DEFAULT_FORMAT_CHARS if format_chars is None else format_chars
    if isinstance(mask, str):
        entries, permanents = _parse_string_mask(mask, table)
    else:
        entries, permanents = _parse_sequence_mask(mask)

    glyphs = _expand_placeholder(entries, permanents, placeholder)

    prefix_chars: list[str] = []
    for index, position in enumerate(permanents):
        if position != index:
            break
        prefix_chars.append(entries[position])

    fixed = frozenset(permanents)
    last_editable = len(entries) - 1
    while last_editable >= 0 and last_editable in fixed:
        last_editable -= 1

    return CompiledMask(
        mask=tuple(entries),
        permanents=fixed,
        prefix=''.join(prefix_chars),
        placeholder=glyphs,
        last_editable_position=last_editable if last_editable >= 0 else None,
    )


__all__ = [
    'CompiledMask',
    'NO_MASK',
    'Matcher',
    'MaskLike',
    'compile_mask',
    'validate_placeholder',
]
