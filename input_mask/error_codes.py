from __future__ import annotations

"""
Error codes for mask configuration problems.

Format: "Error [<CODE>]: <Short title>. Stage: <stage>. Details: <detail>"

Usage:
- raise MaskError('M001', 'compile', 'placeholder has 3 characters, mask has 5')
- msg = format_error('M005', 'config.load', 'No such file')

Only configuration helpers raise; the editing operations never do.
"""

from dataclasses import dataclass
from typing import Optional


ERROR_TITLES: dict[str, str] = {
    'M001': 'Placeholder should be a single character or match the mask length',
    'M002': 'Literal mask entry must be a single character',
    'M003': 'Unsupported matcher',
    'M004': 'Invalid format character table',
    'M005': 'Format character table could not be read',
}


def format_error(code: str, stage: str, detail: Optional[str] = None) -> str:
    title = ERROR_TITLES.get(code, 'Unknown error')
    stage = (stage or '').strip() or '-'
    detail = (detail or '').strip()
    base = f"Error [{code}]: {title}. Stage: {stage}."
    if detail:
        return f"{base} Details: {detail}"
    return base


@dataclass
class MaskError(ValueError):
    code: str
    stage: str
    detail: Optional[str] = None

    def __str__(self) -> str:
        return format_error(self.code, self.stage, self.detail)


__all__ = ['ERROR_TITLES', 'format_error', 'MaskError']
