from __future__ import annotations

"""
Configuration for the mask compiler.

- DEFAULT_FORMAT_CHARS: read-only table of format characters → matchers
- load_format_chars: merge JSON overrides over the defaults
- format_chars_from_env: table named by INPUT_MASK_FORMAT_CHARS, or the defaults
- debug_log_enabled: INPUT_MASK_DEBUG_LOG=1 enables per-edit tracing
"""

import json
import logging
import os
import re
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from .error_codes import MaskError


FORMAT_CHARS_ENV = 'INPUT_MASK_FORMAT_CHARS'
DEBUG_LOG_ENV = 'INPUT_MASK_DEBUG_LOG'

DEFAULT_FORMAT_CHARS: Mapping[str, object] = MappingProxyType({
    '9': '[0-9]',
    'a': '[A-Za-z]',
    '*': '[A-Za-z0-9]',
})


def _env_flag(name: str) -> bool:
    return str(os.environ.get(name, '0')).strip().lower() in ('1', 'true', 'yes', 'on')


def debug_log_enabled() -> bool:
    return _env_flag(DEBUG_LOG_ENV)


DEBUG_LOGGER = logging.getLogger('input_mask.debug')


def dbg(msg: str, *args: object) -> None:
    """Per-edit tracing, emitted only when INPUT_MASK_DEBUG_LOG is on."""
    if debug_log_enabled():
        DEBUG_LOGGER.debug(msg, *args)


def _check_table(data: object, source: str) -> dict[str, str]:
    if not isinstance(data, dict):
        raise MaskError('M004', 'config.load', f"{source}: expected a JSON object")
    table: dict[str, str] = {}
    for key, pattern in data.items():
        if not isinstance(key, str) or len(key) != 1:
            raise MaskError('M004', 'config.load', f"{source}: key {key!r} is not a single character")
        if not isinstance(pattern, str):
            raise MaskError('M004', 'config.load', f"{source}: matcher for {key!r} is not a string")
        try:
            re.compile(pattern)
        except re.error as exc:
            raise MaskError('M004', 'config.load', f"{source}: {key!r}: {exc}") from exc
        table[key] = pattern
    return table


def load_format_chars(
    path: Union[str, Path],
    base: Optional[Mapping[str, object]] = None,
) -> Mapping[str, object]:
    """Read ``{char: regex}`` overrides from a JSON file and merge them over ``base``.

    The returned table is read-only; ``base`` itself is never modified.
    """
    p = Path(path).expanduser()
    try:
        data = json.loads(p.read_text(encoding='utf-8'))
    except (OSError, ValueError) as exc:
        logging.getLogger('input_mask').error("Failed to read format chars: %s", p)
        raise MaskError('M005', 'config.load', f"{p}: {exc}") from exc
    overrides = _check_table(data, str(p))
    merged = dict(DEFAULT_FORMAT_CHARS if base is None else base)
    merged.update(overrides)
    logging.getLogger('input_mask').debug("Loaded %d format chars from %s", len(overrides), p)
    return MappingProxyType(merged)


def format_chars_from_env() -> Mapping[str, object]:
    path = str(os.environ.get(FORMAT_CHARS_ENV) or '').strip()
    if not path:
        return DEFAULT_FORMAT_CHARS
    return load_format_chars(path)


__all__ = [
    'DEFAULT_FORMAT_CHARS',
    'FORMAT_CHARS_ENV',
    'DEBUG_LOG_ENV',
    'debug_log_enabled',
    'dbg',
    'load_format_chars',
    'format_chars_from_env',
]
