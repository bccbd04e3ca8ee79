from __future__ import annotations

import logging
import shutil


LOGGER = logging.getLogger(__name__)

DEFAULT_FALLBACK_SIZE = (80, 24)


def resolve_terminal_size(fallback: tuple[int, int] = DEFAULT_FALLBACK_SIZE) -> tuple[int, int]:
    """Canvas size for the controlling terminal: every column, all rows but the prompt line."""
    columns, lines = _detect_terminal_size(fallback)
    return (max(1, columns), max(1, lines - 1))


def _detect_terminal_size(fallback: tuple[int, int]) -> tuple[int, int]:
    size = shutil.get_terminal_size(fallback=fallback)
    if size.columns <= 0 or size.lines <= 0:
        LOGGER.debug("terminal reported %sx%s; using fallback %sx%s", size.columns, size.lines, *fallback)
        return fallback
    return (int(size.columns), int(size.lines))
