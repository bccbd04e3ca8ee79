from __future__ import annotations

import numpy as np

from glyphplot.brush import BLANK, Brush


def new_canvas(width: int, height: int, brush: Brush) -> np.ndarray:
    """Column-major cell grid: ``canvas[col, row]`` with row 0 at the bottom."""
    canvas = np.empty((width, height), dtype=object)
    canvas.fill(brush)
    return canvas


def clip_range(offset: int, src_len: int, dst_len: int) -> tuple[int, int]:
    """Source index range ``[beg, end)`` that lands inside ``[0, dst_len)`` once shifted by ``offset``."""
    beg = max(0, -offset)
    end = min(src_len, dst_len - offset)
    return beg, end


def blank_mask(cells: np.ndarray) -> np.ndarray:
    mask = np.zeros(cells.shape, dtype=bool)
    for idx, brush in np.ndenumerate(cells):
        mask[idx] = brush.name == BLANK
    return mask


def render_rows(canvas: np.ndarray) -> str:
    width, height = canvas.shape
    lines = []
    for row in range(height - 1, -1, -1):
        lines.append("".join(brush.value for brush in canvas[:, row]))
        lines.append("\n")
    return "".join(lines)
