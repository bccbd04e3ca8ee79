from __future__ import annotations

import math

from glyphplot.scales import CellTransform


def _cell_index(value: float, origin: float, step: float) -> int | None:
    position = (value - origin) / step
    if not math.isfinite(position):
        return None
    return int(position)


def _visible_steps(start: int, sign: int, n: int, size: int) -> range:
    # Steps i in [0, n) for which start + sign * i lands in [0, size).
    if sign > 0:
        return range(max(0, -start), min(n, size - start))
    return range(max(0, start - size + 1), min(n, start + 1))


def line_cells(
    transform: CellTransform,
    width: int,
    height: int,
    x_begin: float,
    y_begin: float,
    x_end: float,
    y_end: float,
) -> list[tuple[int, int]]:
    """Cells lit by a data-space segment on a ``width`` x ``height`` canvas.

    The walk steps one cell at a time along the axis with the strictly larger
    cell delta and converts the other coordinate from data space at each
    step. Equal deltas walk the columns. Only steps whose walked coordinate
    falls on the canvas are produced; segments with a non-finite end draw
    nothing.
    """
    col_beg = _cell_index(x_begin, transform.xlim_left, transform.xstep)
    row_beg = _cell_index(y_begin, transform.ylim_bottom, transform.ystep)
    col_end = _cell_index(x_end, transform.xlim_left, transform.xstep)
    row_end = _cell_index(y_end, transform.ylim_bottom, transform.ystep)
    if col_beg is None or row_beg is None or col_end is None or row_end is None:
        return []

    delta_col = col_end - col_beg
    delta_row = row_end - row_beg
    n = max(abs(delta_col), abs(delta_row)) + 1

    if abs(delta_col) < abs(delta_row):
        x_adv = (x_end - x_begin) / n
        if not math.isfinite(x_adv):
            return []
        sign = 1 if row_beg < row_end else -1
        return [
            (transform.to_col(x_begin + j * x_adv), row_beg + sign * j)
            for j in _visible_steps(row_beg, sign, n, height)
        ]

    y_adv = (y_end - y_begin) / n
    if not math.isfinite(y_adv):
        return []
    sign = 1 if col_beg < col_end else -1
    return [
        (col_beg + sign * i, transform.to_row(y_begin + i * y_adv))
        for i in _visible_steps(col_beg, sign, n, width)
    ]
