from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

import numpy as np

from glyphplot.position import Borders


@dataclass(frozen=True)
class DataLimits:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class CellTransform:
    """Linear data-to-cell mapping for one canvas."""

    xlim_left: float
    ylim_bottom: float
    xstep: float
    ystep: float

    def to_col(self, x: float) -> int:
        return int((x - self.xlim_left) / self.xstep)

    def to_row(self, y: float) -> int:
        return int((y - self.ylim_bottom) / self.ystep)

    def to_x(self, col: int) -> float:
        return col * self.xstep + self.xlim_left

    def to_y(self, row: int) -> float:
        return row * self.ystep + self.ylim_bottom


def build_transform(limits: DataLimits, width: int, height: int) -> CellTransform:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    return CellTransform(
        xlim_left=limits.xmin,
        ylim_bottom=limits.ymin,
        xstep=(limits.xmax - limits.xmin) / width,
        ystep=(limits.ymax - limits.ymin) / height,
    )


def inside_open_limits(x: float, y: float, limits: DataLimits) -> bool:
    return limits.xmin < x < limits.xmax and limits.ymin < y < limits.ymax


def compute_auto_limits(
    x: np.ndarray,
    y: np.ndarray,
    current: DataLimits,
    mask: Borders,
    *,
    x_margin: float,
    y_margin: float,
) -> DataLimits:
    """Recompute the sides enabled in ``mask`` from data, keeping the others."""
    xmin, xmax = _auto_axis(
        x,
        current.xmin,
        current.xmax,
        use_low=bool(mask & Borders.LEFT),
        use_high=bool(mask & Borders.RIGHT),
        margin=x_margin,
    )
    ymin, ymax = _auto_axis(
        y,
        current.ymin,
        current.ymax,
        use_low=bool(mask & Borders.BOTTOM),
        use_high=bool(mask & Borders.TOP),
        margin=y_margin,
    )
    return DataLimits(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def _auto_axis(
    values: np.ndarray,
    low: float,
    high: float,
    *,
    use_low: bool,
    use_high: bool,
    margin: float,
) -> tuple[float, float]:
    finite = values[np.isfinite(values)]
    if finite.size == 0 or not (use_low or use_high):
        return low, high
    vmin = float(np.min(finite))
    vmax = float(np.max(finite))

    if use_low and use_high:
        if vmin == vmax:
            return vmin - 1.0, vmax + 1.0
        pad = abs((vmax - vmin) * margin)
        return vmin - pad, vmax + pad
    if use_low:
        if vmin >= high:
            return low, high
        return vmin - abs((high - vmin) * margin), high
    if vmax <= low:
        return low, high
    return low, vmax + abs((vmax - low) * margin)


def min_positive_gap(values: np.ndarray, default: float = 1.0) -> float:
    if values.size < 2:
        return default
    diffs = np.diff(np.sort(values))
    positive = diffs[diffs > 0]
    if positive.size == 0:
        return default
    return float(np.min(positive))


def format_value(value: float, *, precision: int = 0) -> str:
    """Format a bar label with ``precision`` decimals, trimming a zero tail."""
    if not np.isfinite(value):
        return str(value)
    quant = Decimal("1").scaleb(-precision)
    try:
        out = format(Decimal(str(value)).quantize(quant), "f")
    except InvalidOperation:
        out = f"{value:.{precision}f}"
    # Integer zeros (80, 100) are kept; only a fractional tail is trimmed.
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
