from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from glyphplot.adapters import coerce_pair, coerce_series, is_integer_series
from glyphplot.brush import SYMBOL_BRUSHES, Brush
from glyphplot.errors import InconsistentData, PlotDataError
from glyphplot.plot import Plot
from glyphplot.position import NORTH_WEST, Offset, OffsetLike, as_offset
from glyphplot.scales import format_value, min_positive_gap
from glyphplot.series import BarPlotMetadata, PlotMetadata


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bar:
    col: int = 0
    width: int = 0
    height: int = 0
    brush: Brush = field(default_factory=Brush)
    name: str = ""
    empty: bool = False


def _is_bar_list(values: Any) -> bool:
    return (
        isinstance(values, (list, tuple))
        and len(values) > 0
        and all(isinstance(item, Bar) for item in values)
    )


class BarPlot(Plot):
    """Plot with vertical bars laid out from data or given explicitly."""

    def __init__(self, width: int | None = None, height: int | None = None, **kwargs: Any) -> None:
        super().__init__(width, height, **kwargs)
        self._bars: list[Bar] = []

    @property
    def bars(self) -> tuple[Bar, ...]:
        return tuple(self._bars)

    def copy(self) -> "BarPlot":
        out = super().copy()
        out._bars = list(self._bars)
        return out

    def draw_bar(self, col: int, width: int, height: int, brush: Brush | None = None) -> "BarPlot":
        if width <= 0:
            return self
        if brush is None:
            brush = self._palette.get_brush("Area")
        top = self._palette.get_brush("BorderTop")

        if width < 3:
            for k in range(width):
                for j in range(height):
                    self._put(col + k, j, brush)
                self._put(col + k, height, top)
            return self

        left = self._palette.get_brush("BorderLeft")
        right = self._palette.get_brush("BorderRight")
        for j in range(height):
            self._put(col, j, left)
            self._put(col + width - 1, j, right)
        for k in range(1, width - 1):
            for j in range(height):
                self._put(col + k, j, brush)
            self._put(col + k, height, top)
        return self

    def draw_bars(self, bars: Sequence[Bar]) -> "BarPlot":
        for bar in bars:
            if not bar.empty:
                self.draw_bar(bar.col, bar.width, bar.height, bar.brush)
        return self

    def draw_bar_labels(self, text_offset: OffsetLike = Offset(0, 0)) -> "BarPlot":
        text_offset = as_offset(text_offset)
        for bar in self._bars:
            if bar.name:
                anchor = Offset(bar.col + bar.width // 2, bar.height) + text_offset
                self.draw_text_centered(bar.name, anchor, adjust=False)
        return self

    def plot_bars(
        self,
        y: Any,
        x: Any = None,
        label: str = "",
        brush: Brush | None = None,
    ) -> "BarPlot":
        """Lay out one bar per ``(x, y)`` pair, or draw a list of :class:`Bar`.

        ``y`` may also be a mapping ``{x: y}``. Without ``x`` bars are placed at
        ``1..n``.
        """
        if _is_bar_list(y):
            self._bars = [bar for bar in y if not bar.empty]
            return self.draw_bars(y)

        if isinstance(y, Mapping):
            if x is not None:
                raise ValueError("x must be omitted when y is a mapping")
            keys = sorted(y)
            x = list(keys)
            y = [y[key] for key in keys]
        elif x is None:
            x = list(range(1, len(coerce_series(y, label="y")) + 1))

        x_arr, y_arr = coerce_pair(x, y, strict=True)
        if x_arr.size == 0:
            raise InconsistentData("bar series is empty")
        if not (np.isfinite(x_arr).all() and np.isfinite(y_arr).all()):
            raise PlotDataError("bar values must be finite")
        if brush is None:
            brush = self._palette.get_brush("Area")

        gap = min_positive_gap(x_arr)
        self.set_xlimits(float(np.min(x_arr)) - gap, float(np.max(x_arr)) + gap)
        self.set_ylimits(min(0.0, float(np.min(y_arr))), float(np.max(y_arr)) * 1.05)

        transform = self._transform()
        bar_width = int(gap / transform.xstep)
        precision = self._config.bar_value_precision
        bars = [
            Bar(
                col=int((xv - transform.xlim_left) / transform.xstep - bar_width / 2.0),
                width=bar_width,
                height=transform.to_row(yv),
                brush=brush,
                name=format_value(yv, precision=precision),
            )
            for xv, yv in zip(x_arr.tolist(), y_arr.tolist())
        ]
        self._metadata.append(PlotMetadata(label=label, brush=brush, length=len(bars)))
        return self.plot_bars(bars)


class BarGrouper:
    """Accumulates equally long series and lays them out as grouped bars.

    Group ``i`` holds the ``i``-th value of every series. A series that would
    no longer fit the base plot's width is ignored.
    """

    def __init__(self, base: BarPlot, brushes: Sequence[Brush] = SYMBOL_BRUSHES) -> None:
        if not brushes:
            raise ValueError("brushes must not be empty")
        self._base = base
        self._brushes = list(brushes)
        self._brush_index = 0
        self._series: list[BarPlotMetadata] = []
        self._group_count = 0
        self._group_names_on = True
        self._group_names: list[str] = []

    @property
    def base(self) -> BarPlot:
        return self._base

    @property
    def group_size(self) -> int:
        return len(self._series)

    @property
    def group_count(self) -> int:
        return self._group_count

    @property
    def series(self) -> tuple[BarPlotMetadata, ...]:
        return tuple(self._series)

    def _next_brush(self) -> Brush:
        brush = self._brushes[self._brush_index % len(self._brushes)]
        self._brush_index += 1
        return brush

    def add(self, y: Any, label: str = "", brush: Brush | None = None) -> "BarGrouper":
        ydata = coerce_series(y, label="y")
        if ydata.size == 0:
            raise InconsistentData("bar series is empty")
        if not np.isfinite(ydata).all():
            raise PlotDataError(f"series {label!r} has missing or non-finite values")
        if self._series and ydata.size != self._group_count:
            raise InconsistentData(f"series length {ydata.size} != group count {self._group_count}")
        if brush is None:
            brush = self._next_brush()

        group_size = len(self._series) + 1
        group_count = ydata.size
        if (group_size + 1) * group_count - 1 > self._base.width:
            LOGGER.debug("ignoring series %r: %s groups of %s bars exceed width %s", label, group_count, group_size, self._base.width)
            return self

        base = self._base
        base.set_ylimits(
            min(base.ylim_bottom, float(np.min(ydata))),
            max(base.ylim_top, float(np.max(ydata))),
        )
        self._group_count = group_count
        self._series.append(
            BarPlotMetadata(
                label=label,
                brush=brush,
                length=group_count,
                ydata=ydata,
                is_integer=is_integer_series(y),
            )
        )
        base._metadata.append(PlotMetadata(label=label, brush=brush, length=group_count))
        return self

    def group_names(self, on: bool, names: Sequence[str] | None = None) -> "BarGrouper":
        """Toggle the per-group captions drawn above each group on commit."""
        self._group_names_on = bool(on)
        if names is not None:
            self._group_names = [str(name) for name in names]
        return self

    def commit(self, height_resize: float = 0.8) -> BarPlot:
        base = self._base
        if not self._series:
            return base

        group_size = len(self._series)
        n_bars = self._group_count * group_size + (self._group_count - 1)
        width = base.width // n_bars
        transform = base._transform()
        precision = base.config.bar_value_precision

        bars: list[Bar] = []
        group_centers: list[int] = []
        col = 0
        for i in range(self._group_count):
            group_centers.append(col + (group_size * width) // 2)
            for series in self._series:
                value = float(series.ydata[i])
                name = str(int(value)) if series.is_integer else format_value(value, precision=precision)
                bars.append(
                    Bar(
                        col=col,
                        width=width,
                        height=int(transform.to_row(value) * height_resize),
                        brush=series.brush,
                        name=name,
                    )
                )
                col += width
            if i != self._group_count - 1:
                bars.append(Bar(empty=True))
                col += width

        base.plot_bars(bars)
        if self._group_names_on:
            top_row = base.get_absolute_position(NORTH_WEST).row
            for center, name in zip(group_centers, self._group_names):
                base.draw_text_centered(name, Offset(center, top_row), adjust=False)
        return base
