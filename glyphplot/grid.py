from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np

from glyphplot.brush import Brush
from glyphplot.config import DEFAULT_CONFIG, PlotConfig
from glyphplot.errors import GridCellTypeError
from glyphplot.plot import Plot


LOGGER = logging.getLogger(__name__)

PlotT = TypeVar("PlotT", bound=Plot)


def even_partition(total: int, parts: int) -> list[int]:
    """Split ``total`` into ``parts`` sizes; the first ``total % parts`` get one extra."""
    if parts <= 0:
        raise ValueError("parts must be > 0")
    div, rem = divmod(total, parts)
    return [div + (1 if i < rem else 0) for i in range(parts)]


class GridPlot(Plot):
    """A plot partitioned into rows x cols cells that can each show a sub-plot.

    Grid row 0 is the top row. Reads and writes inside a cell go to the sub-plot
    placed there; cells without a sub-plot, or outside its extent, use the
    grid's own canvas.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        width: int | None = None,
        height: int | None = None,
        *,
        config: PlotConfig = DEFAULT_CONFIG,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("grid rows/cols must be > 0")
        super().__init__(width, height, config=config)
        self._setup(even_partition(self._width, cols), even_partition(self._height, rows))

    @classmethod
    def from_sizes(
        cls,
        widths: Sequence[int],
        heights: Sequence[int],
        width: int | None = None,
        height: int | None = None,
        *,
        config: PlotConfig = DEFAULT_CONFIG,
    ) -> "GridPlot":
        widths = [int(w) for w in widths]
        heights = [int(h) for h in heights]
        if not widths or not heights:
            raise ValueError("grid widths/heights must not be empty")
        if min(widths) < 0 or min(heights) < 0:
            raise ValueError("grid widths/heights must be >= 0")

        grid = cls(len(heights), len(widths), width, height, config=config)
        if sum(widths) != grid.width or sum(heights) != grid.height:
            LOGGER.warning(
                "grid sizes %s x %s do not add up to %sx%s; using an even partition",
                widths,
                heights,
                grid.width,
                grid.height,
            )
            return grid
        grid._setup(widths, heights)
        return grid

    def _setup(self, widths: list[int], heights: list[int]) -> None:
        self._col_widths = list(widths)
        self._row_heights = list(heights)
        self._plots: list[Plot | None] = [None] * (len(widths) * len(heights))
        # Cumulative right edges of the columns, and top edges of the grid rows
        # counted from the bottom of the canvas.
        self._col_edges = np.cumsum(self._col_widths)
        self._row_edges = np.cumsum(self._row_heights[::-1])

    @property
    def grid_rows(self) -> int:
        return len(self._row_heights)

    @property
    def grid_cols(self) -> int:
        return len(self._col_widths)

    @property
    def col_widths(self) -> tuple[int, ...]:
        return tuple(self._col_widths)

    @property
    def row_heights(self) -> tuple[int, ...]:
        return tuple(self._row_heights)

    def cell_origin(self, grid_row: int, grid_col: int) -> tuple[int, int]:
        """Canvas ``(col, row)`` of the bottom-left corner of a grid cell."""
        self._check_index(grid_row, grid_col)
        col = sum(self._col_widths[:grid_col])
        row = sum(self._row_heights[grid_row + 1 :])
        return col, row

    def _check_index(self, grid_row: int, grid_col: int) -> None:
        if not 0 <= grid_row < self.grid_rows or not 0 <= grid_col < self.grid_cols:
            raise IndexError(f"grid cell ({grid_row}, {grid_col}) outside {self.grid_rows}x{self.grid_cols} grid")

    def _locate(self, col: int, row: int) -> tuple[Plot | None, int, int]:
        grid_col = int(np.searchsorted(self._col_edges, col, side="right"))
        from_bottom = int(np.searchsorted(self._row_edges, row, side="right"))
        if grid_col >= self.grid_cols or from_bottom >= self.grid_rows:
            return None, col, row
        grid_row = self.grid_rows - 1 - from_bottom
        plot = self._plots[grid_row * self.grid_cols + grid_col]
        if plot is None:
            return None, col, row
        local_col = col - int(self._col_edges[grid_col]) + self._col_widths[grid_col]
        local_row = row - int(self._row_edges[from_bottom]) + self._row_heights[grid_row]
        if not (0 <= local_col < plot.width and 0 <= local_row < plot.height):
            return None, col, row
        return plot, local_col, local_row

    def _cell(self, col: int, row: int) -> Brush:
        plot, local_col, local_row = self._locate(col, row)
        if plot is None:
            return self._canvas[col, row]
        return plot._cell(local_col, local_row)

    def _store_cell(self, col: int, row: int, brush: Brush) -> None:
        plot, local_col, local_row = self._locate(col, row)
        if plot is None:
            self._canvas[col, row] = brush
        else:
            plot._store_cell(local_col, local_row, brush)

    def _store_block(self, col: int, row: int, block: np.ndarray, mask: np.ndarray | None = None) -> None:
        w, h = block.shape
        for i in range(w):
            for j in range(h):
                if mask is None or mask[i, j]:
                    self._store_cell(col + i, row + j, block[i, j])

    def _snapshot(self) -> np.ndarray:
        out = self._canvas.copy()
        for index, plot in enumerate(self._plots):
            if plot is None:
                continue
            grid_row, grid_col = divmod(index, self.grid_cols)
            col, row = self.cell_origin(grid_row, grid_col)
            w = min(self._col_widths[grid_col], plot.width)
            h = min(self._row_heights[grid_row], plot.height)
            if w > 0 and h > 0:
                out[col : col + w, row : row + h] = plot._snapshot()[:w, :h]
        return out

    def copy(self) -> "GridPlot":
        out = super().copy()
        out._plots = list(self._plots)
        return out

    def blank_like(self) -> "GridPlot":
        return GridPlot.from_sizes(self._col_widths, self._row_heights, self._width, self._height, config=self._config)

    def set_plot_at(self, grid_row: int, grid_col: int, plot: Plot | None) -> "GridPlot":
        self._check_index(grid_row, grid_col)
        if plot is self:
            raise ValueError("a grid cannot contain itself")
        self._plots[grid_row * self.grid_cols + grid_col] = plot
        return self

    def get(self, grid_row: int, grid_col: int, kind: type[PlotT] = Plot) -> PlotT:
        self._check_index(grid_row, grid_col)
        plot = self._plots[grid_row * self.grid_cols + grid_col]
        if plot is None:
            raise GridCellTypeError(f"no plot at grid cell ({grid_row}, {grid_col})")
        if not isinstance(plot, kind):
            raise GridCellTypeError(
                f"plot at grid cell ({grid_row}, {grid_col}) is {type(plot).__name__}, not {kind.__name__}"
            )
        return plot

    def set_in_row_major(self) -> "RowMajorGridSetter":
        return RowMajorGridSetter(self)

    def set_in_column_major(self) -> "ColumnMajorGridSetter":
        return ColumnMajorGridSetter(self)


class _GridSetter(ABC):
    def __init__(self, grid: GridPlot) -> None:
        self._grid = grid
        self._index = 0

    @abstractmethod
    def _cell_for(self, index: int) -> tuple[int, int]:
        """Grid ``(row, col)`` receiving the ``index``-th added plot."""

    def add(self, plot: Plot | None) -> Any:
        # Plots past the last cell are dropped.
        if self._index < self._grid.grid_rows * self._grid.grid_cols:
            self._grid.set_plot_at(*self._cell_for(self._index), plot)
            self._index += 1
        return self

    __call__ = add

    def set(self) -> GridPlot:
        return self._grid


class RowMajorGridSetter(_GridSetter):
    def _cell_for(self, index: int) -> tuple[int, int]:
        return divmod(index, self._grid.grid_cols)


class ColumnMajorGridSetter(_GridSetter):
    def _cell_for(self, index: int) -> tuple[int, int]:
        grid_col, grid_row = divmod(index, self._grid.grid_rows)
        return grid_row, grid_col
