from __future__ import annotations

import copy
from typing import Any

import numpy as np

from glyphplot.adapters import coerce_series
from glyphplot.brush import BLANK, GENERAL, Brush, Palette
from glyphplot.config import DEFAULT_CONFIG, PlotConfig
from glyphplot.display import resolve_terminal_size
from glyphplot.errors import InvalidPlotSize
from glyphplot.fusion import PlotFusion
from glyphplot.gamma import FixedGamma, Gamma
from glyphplot.image import Image
from glyphplot.position import (
    NORTH,
    NORTH_EAST,
    SOUTH_WEST,
    Borders,
    Offset,
    OffsetLike,
    Position,
    PositionLike,
    adjust_absolute_position,
    as_offset,
    as_position,
    calc_box_position,
    get_absolute_position,
)
from glyphplot.raster import (
    blank_mask,
    clip_range,
    horizontal_text_cells,
    line_cells,
    new_canvas,
    render_rows,
    vertical_text_cells,
)
from glyphplot.scales import CellTransform, DataLimits, build_transform, compute_auto_limits, inside_open_limits
from glyphplot.series import PlotMetadata


def _resolve_size(width: int | None, height: int | None) -> tuple[int, int]:
    if width is None or height is None:
        term_w, term_h = resolve_terminal_size()
        width = term_w if width is None else width
        height = term_h if height is None else height
    if isinstance(width, bool) or isinstance(height, bool):
        raise InvalidPlotSize()
    if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
        raise InvalidPlotSize()
    if width <= 0 or height <= 0:
        raise InvalidPlotSize()
    return int(width), int(height)


def _as_index(value: Any, size: int) -> int:
    # Floats are ratios of the dimension, integers are absolute indexes.
    if isinstance(value, (float, np.floating)):
        return int(size * max(0.0, min(1.0, float(value))))
    return int(value)


class Plot:
    """A fixed-size grid of glyph cells with drawing primitives.

    Cells are addressed ``(col, row)`` with row 0 at the bottom. Data-space
    drawing maps ``xlim_left..xlim_right`` and ``ylim_bottom..ylim_top`` linearly
    onto the grid. Every drawing call mutates the plot and returns it.
    """

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        *,
        config: PlotConfig = DEFAULT_CONFIG,
    ) -> None:
        self._width, self._height = _resolve_size(width, height)
        self._config = config
        self._palette = Palette(config)
        self._canvas = new_canvas(self._width, self._height, self._palette.get_brush(BLANK))
        self._autolimit = Borders.ALL
        self._limits = DataLimits(xmin=0.0, xmax=1.0, ymin=0.0, ymax=1.0)
        self._name = ""
        self._title = ""
        self._metadata: list[PlotMetadata] = []

    # -- properties ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def config(self) -> PlotConfig:
        return self._config

    @property
    def palette(self) -> Palette:
        return self._palette

    @property
    def name(self) -> str:
        return self._name

    @property
    def title(self) -> str:
        return self._title

    @property
    def limits(self) -> DataLimits:
        return self._limits

    @property
    def xlim_left(self) -> float:
        return self._limits.xmin

    @property
    def xlim_right(self) -> float:
        return self._limits.xmax

    @property
    def ylim_bottom(self) -> float:
        return self._limits.ymin

    @property
    def ylim_top(self) -> float:
        return self._limits.ymax

    @property
    def autolimit(self) -> Borders:
        return self._autolimit

    @property
    def metadata(self) -> tuple[PlotMetadata, ...]:
        return tuple(self._metadata)

    # -- cell access --------------------------------------------------------

    def at(self, col: int, row: int) -> Brush:
        assert 0 <= col < self._width and 0 <= row < self._height, f"cell ({col}, {row}) outside plot"
        return self._cell(col, row)

    def set_at(self, col: int, row: int, brush: Brush) -> "Plot":
        assert 0 <= col < self._width and 0 <= row < self._height, f"cell ({col}, {row}) outside plot"
        self._store_cell(col, row, brush)
        return self

    def __getitem__(self, key: tuple[int, int]) -> Brush:
        col, row = key
        return self.at(col, row)

    def __setitem__(self, key: tuple[int, int], brush: Brush) -> None:
        col, row = key
        self.set_at(col, row, brush)

    def _cell(self, col: int, row: int) -> Brush:
        return self._canvas[col, row]

    def _store_cell(self, col: int, row: int, brush: Brush) -> None:
        self._canvas[col, row] = brush

    def _store_block(self, col: int, row: int, block: np.ndarray, mask: np.ndarray | None = None) -> None:
        w, h = block.shape
        view = self._canvas[col : col + w, row : row + h]
        if mask is None:
            view[...] = block
        else:
            view[mask] = block[mask]

    def _snapshot(self) -> np.ndarray:
        return self._canvas

    def _put(self, col: int, row: int, brush: Brush) -> None:
        if 0 <= col < self._width and 0 <= row < self._height:
            self._store_cell(col, row, brush)

    def _transform(self) -> CellTransform:
        return build_transform(self._limits, self._width, self._height)

    def _detached(self) -> "Plot":
        out = Plot(self._width, self._height, config=self._config)
        out._canvas = self._snapshot().copy()
        return out

    # -- positions ----------------------------------------------------------

    def get_absolute_position(self, position: PositionLike) -> Position:
        return get_absolute_position(position, self._width, self._height)

    def adjust_absolute_position(
        self,
        position: PositionLike,
        box_width: int,
        box_height: int,
        drawing_upwards: bool,
    ) -> Position:
        return adjust_absolute_position(position, self._width, self._height, box_width, box_height, drawing_upwards)

    # -- whole-canvas operations -------------------------------------------

    def fill(self, brush: Brush | str | None = None) -> "Plot":
        if brush is None:
            brush = self._palette.get_brush("Main")
        elif isinstance(brush, str):
            brush = Brush(brush)
        self._store_block(0, 0, new_canvas(self._width, self._height, brush))
        return self

    def clear(self) -> "Plot":
        return self.fill(self._palette.get_brush(BLANK))

    def redraw(self) -> "Plot":
        for col in range(self._width):
            for row in range(self._height):
                brush = self._cell(col, row)
                if not brush.is_general():
                    self._store_cell(col, row, self._palette.get_brush(brush.name))
        return self

    def serialize(self) -> str:
        return render_rows(self._snapshot())

    def copy(self) -> "Plot":
        out = copy.copy(self)
        out._canvas = self._canvas.copy()
        out._palette = self._palette.copy()
        out._metadata = list(self._metadata)
        return out

    def blank_like(self) -> "Plot":
        return type(self)(self._width, self._height, config=self._config)

    def is_like(self, other: "Plot") -> bool:
        return self._width == other.width and self._height == other.height

    # -- borders, boxes, straight lines ---------------------------------------

    def draw_borders(self, borders: Borders | int = Borders.ALL) -> "Plot":
        borders = Borders(borders)
        if borders & Borders.LEFT:
            self._store_block(0, 0, new_canvas(1, self._height, self._palette.get_brush("BorderLeft")))
        if borders & Borders.RIGHT:
            self._store_block(self._width - 1, 0, new_canvas(1, self._height, self._palette.get_brush("BorderRight")))
        if borders & Borders.BOTTOM:
            self._store_block(0, 0, new_canvas(self._width, 1, self._palette.get_brush("BorderBottom")))
        if borders & Borders.TOP:
            self._store_block(0, self._height - 1, new_canvas(self._width, 1, self._palette.get_brush("BorderTop")))
        return self

    def _clipped_rect(self, corner1: PositionLike, corner2: PositionLike) -> tuple[int, int, int, int] | None:
        p1 = self.get_absolute_position(corner1)
        p2 = self.get_absolute_position(corner2)
        col_lo = max(0, min(p1.col, p2.col))
        col_hi = min(self._width - 1, max(p1.col, p2.col))
        row_lo = max(0, min(p1.row, p2.row))
        row_hi = min(self._height - 1, max(p1.row, p2.row))
        if col_lo > col_hi or row_lo > row_hi:
            return None
        return col_lo, col_hi, row_lo, row_hi

    def draw_box(self, corner1: PositionLike, corner2: PositionLike, brush: Brush | None = None) -> "Plot":
        if brush is None:
            brush = self._palette.get_brush("Area")
        rect = self._clipped_rect(corner1, corner2)
        if rect is None:
            return self
        col_lo, col_hi, row_lo, row_hi = rect
        self._store_block(col_lo, row_lo, new_canvas(col_hi - col_lo + 1, row_hi - row_lo + 1, brush))
        return self

    def extract(self, corner1: PositionLike, corner2: PositionLike) -> "Plot":
        rect = self._clipped_rect(corner1, corner2)
        if rect is None:
            raise InvalidPlotSize("extracted region does not overlap the plot")
        col_lo, col_hi, row_lo, row_hi = rect
        out = Plot(col_hi - col_lo + 1, row_hi - row_lo + 1, config=self._config)
        out._palette = self._palette.copy()
        out._store_block(0, 0, self._snapshot()[col_lo : col_hi + 1, row_lo : row_hi + 1].copy())
        return out

    def draw_line_horizontal_at_row(self, row: int | float) -> "Plot":
        row = _as_index(row, self._height)
        if 0 <= row < self._height:
            self._store_block(0, row, new_canvas(self._width, 1, self._palette.get_brush("LineHorizontal")))
        return self

    def draw_line_vertical_at_col(self, col: int | float) -> "Plot":
        col = _as_index(col, self._width)
        if 0 <= col < self._width:
            self._store_block(col, 0, new_canvas(1, self._height, self._palette.get_brush("LineVertical")))
        return self

    def draw_line_horizontal_at_y(self, y: float) -> "Plot":
        if self._limits.ymin < y < self._limits.ymax:
            return self.draw_line_horizontal_at_row(self._transform().to_row(y))
        return self

    def draw_line_vertical_at_x(self, x: float) -> "Plot":
        if self._limits.xmin < x < self._limits.xmax:
            return self.draw_line_vertical_at_col(self._transform().to_col(x))
        return self

    # -- data-space drawing -------------------------------------------------

    def draw_line(self, x_begin: float, y_begin: float, x_end: float, y_end: float) -> "Plot":
        brush = self._palette.get_brush("Main")
        for col, row in line_cells(self._transform(), self._width, self._height, x_begin, y_begin, x_end, y_end):
            self._put(col, row, brush)
        return self

    def draw_line_between(self, begin: PositionLike, end: PositionLike) -> "Plot":
        transform = self._transform()
        p1 = self.get_absolute_position(begin)
        p2 = self.get_absolute_position(end)
        return self.draw_line(
            transform.to_x(p1.col),
            transform.to_y(p1.row),
            transform.to_x(p2.col),
            transform.to_y(p2.row),
        )

    def draw_point(self, x: float, y: float) -> "Plot":
        if inside_open_limits(x, y, self._limits):
            transform = self._transform()
            self._put(transform.to_col(x), transform.to_row(y), self._palette.get_brush("Main"))
        return self

    def draw_points(self, x: Any, y: Any, how_many: int | None = None) -> "Plot":
        x_arr = coerce_series(x, label="x")
        y_arr = coerce_series(y, label="y")
        self.set_auto_limits(x_arr, y_arr)

        n = min(x_arr.size, y_arr.size)
        if how_many is not None:
            n = min(n, max(0, int(how_many)))
        xs = x_arr[:n]
        ys = y_arr[:n]
        lim = self._limits
        keep = (lim.xmin < xs) & (xs < lim.xmax) & (lim.ymin < ys) & (ys < lim.ymax)
        transform = self._transform()
        brush = self._palette.get_brush("Main")
        for xv, yv in zip(xs[keep].tolist(), ys[keep].tolist()):
            self._put(transform.to_col(xv), transform.to_row(yv), brush)
        return self

    def plot_data(self, x: Any, y: Any, label: str = "", how_many: int | None = None) -> "Plot":
        x_arr = coerce_series(x, label="x")
        y_arr = coerce_series(y, label="y")
        self.draw_points(x_arr, y_arr, how_many)
        length = how_many if how_many is not None else min(x_arr.size, y_arr.size)
        self._metadata.append(PlotMetadata(label=label, brush=self._palette.get_brush("Main"), length=int(length)))
        return self

    def auto_limit(self, borders: Borders | int) -> "Plot":
        self._autolimit = Borders(borders)
        return self

    def set_auto_limits(self, x: Any, y: Any) -> "Plot":
        x_arr = coerce_series(x, label="x")
        y_arr = coerce_series(y, label="y")
        self._limits = compute_auto_limits(
            x_arr,
            y_arr,
            self._limits,
            self._autolimit,
            x_margin=self._config.xlim_margin,
            y_margin=self._config.ylim_margin,
        )
        return self

    # -- text ---------------------------------------------------------------

    def _write_text_cells(self, cells: list[tuple[int, int, str]]) -> None:
        brushes = [(col, row, Brush(ch, GENERAL)) for col, row, ch in cells]
        for col, row, brush in brushes:
            self._store_cell(col, row, brush)

    def draw_text(self, text: str, position: PositionLike, adjust: bool = True) -> "Plot":
        pos = self.get_absolute_position(position)
        if adjust:
            pos = self.adjust_absolute_position(pos, len(text), 1, drawing_upwards=False)
        self._write_text_cells(horizontal_text_cells(text, pos.col, pos.row, self._width, self._height))
        return self

    def draw_text_centered(self, text: str, position: PositionLike, adjust: bool = True) -> "Plot":
        return self.draw_text(text, as_position(position) - Offset(len(text) // 2, 0), adjust)

    def draw_text_vertical(self, text: str, position: PositionLike, adjust: bool = True) -> "Plot":
        pos = self.get_absolute_position(position)
        if adjust:
            pos = self.adjust_absolute_position(pos, 1, len(text), drawing_upwards=False)
        self._write_text_cells(vertical_text_cells(text, pos.col, pos.row, self._width, self._height))
        return self

    def draw_text_vertical_centered(self, text: str, position: PositionLike, adjust: bool = True) -> "Plot":
        return self.draw_text_vertical(text, as_position(position) + Offset(0, len(text) // 2), adjust)

    def draw_title(self) -> "Plot":
        return self.draw_text_centered(self._title, NORTH, adjust=False)

    def draw_legend(self, position: PositionLike = NORTH_EAST) -> "Plot":
        if not self._metadata:
            return self

        text_width = max(len(entry.label) for entry in self._metadata)
        box_width = text_width + 6
        box_height = len(self._metadata) + 2
        corner = self.get_absolute_position(calc_box_position(position, box_width, box_height))
        col, row = corner.col, corner.row

        cfg = self._config
        brush_top = Brush(cfg.border_top, "BorderTop")
        brush_bottom = Brush(cfg.border_bottom, "BorderBottom")
        brush_left = Brush(cfg.border_left, "BorderLeft")
        brush_right = Brush(cfg.border_right, "BorderRight")

        for i in range(col, col + box_width):
            self._put(i, row, brush_bottom)
            self._put(i, row + box_height - 1, brush_top)
        for j in range(row, row + box_height - 1):
            self._put(col, j, brush_left)
            self._put(col + box_width - 1, j, brush_right)

        for i, entry in enumerate(reversed(self._metadata)):
            self.draw_text(f"{entry.brush.value} {entry.label}", Offset(col + 2, row + box_height - 2 - i))
        return self

    # -- composition --------------------------------------------------------

    def fuse(
        self,
        other: "Plot",
        position: PositionLike = SOUTH_WEST,
        keep_blanks: bool = True,
        adjust: bool = True,
    ) -> "Plot":
        pos = self.get_absolute_position(position)
        if adjust:
            pos = self.adjust_absolute_position(pos, other.width, other.height, drawing_upwards=True)

        col_beg, col_end = clip_range(pos.col, other.width, self._width)
        row_beg, row_end = clip_range(pos.row, other.height, self._height)
        if col_beg >= col_end or row_beg >= row_end:
            return self

        block = other._snapshot()[col_beg:col_end, row_beg:row_end].copy()
        mask = None if keep_blanks else ~blank_mask(block)
        self._store_block(col_beg + pos.col, row_beg + pos.row, block, mask)
        return self

    def fusion(self) -> PlotFusion:
        return PlotFusion(self)

    def move(self, offset: OffsetLike) -> "Plot":
        source = self._detached()
        self.clear()
        return self.fuse(source, as_offset(offset), keep_blanks=True, adjust=False)

    def shift(self, offset: OffsetLike) -> "Plot":
        shifted = Plot(self._width, self._height, config=self._config)
        shifted.fuse(self._detached(), as_offset(offset), keep_blanks=True, adjust=False)
        self._store_block(0, 0, shifted._canvas)
        return self

    # -- images -------------------------------------------------------------

    def draw_image(
        self,
        image: Image,
        gamma: Gamma | None = None,
        position: PositionLike = Offset(0, 0),
        width: int | None = None,
        height: int | None = None,
    ) -> "Plot":
        if gamma is None:
            gamma = FixedGamma()
        box_width = self._width if width is None else int(width)
        box_height = self._height if height is None else int(height)
        if box_width <= 0 or box_height <= 0:
            raise InvalidPlotSize("image box must be positive")

        fitted = image.copy()
        if image.width > box_width or image.height > box_height:
            fitted.resize(min(image.width, box_width), min(image.height, box_height))

        glyphs = Plot(fitted.width, fitted.height, config=self._config)
        for row in range(fitted.height - 1, -1, -1):
            for col in range(fitted.width):
                glyphs._store_cell(col, row, gamma(fitted.at(col, row)))
        return self.fuse(glyphs, position)

    # -- setters ------------------------------------------------------------

    def set_brush(self, brush: Brush | str, value: str | None = None) -> "Plot":
        self._palette.set_brush(brush, value)
        return self

    def set_main_brush(self, value: str) -> "Plot":
        self._palette.set_brush("Main", value)
        return self

    def set_name(self, name: str) -> "Plot":
        self._name = str(name)
        return self

    def set_title(self, title: str) -> "Plot":
        self._title = str(title)
        return self

    def set_xlim_left(self, value: float) -> "Plot":
        if value < self._limits.xmax:
            self._limits = DataLimits(float(value), self._limits.xmax, self._limits.ymin, self._limits.ymax)
        return self

    def set_xlim_right(self, value: float) -> "Plot":
        if self._limits.xmin < value:
            self._limits = DataLimits(self._limits.xmin, float(value), self._limits.ymin, self._limits.ymax)
        return self

    def set_ylim_bottom(self, value: float) -> "Plot":
        if value < self._limits.ymax:
            self._limits = DataLimits(self._limits.xmin, self._limits.xmax, float(value), self._limits.ymax)
        return self

    def set_ylim_top(self, value: float) -> "Plot":
        if self._limits.ymin < value:
            self._limits = DataLimits(self._limits.xmin, self._limits.xmax, self._limits.ymin, float(value))
        return self

    def set_xlimits(self, left: float, right: float) -> "Plot":
        if left < right:
            self._limits = DataLimits(float(left), float(right), self._limits.ymin, self._limits.ymax)
        return self

    def set_ylimits(self, bottom: float, top: float) -> "Plot":
        if bottom < top:
            self._limits = DataLimits(self._limits.xmin, self._limits.xmax, float(bottom), float(top))
        return self


def blank_like(plot: Plot) -> Plot:
    return plot.blank_like()
