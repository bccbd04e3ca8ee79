from glyphplot.api import bar_plot, grid_plot, hist_plot, plot
from glyphplot.bars import Bar, BarGrouper, BarPlot
from glyphplot.brush import LETTER_BRUSHES, NUMBER_BRUSHES, SYMBOL_BRUSHES, Brush, Palette, string_to_brushes
from glyphplot.config import DEFAULT_CONFIG, PlotConfig, validate_plot_config
from glyphplot.errors import (
    BMPFormatNotSupported,
    GridCellTypeError,
    InconsistentData,
    InvalidBrushValue,
    InvalidPlotSize,
    PlotDataError,
    PlotError,
)
from glyphplot.fusion import PlotFusion
from glyphplot.gamma import FixedGamma, Gamma, RandomGamma, TextGamma, VariableGamma
from glyphplot.grid import ColumnMajorGridSetter, GridPlot, RowMajorGridSetter
from glyphplot.histogram import HistPlot
from glyphplot.image import Image
from glyphplot.plot import Plot, blank_like
from glyphplot.position import (
    CENTER,
    EAST,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    WEST,
    Borders,
    Offset,
    Position,
    RelativePosition,
    percent,
)
from glyphplot.series import BarPlotMetadata, PlotMetadata

__all__ = [
    "BMPFormatNotSupported",
    "Bar",
    "BarGrouper",
    "BarPlot",
    "BarPlotMetadata",
    "Borders",
    "Brush",
    "CENTER",
    "ColumnMajorGridSetter",
    "DEFAULT_CONFIG",
    "EAST",
    "FixedGamma",
    "Gamma",
    "GridCellTypeError",
    "GridPlot",
    "HistPlot",
    "Image",
    "InconsistentData",
    "InvalidBrushValue",
    "InvalidPlotSize",
    "LETTER_BRUSHES",
    "NORTH",
    "NORTH_EAST",
    "NORTH_WEST",
    "NUMBER_BRUSHES",
    "Offset",
    "Palette",
    "Plot",
    "PlotConfig",
    "PlotDataError",
    "PlotError",
    "PlotFusion",
    "PlotMetadata",
    "Position",
    "RandomGamma",
    "RelativePosition",
    "RowMajorGridSetter",
    "SOUTH",
    "SOUTH_EAST",
    "SOUTH_WEST",
    "SYMBOL_BRUSHES",
    "TextGamma",
    "VariableGamma",
    "WEST",
    "bar_plot",
    "blank_like",
    "grid_plot",
    "hist_plot",
    "plot",
    "string_to_brushes",
    "validate_plot_config",
]
