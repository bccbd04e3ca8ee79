from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from glyphplot.bars import BarPlot
from glyphplot.config import PlotConfig, validate_plot_config
from glyphplot.grid import GridPlot
from glyphplot.histogram import HistPlot
from glyphplot.plot import Plot


def _resolve_config(config: PlotConfig | None, overrides: dict[str, Any]) -> PlotConfig:
    if config is not None and overrides:
        raise ValueError("pass either config or keyword overrides, not both")
    if config is not None:
        return config
    return validate_plot_config(overrides)


def plot(width: int | None = None, height: int | None = None, *, config: PlotConfig | None = None, **overrides: Any) -> Plot:
    return Plot(width, height, config=_resolve_config(config, overrides))


def bar_plot(
    width: int | None = None,
    height: int | None = None,
    *,
    config: PlotConfig | None = None,
    **overrides: Any,
) -> BarPlot:
    return BarPlot(width, height, config=_resolve_config(config, overrides))


def hist_plot(
    width: int | None = None,
    height: int | None = None,
    *,
    config: PlotConfig | None = None,
    **overrides: Any,
) -> HistPlot:
    return HistPlot(width, height, config=_resolve_config(config, overrides))


def grid_plot(
    rows: int | Sequence[int],
    cols: int | Sequence[int],
    width: int | None = None,
    height: int | None = None,
    *,
    config: PlotConfig | None = None,
    **overrides: Any,
) -> GridPlot:
    """Build a grid from cell counts, or from explicit row heights and column widths."""
    resolved = _resolve_config(config, overrides)
    if isinstance(rows, int) and isinstance(cols, int):
        return GridPlot(rows, cols, width, height, config=resolved)
    if isinstance(rows, int) or isinstance(cols, int):
        raise ValueError("rows and cols must both be counts or both be size lists")
    return GridPlot.from_sizes(cols, rows, width, height, config=resolved)
