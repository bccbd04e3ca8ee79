from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from glyphplot.brush import Brush


@dataclass(frozen=True)
class PlotMetadata:
    """One legend entry."""

    label: str = ""
    brush: Brush = field(default_factory=Brush)
    length: int = 0


@dataclass(frozen=True)
class BarPlotMetadata(PlotMetadata):
    ydata: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    is_integer: bool = False
