from __future__ import annotations

from typing import Any

import numpy as np

from glyphplot.adapters import coerce_series
from glyphplot.bars import Bar, BarPlot
from glyphplot.errors import InconsistentData
from glyphplot.scales import format_value
from glyphplot.series import PlotMetadata


class HistPlot(BarPlot):
    def plot_histogram(self, data: Any, label: str = "", height_resize: float = 0.8) -> "HistPlot":
        """Count ``data`` into at most ``width`` bins centered on the sample values.

        The bin count never exceeds the number of distinct values. The tallest
        bar reaches ``height * min(1, height_resize)`` rows.
        """
        values = coerce_series(data, label="data")
        values = values[np.isfinite(values)]
        if values.size == 0:
            raise InconsistentData("histogram data is empty")

        nbins = min(self._width, int(np.unique(values).size))
        lo = float(np.min(values))
        hi = float(np.max(values))
        step = (hi - lo) / (nbins - 1) if nbins > 1 else 1.0
        self.set_xlimits(lo - step / 2, hi + step / 2)

        idx = ((values - self.xlim_left) / step).astype(np.int64)
        counts = np.bincount(np.clip(idx, 0, nbins - 1), minlength=nbins)
        factor = min(1.0, height_resize)
        heights = (counts / counts.max() * self._height * factor).astype(np.int64)

        brush = self._palette.get_brush("Area")
        bin_width = self._width // nbins
        bars = [
            Bar(
                col=i * bin_width,
                width=bin_width,
                height=int(h),
                brush=brush,
                name=format_value(int(h)),
            )
            for i, h in enumerate(heights.tolist())
        ]
        self._metadata.append(PlotMetadata(label=label, brush=brush, length=int(values.size)))
        return self.plot_bars(bars)
