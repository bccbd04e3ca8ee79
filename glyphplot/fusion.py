from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from glyphplot.position import SOUTH_WEST, PositionLike

if TYPE_CHECKING:
    from glyphplot.plot import Plot


@dataclass(frozen=True)
class FusionLayer:
    plot: "Plot"
    position: PositionLike = SOUTH_WEST
    keep_blanks: bool = True
    adjust: bool = True


class PlotFusion:
    """Collects plots and fuses them onto a base plot in insertion order."""

    def __init__(self, base: "Plot") -> None:
        self._base = base
        self._layers: list[FusionLayer] = []

    @property
    def layers(self) -> tuple[FusionLayer, ...]:
        return tuple(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def add(
        self,
        plot: "Plot",
        position: PositionLike = SOUTH_WEST,
        keep_blanks: bool = True,
        adjust: bool = True,
    ) -> "PlotFusion":
        self._layers.append(FusionLayer(plot, position, keep_blanks, adjust))
        return self

    __call__ = add

    def fuse(self) -> "Plot":
        for layer in self._layers:
            self._base.fuse(layer.plot, layer.position, layer.keep_blanks, layer.adjust)
        return self._base
