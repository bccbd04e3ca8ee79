from __future__ import annotations

from glyphplot import SYMBOL_BRUSHES, BarGrouper, BarPlot, Borders, Brush, Offset


def render(width: int = 80, height: int = 25) -> str:
    bp = BarPlot(width, height)
    (
        BarGrouper(bp, SYMBOL_BRUSHES)
        .add([80, 40], "Data Source 1")
        .add([20, 50], "Data Source 2", Brush("x"))
        .add([10, 20], "Data Source 3")
        .commit()
    )
    (
        bp.draw_bar_labels(Offset(0, 1))
        .draw_legend()
        .set_brush("BorderTop", "/")
        .draw_borders(Borders.TOP + Borders.RIGHT)
    )
    return bp.serialize()


if __name__ == "__main__":
    print(render(), end="")
