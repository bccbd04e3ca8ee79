from __future__ import annotations

import numpy as np

from glyphplot import NORTH_WEST, Borders, HistPlot, Offset


def render(width: int = 80, height: int = 24, samples: int = 10000, seed: int = 7) -> str:
    rng = np.random.default_rng(seed)
    data = rng.normal(0.0, 1.0, size=samples)

    hp = HistPlot(width, height)
    (
        hp.draw_borders(Borders.ALL)
        .set_title("Gaussian distribution")
        .draw_title()
        .set_brush("Area", "@")
        .set_brush("BorderTop", " ")
        .plot_histogram(data, "Normal (0,1)")
        .draw_text(f"Number of samples: {samples}", NORTH_WEST + Offset(2, -2))
        .draw_legend()
    )
    return hp.serialize()


if __name__ == "__main__":
    print(render(), end="")
