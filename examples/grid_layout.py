from __future__ import annotations

from glyphplot import CENTER, Borders, GridPlot, Plot


def render(cell_width: int = 10, cell_height: int = 5) -> str:
    grid = GridPlot(2, 3, 3 * cell_width, 2 * cell_height)
    base = Plot(cell_width, cell_height).fill().draw_borders(Borders.ALL - Borders.BOTTOM)

    ones = base.copy().set_main_brush("1").redraw()
    twos = base.copy().set_main_brush("2").redraw()
    threes = base.copy().set_main_brush("3").redraw()

    grid.set_in_row_major().add(ones).add(twos).add(threes).add(threes).add(twos).add(ones).set()
    # ``ones`` sits in two cells, so the text shows up in both.
    grid.get(1, 2).draw_text_centered("--", CENTER)
    return grid.serialize()


if __name__ == "__main__":
    print(render(), end="")
