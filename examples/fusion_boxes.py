from __future__ import annotations

from glyphplot import CENTER, NORTH_EAST, NORTH_WEST, SOUTH_EAST, SOUTH_WEST, Plot


def render(width: int = 60, height: int = 15) -> str:
    box1 = Plot(10, 5).fill(".").draw_text_centered("BOX1", CENTER)
    box2 = box1.copy().draw_text_centered("BOX2", CENTER)

    canvas = Plot(width, height)
    (
        canvas.fusion()
        .add(box1, NORTH_WEST)
        .add(box1, SOUTH_EAST)
        .add(box2, NORTH_EAST)
        .add(box2, SOUTH_WEST)
        .fuse()
        .draw_line_horizontal_at_row(0.5)
        .draw_line_vertical_at_col(0.5)
    )
    return canvas.serialize()


if __name__ == "__main__":
    print(render(), end="")
