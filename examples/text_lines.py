from __future__ import annotations

from glyphplot import (
    CENTER,
    DEFAULT_CONFIG,
    EAST,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    WEST,
    Offset,
    Plot,
)


def render(width: int = 80, height: int = 24) -> str:
    p = Plot(width, height)
    (
        p.set_brush("LineVertical", DEFAULT_CONFIG.line_vertical)
        .draw_line_vertical_at_col(13)
        .draw_line_vertical_at_col(15)
        .set_brush("LineVertical", "!")
        .draw_line_vertical_at_col(0.5)
        .set_brush("LineHorizontal", ".")
        .draw_line_horizontal_at_row(p.height - 2)
        .draw_line_horizontal_at_row(1)
        .draw_text("North", NORTH)
        .draw_text("South", SOUTH)
        .draw_text("East", EAST)
        .draw_text("West", WEST)
        .draw_text("NorthEast", NORTH_EAST)
        .draw_text("NorthWest", NORTH_WEST)
        .draw_text("SouthEast", SOUTH_EAST)
        .draw_text("SouthWest", SOUTH_WEST)
        .draw_text("Center", CENTER)
        .draw_text_centered("Centered text at South + Offset(0,2)", SOUTH + Offset(0, 2))
        .draw_text_centered("Centered text at South", SOUTH)
        .set_brush("LineHorizontal", ">")
        .draw_line_horizontal_at_row(0.66)
        .set_brush("LineHorizontal", "<")
        .draw_line_horizontal_at_row(0.33)
        .draw_text_vertical_centered("Vertical text", EAST - Offset(10, 0))
        .draw_text("{3,3}", (3, 3))
    )
    return p.serialize()


if __name__ == "__main__":
    print(render(), end="")
