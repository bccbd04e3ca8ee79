from .canvas import blank_mask, clip_range, new_canvas, render_rows
from .draw_lines import line_cells
from .draw_text import horizontal_text_cells, vertical_text_cells

__all__ = [
    "blank_mask",
    "clip_range",
    "horizontal_text_cells",
    "line_cells",
    "new_canvas",
    "render_rows",
    "vertical_text_cells",
]
