from __future__ import annotations


def horizontal_text_cells(text: str, col: int, row: int, width: int, height: int) -> list[tuple[int, int, str]]:
    """Characters of ``text`` laid left to right from ``(col, row)``, truncated at the canvas edges."""
    if not 0 <= row < height:
        return []
    n = min(width - col, len(text))
    cut_out = -min(0, col)
    return [(col + i, row, text[i]) for i in range(cut_out, n)]


def vertical_text_cells(text: str, col: int, row: int, width: int, height: int) -> list[tuple[int, int, str]]:
    """Characters of ``text`` laid top to bottom from ``(col, row)``."""
    if not 0 <= col < width:
        return []
    n = min(row + 1, len(text))
    cut_out = max(row - height + 1, 0)
    return [(col, row - j, text[j]) for j in range(cut_out, n)]
