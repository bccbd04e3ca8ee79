from __future__ import annotations

from pathlib import Path

import numpy as np

from glyphplot.bmp import decode_bmp


def _block_starts(size: int, parts: int) -> np.ndarray:
    # The first ``size % parts`` blocks are one pixel longer.
    div, rem = divmod(size, parts)
    lengths = np.full(parts, div, dtype=np.int64)
    lengths[:rem] += 1
    return np.concatenate(([0], np.cumsum(lengths)[:-1]))


class Image:
    """Luminance matrix (0..255) decoded from a bitmap, row 0 at the bottom."""

    def __init__(self, pixels: np.ndarray) -> None:
        pixels = np.asarray(pixels)
        if pixels.ndim != 2 or pixels.shape[0] <= 0 or pixels.shape[1] <= 0:
            raise ValueError("image pixels must be a non-empty 2-D array")
        if pixels.dtype.kind not in {"i", "u"}:
            raise ValueError("image pixels must be integers")
        if pixels.min() < 0 or pixels.max() > 255:
            raise ValueError("image luminance must be in [0, 255]")
        self._pixels = pixels.astype(np.int32)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Image":
        return cls(decode_bmp(raw))

    @classmethod
    def open(cls, path: str | Path) -> "Image":
        return cls.from_bytes(Path(path).read_bytes())

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def at(self, col: int, row: int) -> int:
        return int(self._pixels[row, col])

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def copy(self) -> "Image":
        return Image(self._pixels)

    def invert(self) -> "Image":
        self._pixels = 255 - self._pixels
        return self

    def resize(self, width: int, height: int) -> "Image":
        """Shrink by block averaging; a target larger than the image is ignored."""
        if width <= 0 or height <= 0:
            raise ValueError("image width/height must be > 0")
        if width > self.width or height > self.height:
            return self

        row_starts = _block_starts(self.height, height)
        col_starts = _block_starts(self.width, width)
        sums = np.add.reduceat(np.add.reduceat(self._pixels.astype(np.int64), row_starts, axis=0), col_starts, axis=1)
        row_len = np.diff(np.append(row_starts, self.height))
        col_len = np.diff(np.append(col_starts, self.width))
        self._pixels = (sums / np.outer(row_len, col_len)).astype(np.int32)
        return self

    def scale(self, ratio: float) -> "Image":
        if ratio <= 0:
            raise ValueError("ratio must be > 0")
        if ratio >= 1.0:
            return self
        return self.resize(max(1, int(self.width * ratio)), max(1, int(self.height * ratio)))
