from __future__ import annotations

import struct

import numpy as np

from glyphplot import Image, Plot, TextGamma


def disc_bitmap(size: int = 48) -> bytes:
    """24-bit BMP of a bright disc on a dark background."""
    yy, xx = np.mgrid[0:size, 0:size]
    radius = size / 2.0
    dist = np.hypot(xx - radius + 0.5, yy - radius + 0.5)
    luminance = np.clip(255.0 * (1.0 - dist / radius), 0, 255).astype(np.uint8)

    stride = ((24 * size + 31) // 32) * 4
    rows = np.zeros((size, stride), dtype=np.uint8)
    rows[:, : size * 3] = np.repeat(luminance, 3, axis=1)
    payload = rows.tobytes()

    offset = 14 + 40
    header = b"BM" + struct.pack("<iii", offset + len(payload), 0, offset)
    info = struct.pack("<iiihhiiiiii", 40, size, size, 1, 24, 0, len(payload), 2835, 2835, 0, 0)
    return header + info + payload


def render(width: int = 64, height: int = 24) -> str:
    logo = Image.from_bytes(disc_bitmap())
    p = Plot(width, height)
    plain = p.draw_image(logo).serialize()
    text = p.clear().draw_image(logo, TextGamma("glyphplot")).serialize()
    return plain + text


if __name__ == "__main__":
    print(render(), end="")
