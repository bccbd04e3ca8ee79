from __future__ import annotations

import logging
import struct
from dataclasses import dataclass

import numpy as np

from glyphplot.errors import BMPFormatNotSupported


LOGGER = logging.getLogger(__name__)

SUPPORTED_TAGS = frozenset({b"BM", b"BA", b"CI", b"CP", b"IC", b"PC"})
SUPPORTED_BPP = (1, 24, 32)

# size, reserved, pixel offset, DIB header length, width, height, planes, bpp
_HEADER = struct.Struct("<iiiiiihh")


@dataclass(frozen=True)
class BMPHeader:
    tag: bytes
    size: int
    offset: int
    header_length: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int

    @property
    def stride(self) -> int:
        return ((self.bits_per_pixel * self.width + 31) // 32) * 4


def read_header(raw: bytes) -> BMPHeader:
    if len(raw) < 2 + _HEADER.size:
        raise BMPFormatNotSupported("BMP header is truncated")
    tag = bytes(raw[:2])
    if tag not in SUPPORTED_TAGS:
        raise BMPFormatNotSupported(f"unknown BMP tag {tag!r}")
    size, _reserved, offset, header_length, width, height, planes, bpp = _HEADER.unpack_from(raw, 2)
    if width <= 0 or height <= 0:
        raise BMPFormatNotSupported(f"unsupported BMP size {width}x{height}")
    if bpp not in SUPPORTED_BPP:
        raise BMPFormatNotSupported(f"unsupported BMP bit depth: {bpp}")
    return BMPHeader(
        tag=tag,
        size=size,
        offset=offset,
        header_length=header_length,
        width=width,
        height=height,
        planes=planes,
        bits_per_pixel=bpp,
    )


def decode_bmp(raw: bytes) -> np.ndarray:
    """Decode a bitmap into a ``(height, width)`` luminance array.

    Row 0 of the result is the first row stored in the file, which is the
    bottom row of the picture.
    """
    header = read_header(raw)
    stride = header.stride
    end = header.offset + stride * header.height
    if header.offset < 0 or end > len(raw):
        raise BMPFormatNotSupported("BMP pixel payload is truncated")

    rows = np.frombuffer(raw, dtype=np.uint8, count=stride * header.height, offset=header.offset)
    rows = rows.reshape(header.height, stride)

    if header.bits_per_pixel == 1:
        bits = np.unpackbits(rows, axis=1, bitorder="big")[:, : header.width]
        pixels = bits.astype(np.int32) * 255
    else:
        channels = header.bits_per_pixel // 8
        bgr = rows[:, : header.width * channels].reshape(header.height, header.width, channels)[:, :, :3]
        pixels = bgr.astype(np.int32).sum(axis=2) // 3

    LOGGER.debug(
        "decoded %s bitmap %sx%s at %s bpp",
        header.tag.decode("ascii"),
        header.width,
        header.height,
        header.bits_per_pixel,
    )
    return pixels
