from __future__ import annotations

import io
import struct
import tempfile
import unittest
from pathlib import Path

import numpy as np

from glyphplot import (
    BMPFormatNotSupported,
    Brush,
    FixedGamma,
    Image,
    Plot,
    RandomGamma,
    TextGamma,
)
from glyphplot.bmp import decode_bmp, read_header

try:
    from PIL import Image as PILImage
except ImportError:  # pragma: no cover - Pillow ships with the test extra
    PILImage = None


def build_bmp(rows: list[bytes], width: int, height: int, bpp: int, tag: bytes = b"BM") -> bytes:
    """Assemble a bitmap from already padded rows, bottom row first."""
    payload = b"".join(rows)
    offset = 14 + 40
    header = tag + struct.pack("<iii", offset + len(payload), 0, offset)
    info = struct.pack("<iiihhiiiiii", 40, width, height, 1, bpp, 0, len(payload), 0, 0, 0, 0)
    return header + info + payload


def one_bit_sample() -> bytes:
    # Bottom row 1 0 1, top row 0 1 0; rows padded to 4 bytes.
    return build_bmp([bytes([0xA0, 0, 0, 0]), bytes([0x40, 0, 0, 0])], 3, 2, 1)


class DecodeTests(unittest.TestCase):
    def test_header_fields(self) -> None:
        header = read_header(one_bit_sample())
        self.assertEqual((header.width, header.height, header.bits_per_pixel), (3, 2, 1))
        self.assertEqual(header.offset, 54)
        self.assertEqual(header.stride, 4)

    def test_one_bit_pixels_msb_first(self) -> None:
        pixels = decode_bmp(one_bit_sample())
        np.testing.assert_array_equal(pixels, [[255, 0, 255], [0, 255, 0]])

    def test_one_bit_wide_row(self) -> None:
        # 10 pixels span two bytes; the stride is still 4 bytes.
        raw = build_bmp([bytes([0xFF, 0xC0, 0, 0])], 10, 1, 1)
        np.testing.assert_array_equal(decode_bmp(raw), [[255] * 10])

    def test_24_bit_average_with_padding(self) -> None:
        row = bytes([10, 20, 30, 255, 255, 254, 0, 0])
        pixels = decode_bmp(build_bmp([row], 2, 1, 24))
        np.testing.assert_array_equal(pixels, [[20, 254]])

    def test_32_bit_ignores_fourth_channel(self) -> None:
        rows = [bytes([3, 3, 3, 0]), bytes([0, 0, 9, 255])]
        pixels = decode_bmp(build_bmp(rows, 1, 2, 32))
        np.testing.assert_array_equal(pixels, [[3], [3]])

    def test_accepted_tags(self) -> None:
        for tag in (b"BA", b"CI", b"CP", b"IC", b"PC"):
            raw = build_bmp([bytes([0x80, 0, 0, 0])], 1, 1, 1, tag=tag)
            self.assertEqual(decode_bmp(raw).shape, (1, 1))

    def test_rejects(self) -> None:
        good_row = [bytes([0x80, 0, 0, 0])]
        cases = {
            "tag": build_bmp(good_row, 1, 1, 1, tag=b"XX"),
            "zero width": build_bmp(good_row, 0, 1, 1),
            "negative height": build_bmp(good_row, 1, -1, 1),
            "bit depth": build_bmp(good_row, 1, 1, 8),
            "truncated": build_bmp(good_row, 1, 4, 1),
            "short header": b"BM\x00\x00",
        }
        for name, raw in cases.items():
            with self.subTest(name):
                with self.assertRaises(BMPFormatNotSupported):
                    decode_bmp(raw)

    @unittest.skipIf(PILImage is None, "Pillow not installed")
    def test_matches_pillow_rgb(self) -> None:
        rng = np.random.default_rng(3)
        rgb = rng.integers(0, 256, size=(3, 5, 3), dtype=np.uint8)
        buf = io.BytesIO()
        PILImage.fromarray(rgb).save(buf, format="BMP")
        pixels = decode_bmp(buf.getvalue())
        expected = rgb.astype(np.int32).sum(axis=2) // 3
        # Pillow rows go top to bottom; decoded rows go bottom to top.
        np.testing.assert_array_equal(pixels, expected[::-1])

    @unittest.skipIf(PILImage is None, "Pillow not installed")
    def test_matches_pillow_monochrome(self) -> None:
        mono = PILImage.new("1", (11, 3), 0)
        for x in range(0, 11, 2):
            mono.putpixel((x, 0), 255)
        buf = io.BytesIO()
        mono.save(buf, format="BMP")
        pixels = decode_bmp(buf.getvalue())
        expected = np.zeros((3, 11), dtype=np.int32)
        expected[2, ::2] = 255
        np.testing.assert_array_equal(pixels, expected)


class ImageTests(unittest.TestCase):
    def test_from_bytes_and_at(self) -> None:
        img = Image.from_bytes(one_bit_sample())
        self.assertEqual((img.width, img.height), (3, 2))
        self.assertEqual(img.at(0, 0), 255)
        self.assertEqual(img.at(1, 1), 255)
        self.assertEqual(img.at(1, 0), 0)

    def test_double_invert_round_trip(self) -> None:
        img = Image.from_bytes(one_bit_sample())
        original = img.to_array()
        img.invert()
        np.testing.assert_array_equal(img.to_array(), 255 - original)
        img.invert()
        np.testing.assert_array_equal(img.to_array(), original)

    def test_open_reads_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "sample.bmp"
            path.write_bytes(one_bit_sample())
            img = Image.open(path)
        self.assertEqual(img.width, 3)

    def test_resize_block_average(self) -> None:
        img = Image(np.arange(16).reshape(4, 4)).resize(2, 2)
        np.testing.assert_array_equal(img.to_array(), [[2, 4], [10, 12]])

    def test_resize_remainder_goes_first(self) -> None:
        img = Image(np.arange(5).reshape(1, 5)).resize(2, 1)
        np.testing.assert_array_equal(img.to_array(), [[1, 3]])

    def test_resize_never_grows(self) -> None:
        img = Image(np.zeros((2, 2), dtype=np.int32)).resize(4, 1)
        self.assertEqual((img.width, img.height), (2, 2))
        with self.assertRaises(ValueError):
            img.resize(0, 1)

    def test_scale(self) -> None:
        img = Image(np.full((4, 6), 100)).scale(0.5)
        self.assertEqual((img.width, img.height), (3, 2))
        self.assertEqual(Image(np.zeros((2, 2), dtype=np.int32)).scale(2.0).width, 2)
        with self.assertRaises(ValueError):
            img.scale(0)

    def test_invalid_pixels(self) -> None:
        with self.assertRaises(ValueError):
            Image(np.full((2, 2), 300))
        with self.assertRaises(ValueError):
            Image(np.zeros(4, dtype=np.int32))

    def test_copy_is_independent(self) -> None:
        img = Image(np.zeros((2, 2), dtype=np.int32))
        other = img.copy().invert()
        self.assertEqual(img.at(0, 0), 0)
        self.assertEqual(other.at(0, 0), 255)


class GammaTests(unittest.TestCase):
    def test_default_fixed_gamma(self) -> None:
        gamma = FixedGamma()
        self.assertEqual(gamma(0).value, " ")
        self.assertEqual(gamma(224).value, "#")
        self.assertEqual(gamma(225).value, "@")
        self.assertEqual(gamma(255).value, "@")
        self.assertTrue(gamma(100).is_general())

    def test_last_band_absorbs_remainder(self) -> None:
        gamma = FixedGamma("abc")
        self.assertEqual(gamma(84).value, "a")
        self.assertEqual(gamma(85).value, "b")
        self.assertEqual(gamma(169).value, "b")
        self.assertEqual(gamma(170).value, "c")

    def test_fixed_gamma_limits(self) -> None:
        self.assertEqual(len(FixedGamma("x" * 300).chars), 256)
        with self.assertRaises(ValueError):
            FixedGamma("")
        with self.assertRaises(ValueError):
            FixedGamma()(256)

    def test_shuffle_keeps_characters(self) -> None:
        gamma = FixedGamma("abcdef", rng=np.random.default_rng(1)).shuffle()
        self.assertEqual(sorted(gamma.chars), list("abcdef"))

    def test_random_gamma(self) -> None:
        gamma = RandomGamma("ab", rng=np.random.default_rng(0))
        self.assertEqual(gamma(10), Brush(" "))
        values = {gamma(200).value for _ in range(50)}
        self.assertTrue(values <= {"a", "b"})
        gamma.set_zero_brush(".").set_zero_threshold(20)
        self.assertEqual(gamma(10).value, ".")
        self.assertIn(gamma(20).value, {"a", "b"})

    def test_text_gamma_counter_persists(self) -> None:
        gamma = TextGamma("xy")
        self.assertEqual([gamma(v).value for v in (200, 200, 10, 200)], ["x", "y", " ", "x"])
        self.assertEqual(gamma.use_count, 3)
        img = Image(np.full((1, 1), 255))
        Plot(1, 1).draw_image(img, gamma)
        self.assertEqual(gamma.use_count, 4)

    def test_empty_text_becomes_space(self) -> None:
        self.assertEqual(TextGamma("").text, " ")


class DrawImageTests(unittest.TestCase):
    def test_pixels_map_through_gamma(self) -> None:
        img = Image(np.array([[0, 255], [255, 0]]))
        p = Plot(4, 3).draw_image(img, FixedGamma("ab"))
        self.assertEqual(p.serialize(), "    \nba  \nab  \n")

    def test_image_is_shrunk_to_fit(self) -> None:
        img = Image(np.full((4, 4), 255))
        p = Plot(2, 2).draw_image(img, FixedGamma("ab"))
        self.assertEqual(p.serialize(), "bb\nbb\n")

    def test_box_size_and_position(self) -> None:
        img = Image(np.full((4, 4), 255))
        p = Plot(5, 3).draw_image(img, FixedGamma("ab"), position=(1, 0), width=2, height=1)
        self.assertEqual(p.serialize(), "     \n     \n bb  \n")

    def test_text_gamma_fills_top_row_first(self) -> None:
        img = Image(np.full((2, 2), 255))
        p = Plot(2, 2).draw_image(img, TextGamma("abcd"))
        self.assertEqual(p.serialize(), "ab\ncd\n")


if __name__ == "__main__":
    unittest.main()
