from __future__ import annotations

import unittest

from glyphplot import (
    DEFAULT_CONFIG,
    SYMBOL_BRUSHES,
    Brush,
    InvalidBrushValue,
    Palette,
    PlotConfig,
    PlotMetadata,
    string_to_brushes,
    validate_plot_config,
)


class BrushTests(unittest.TestCase):
    def test_printable_value_keeps_first_character(self) -> None:
        self.assertEqual(Brush("ab").value, "a")
        self.assertEqual(Brush("#", "Area").name, "Area")

    def test_whitespace_control_becomes_space(self) -> None:
        for raw in ("\t", "\n", "\r"):
            self.assertEqual(Brush(raw).value, " ")

    def test_invalid_values_raise(self) -> None:
        with self.assertRaises(InvalidBrushValue):
            Brush("")
        with self.assertRaises(InvalidBrushValue):
            Brush("\x01")
        # Invalid brush values are also plain ValueErrors.
        with self.assertRaises(ValueError):
            Brush("\x07")

    def test_non_printable_multichar_value_keeps_two_characters(self) -> None:
        self.assertEqual(Brush("\x1b[31m").value, "\x1b[")

    def test_empty_name_is_general(self) -> None:
        brush = Brush("x", "")
        self.assertEqual(brush.name, "*")
        self.assertTrue(brush.is_general())
        self.assertFalse(brush.is_blank())
        self.assertTrue(Brush(" ", "Blank").is_blank())

    def test_default_brush_is_blank(self) -> None:
        brush = Brush()
        self.assertEqual(brush.value, " ")
        self.assertTrue(brush.is_blank())
        self.assertEqual(Brush(name="Area"), Brush(" ", "Area"))
        self.assertTrue(PlotMetadata().brush.is_blank())
        self.assertTrue(Brush(" ").is_general())

    def test_brushes_are_values(self) -> None:
        self.assertEqual(Brush("x", "Main"), Brush("x", "Main"))
        self.assertNotEqual(Brush("x", "Main"), Brush("x", "Area"))
        self.assertEqual(Brush("x").with_name("Area"), Brush("x", "Area"))

    def test_string_to_brushes(self) -> None:
        brushes = string_to_brushes("ab")
        self.assertEqual([b.value for b in brushes], ["a", "b"])
        self.assertTrue(all(b.is_general() for b in brushes))
        self.assertEqual(SYMBOL_BRUSHES[0].value, "@")


class PaletteTests(unittest.TestCase):
    def test_defaults_follow_config(self) -> None:
        palette = Palette()
        self.assertEqual(palette.get_brush("Main"), Brush("_", "Main"))
        self.assertEqual(palette.get_brush("Area"), Brush("#", "Area"))
        self.assertEqual(palette["BorderLeft"], "|")
        self.assertIn("LineHorizontal", palette.names())

    def test_unknown_name_resolves_to_blank(self) -> None:
        palette = Palette()
        self.assertEqual(palette.get_brush("Nope"), Brush(" ", "Blank"))
        self.assertEqual(palette["Nope"], " ")
        self.assertFalse(palette.has_brush("Nope"))

    def test_set_brush_by_name_and_value(self) -> None:
        palette = Palette()
        palette.set_brush("Main", "o").set_brush(Brush("%", "Custom"))
        self.assertEqual(palette.get_brush("Main").value, "o")
        self.assertTrue(palette.has_brush("Custom"))
        self.assertIn("Custom", palette)
        with self.assertRaises(ValueError):
            palette.set_brush("Main")

    def test_set_brushes_and_reset(self) -> None:
        palette = Palette()
        palette.set_brushes(["BorderTop", "BorderBottom"], "=")
        self.assertEqual(palette["BorderTop"], "=")
        self.assertEqual(palette["BorderBottom"], "=")
        palette.reset()
        self.assertEqual(palette["BorderTop"], DEFAULT_CONFIG.border_top)

    def test_copy_is_independent(self) -> None:
        palette = Palette()
        other = palette.copy().set_brush("Main", "x")
        self.assertEqual(palette["Main"], "_")
        self.assertEqual(other["Main"], "x")

    def test_custom_config_changes_defaults(self) -> None:
        palette = Palette(PlotConfig(area="@"))
        self.assertEqual(palette["Area"], "@")


class PlotConfigTests(unittest.TestCase):
    def test_overrides_are_merged(self) -> None:
        config = validate_plot_config({"main": "o", "bar_value_precision": 2})
        self.assertEqual(config.main, "o")
        self.assertEqual(config.bar_value_precision, 2)
        self.assertEqual(config.area, DEFAULT_CONFIG.area)

    def test_no_overrides_gives_defaults(self) -> None:
        self.assertEqual(validate_plot_config(), DEFAULT_CONFIG)

    def test_invalid_overrides_raise(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown plot config key"):
            validate_plot_config({"mian": "o"})
        with self.assertRaises(ValueError):
            validate_plot_config({"blank": ""})
        with self.assertRaises(ValueError):
            validate_plot_config({"bar_value_precision": -1})
        with self.assertRaises(ValueError):
            validate_plot_config({"xlim_margin": -0.5})


if __name__ == "__main__":
    unittest.main()
