from __future__ import annotations

import unittest

import numpy as np

from glyphplot import (
    SYMBOL_BRUSHES,
    Bar,
    BarGrouper,
    BarPlot,
    Brush,
    HistPlot,
    InconsistentData,
    PlotConfig,
    PlotDataError,
)


class DrawBarTests(unittest.TestCase):
    def test_zero_width_draws_nothing(self) -> None:
        bp = BarPlot(5, 4).draw_bar(1, 0, 3)
        self.assertEqual(bp.serialize(), "     \n" * 4)

    def test_narrow_bar_has_area_and_cap(self) -> None:
        bp = BarPlot(5, 4).draw_bar(1, 2, 2)
        self.assertEqual(bp.serialize().splitlines(), ["     ", " __  ", " ##  ", " ##  "])

    def test_wide_bar_has_sides(self) -> None:
        bp = BarPlot(5, 4).draw_bar(0, 4, 2)
        self.assertEqual(bp.serialize().splitlines(), ["     ", " __  ", "|##| ", "|##| "])
        self.assertEqual(bp.at(0, 0).name, "BorderLeft")
        self.assertEqual(bp.at(3, 0).name, "BorderRight")
        self.assertEqual(bp.at(1, 2).name, "BorderTop")

    def test_bar_outside_canvas_is_clipped(self) -> None:
        bp = BarPlot(3, 2).draw_bar(2, 4, 5)
        self.assertEqual(bp.at(2, 0).value, "|")


class PlotBarsTests(unittest.TestCase):
    def test_layout_from_values(self) -> None:
        bp = BarPlot(10, 10).plot_bars([2, 4])
        self.assertEqual((bp.xlim_left, bp.xlim_right), (0.0, 3.0))
        self.assertAlmostEqual(bp.ylim_top, 4.2)
        self.assertEqual([b.col for b in bp.bars], [1, 5])
        self.assertEqual([b.width for b in bp.bars], [3, 3])
        self.assertEqual([b.height for b in bp.bars], [4, 9])
        self.assertEqual([b.name for b in bp.bars], ["2", "4"])
        self.assertEqual(bp.bars[0].brush, Brush("#", "Area"))

    def test_mapping_is_sorted_by_key(self) -> None:
        bp = BarPlot(12, 10).plot_bars({3: 1, 1: 2})
        self.assertEqual((bp.xlim_left, bp.xlim_right), (-1.0, 5.0))
        self.assertEqual([b.name for b in bp.bars], ["2", "1"])

    def test_explicit_x_and_label(self) -> None:
        bp = BarPlot(10, 10).plot_bars([1, 2], x=[10, 20], label="sales", brush=Brush("$"))
        self.assertEqual(bp.metadata[-1].label, "sales")
        self.assertEqual(bp.metadata[-1].length, 2)
        self.assertEqual(bp.bars[0].brush.value, "$")

    def test_inconsistent_series_raise(self) -> None:
        bp = BarPlot(10, 10)
        with self.assertRaises(InconsistentData):
            bp.plot_bars([1, 2], x=[1])
        with self.assertRaises(InconsistentData):
            bp.plot_bars([])
        self.assertEqual(bp.metadata, ())

    def test_missing_values_leave_plot_untouched(self) -> None:
        bp = BarPlot(10, 5)
        before = bp.serialize()
        for y, x in (([1.0, None, 3.0], None), ([1.0, 2.0], [1.0, float("nan")]), ([1.0, float("inf")], None)):
            with self.assertRaises(PlotDataError):
                bp.plot_bars(y, x=x)
        self.assertEqual((bp.xlim_left, bp.xlim_right), (0.0, 1.0))
        self.assertEqual((bp.ylim_bottom, bp.ylim_top), (0.0, 1.0))
        self.assertEqual(bp.metadata, ())
        self.assertEqual(bp.bars, ())
        self.assertEqual(bp.serialize(), before)

    def test_default_bar_brush_is_blank(self) -> None:
        self.assertTrue(Bar().brush.is_blank())

    def test_labels_use_configured_precision(self) -> None:
        bp = BarPlot(10, 10, config=PlotConfig(bar_value_precision=1)).plot_bars([2.0, 2.5, 80.0])
        self.assertEqual([b.name for b in bp.bars], ["2", "2.5", "80"])

    def test_plot_bar_list_keeps_non_empty_bars(self) -> None:
        bp = BarPlot(6, 4).plot_bars([Bar(empty=True), Bar(col=0, width=1, height=1, name="a")])
        self.assertEqual(len(bp.bars), 1)
        self.assertEqual(bp.at(0, 1).name, "BorderTop")

    def test_bar_labels_sit_on_top(self) -> None:
        bp = BarPlot(10, 10).plot_bars([Bar(col=2, width=3, height=1, brush=Brush("#", "Area"), name="7")])
        bp.draw_bar_labels()
        self.assertEqual(bp.at(3, 1).value, "7")
        bp.draw_bar_labels((0, 2))
        self.assertEqual(bp.at(3, 3).value, "7")


class HistogramTests(unittest.TestCase):
    def test_bins_follow_distinct_values(self) -> None:
        hp = HistPlot(10, 10).plot_histogram([1, 1, 1, 2, 2, 3], "h")
        self.assertEqual(len(hp.bars), 3)
        self.assertEqual([b.height for b in hp.bars], [8, 5, 2])
        self.assertEqual([b.col for b in hp.bars], [0, 3, 6])
        self.assertEqual((hp.xlim_left, hp.xlim_right), (0.5, 3.5))
        self.assertEqual(hp.metadata[-1].label, "h")

    def test_resize_is_capped(self) -> None:
        hp = HistPlot(10, 10).plot_histogram([1, 1, 1, 2, 2, 3], "h", height_resize=2.0)
        self.assertEqual(max(b.height for b in hp.bars), 10)

    def test_single_value(self) -> None:
        hp = HistPlot(10, 10).plot_histogram([5, 5, 5])
        self.assertEqual(len(hp.bars), 1)
        self.assertEqual(hp.bars[0].width, 10)
        self.assertEqual((hp.xlim_left, hp.xlim_right), (4.5, 5.5))

    def test_bins_never_exceed_width(self) -> None:
        hp = HistPlot(2, 5).plot_histogram([1, 2, 3, 4])
        self.assertEqual(len(hp.bars), 2)
        self.assertEqual([b.height for b in hp.bars], [4, 4])

    def test_large_sample(self) -> None:
        data = np.random.default_rng(0).normal(size=1000)
        hp = HistPlot(40, 12).plot_histogram(data)
        self.assertEqual(len(hp.bars), 40)
        self.assertEqual(max(b.height for b in hp.bars), int(12 * 0.8))

    def test_empty_data_raises(self) -> None:
        with self.assertRaises(InconsistentData):
            HistPlot(10, 10).plot_histogram([])


class BarGrouperTests(unittest.TestCase):
    def test_overflowing_series_is_ignored(self) -> None:
        bp = BarPlot(10, 10)
        grouper = BarGrouper(bp)
        for k in range(5):
            grouper.add([k, k + 1], f"s{k}")
        self.assertEqual(grouper.group_size, 4)
        self.assertEqual(len(grouper.series), 4)
        self.assertEqual(len(bp.metadata), 4)

    def test_overflow_is_logged(self) -> None:
        grouper = BarGrouper(BarPlot(4, 4)).add([1, 2], "a")
        with self.assertLogs("glyphplot.bars", level="DEBUG"):
            grouper.add([1, 2], "b")
        self.assertEqual(grouper.group_size, 1)

    def test_series_must_share_length(self) -> None:
        grouper = BarGrouper(BarPlot(20, 10)).add([1, 2], "a")
        with self.assertRaises(InconsistentData):
            grouper.add([1], "b")

    def test_missing_values_are_rejected_before_accepting(self) -> None:
        bp = BarPlot(20, 10)
        grouper = BarGrouper(bp)
        with self.assertRaises(PlotDataError):
            grouper.add([1.0, None], "a")
        self.assertEqual(grouper.group_size, 0)
        self.assertEqual(bp.metadata, ())
        self.assertEqual((bp.ylim_bottom, bp.ylim_top), (0.0, 1.0))
        grouper.add([1, 2], "b")
        self.assertEqual(grouper.series[0].brush, SYMBOL_BRUSHES[0])
        grouper.commit()

    def test_brushes_cycle_when_omitted(self) -> None:
        grouper = BarGrouper(BarPlot(20, 10))
        grouper.add([1], "a").add([2], "b", Brush("x")).add([3], "c")
        brushes = [s.brush for s in grouper.series]
        self.assertEqual(brushes, [SYMBOL_BRUSHES[0], Brush("x"), SYMBOL_BRUSHES[1]])

    def test_ylimits_are_a_running_union(self) -> None:
        bp = BarPlot(20, 10)
        BarGrouper(bp).add([4, 8], "a").add([-2, 6], "b")
        self.assertEqual((bp.ylim_bottom, bp.ylim_top), (-2.0, 8.0))

    def test_commit_layout(self) -> None:
        bp = BarPlot(20, 8)
        BarGrouper(bp).add([4, 8], "a").add([2, 6], "b").commit(height_resize=1.0)
        self.assertEqual([b.col for b in bp.bars], [0, 4, 12, 16])
        self.assertEqual([b.width for b in bp.bars], [4, 4, 4, 4])
        self.assertEqual([b.height for b in bp.bars], [4, 2, 8, 6])
        self.assertEqual([b.name for b in bp.bars], ["4", "2", "8", "6"])

    def test_commit_default_resize(self) -> None:
        bp = BarPlot(20, 8)
        BarGrouper(bp).add([4, 8], "a").add([2, 6], "b").commit()
        self.assertEqual([b.height for b in bp.bars], [3, 1, 6, 4])

    def test_commit_without_series_is_a_no_op(self) -> None:
        bp = BarPlot(5, 5)
        self.assertIs(BarGrouper(bp).commit(), bp)
        self.assertEqual(bp.bars, ())

    def test_group_names(self) -> None:
        bp = BarPlot(20, 8)
        grouper = BarGrouper(bp).add([4, 8], "a").add([2, 6], "b").group_names(True, ["g1", "g2"])
        grouper.commit()
        self.assertEqual(bp.at(3, 7).value, "g")
        self.assertEqual(bp.at(4, 7).value, "1")

    def test_group_names_off(self) -> None:
        bp = BarPlot(20, 8)
        BarGrouper(bp).add([4, 8], "a").group_names(False, ["g1", "g2"]).commit()
        self.assertTrue(bp.at(3, 7).is_blank())


if __name__ == "__main__":
    unittest.main()
