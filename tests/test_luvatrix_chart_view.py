from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image

from luvatrix_chart import BarChart, ChartView, Entry, LineChart, PointChart


def _entries() -> list[Entry]:
    return [
        Entry(212, label="UWP", value_label="212", color="#266489"),
        Entry(248, label="Android", value_label="248", color="#68B9C0"),
        Entry(-128, label="iOS", value_label="-128", color="#90D585"),
        Entry(514, label="Forms", value_label="514", color="#F3C151"),
    ]


class ChartViewTests(unittest.TestCase):
    def test_empty_view_renders_transparent_frame(self) -> None:
        view = ChartView(width=64, height=48)
        frame = view.render()
        self.assertEqual(frame.shape, (48, 64, 4))
        self.assertFalse(np.any(frame[:, :, 3]))

    def test_each_chart_type_renders_deterministically(self) -> None:
        for chart in (PointChart(), BarChart(), LineChart()):
            with self.subTest(chart=type(chart).__name__):
                chart.set_entries(_entries())
                view = ChartView(chart, width=320, height=240)
                first = view.render()
                second = view.render()
                self.assertTrue(np.array_equal(first, second))
                self.assertEqual(tuple(first[0, 0]), (255, 255, 255, 255))
                self.assertGreater(int(np.count_nonzero(np.any(first[:, :, :3] != 255, axis=2))), 0)

    def test_frame_is_cached_until_invalidated(self) -> None:
        chart = LineChart(series=[_entries()])
        view = ChartView(chart, width=200, height=150)
        view.frame()
        self.assertFalse(view.dirty.dirty)
        view.frame()
        self.assertFalse(view.dirty.dirty)
        chart.set_line_mode("straight")
        self.assertTrue(view.dirty.dirty)
        self.assertEqual(view.dirty.reason, "config")

    def test_tap_selects_nearest_rendered_point(self) -> None:
        chart = LineChart(series=[_entries()])
        view = ChartView(chart, width=400, height=300)
        view.render()
        target = chart.points[3]
        selected = view.on_tap(target.x + 3.0, target.y - 2.0)
        self.assertEqual(selected, target)
        self.assertTrue(view.dirty.dirty)
        self.assertEqual(view.dirty.reason, "tap")

    def test_resize_invalidates_and_changes_frame_shape(self) -> None:
        view = ChartView(BarChart(series=[_entries()]), width=100, height=80)
        view.frame()
        view.resize(160, 90)
        self.assertTrue(view.dirty.dirty)
        self.assertEqual(view.frame().shape, (90, 160, 4))
        with self.assertRaises(ValueError):
            view.resize(0, 10)

    def test_replacing_chart_detaches_previous_callback(self) -> None:
        old = PointChart(series=[_entries()])
        view = ChartView(old)
        view.chart = LineChart(series=[_entries()])
        self.assertIsNone(old.on_change)

    def test_save_png_round_trips_frame(self) -> None:
        view = ChartView(BarChart(series=[_entries()]), width=120, height=90)
        with tempfile.TemporaryDirectory() as tmp:
            out = view.save_png(Path(tmp) / "charts" / "bar.png")
            with Image.open(out) as image:
                self.assertEqual(image.size, (120, 90))
                self.assertEqual(image.mode, "RGBA")
                saved = np.asarray(image)
            self.assertTrue(np.array_equal(saved, view.frame()))
            self.assertFalse(view.dirty.dirty)


if __name__ == "__main__":
    unittest.main()
