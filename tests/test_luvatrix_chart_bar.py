import unittest

from luvatrix_chart import BarChart, Entry, Point, RecordingSurface
from luvatrix_chart.bar_chart import MIN_BAR_HEIGHT, bar_area_rect, bar_rect
from luvatrix_chart.surface import Size


class BarGeometryTests(unittest.TestCase):
    def test_bar_grows_from_zero_line_to_value(self) -> None:
        rect = bar_rect(Point(50.0, 100.0), Size(40.0, 200.0), 150.0, 20.0)
        self.assertEqual((rect.left, rect.top, rect.right, rect.bottom), (30.0, 100.0, 70.0, 150.0))

    def test_negative_bar_grows_downward(self) -> None:
        rect = bar_rect(Point(50.0, 190.0), Size(40.0, 200.0), 150.0, 20.0)
        self.assertEqual((rect.top, rect.bottom), (150.0, 190.0))

    def test_short_bar_is_clamped_to_minimum_height(self) -> None:
        rect = bar_rect(Point(50.0, 149.0), Size(40.0, 200.0), 150.0, 20.0)
        self.assertEqual(rect.height, MIN_BAR_HEIGHT)
        self.assertEqual(rect.top, 149.0)

    def test_short_bar_at_bottom_is_reanchored_inside_plot(self) -> None:
        rect = bar_rect(Point(50.0, 219.0), Size(40.0, 200.0), 220.0, 20.0)
        self.assertEqual(rect.height, MIN_BAR_HEIGHT)
        self.assertEqual(rect.bottom, 220.0)
        self.assertEqual(rect.top, 216.0)

    def test_bar_area_spans_from_top_for_positive_values(self) -> None:
        rect = bar_area_rect(Entry(5.0), Point(50.0, 100.0), Size(40.0, 200.0), 20.0)
        self.assertEqual((rect.top, rect.bottom), (20.0, 100.0))

    def test_bar_area_spans_from_bottom_for_non_positive_values(self) -> None:
        rect = bar_area_rect(Entry(-5.0), Point(50.0, 180.0), Size(40.0, 200.0), 20.0)
        self.assertEqual((rect.top, rect.bottom), (180.0, 220.0))


class BarChartDrawTests(unittest.TestCase):
    def test_bar_chart_hides_markers_by_default(self) -> None:
        self.assertEqual(BarChart().point_size, 0.0)
        surface = RecordingSurface()
        BarChart(series=[[Entry(1.0), Entry(2.0)]]).draw(surface, 200, 200)
        self.assertEqual(surface.of_kind("circle"), [])

    def test_areas_are_drawn_before_bars(self) -> None:
        surface = RecordingSurface()
        chart = BarChart(series=[[Entry(1.0, color="#336699"), Entry(2.0, color="#336699")]])
        chart.draw(surface, 200, 200)
        rects = surface.of_kind("rect")
        self.assertEqual(len(rects), 4)
        self.assertEqual([r.args["paint"].color[3] for r in rects], [32, 32, 255, 255])
        self.assertEqual(rects[0].args["paint"].color[:3], (0x33, 0x66, 0x99))

    def test_zero_area_alpha_skips_areas(self) -> None:
        surface = RecordingSurface()
        chart = BarChart(series=[[Entry(1.0), Entry(2.0)]]).set_bar_area_alpha(0)
        chart.draw(surface, 200, 200)
        self.assertEqual(len(surface.of_kind("rect")), 2)

    def test_minimum_height_bars_stay_inside_plot_area(self) -> None:
        surface = RecordingSurface()
        chart = BarChart(series=[[Entry(0.01), Entry(5.0), Entry(10.0)]], bar_area_alpha=0)
        chart.draw(surface, 200, 300)
        header = 20.0
        item_height = 300.0 - 20.0 - 20.0 - 20.0
        bars = [cmd.args["rect"] for cmd in surface.of_kind("rect")]
        self.assertEqual(len(bars), 3)
        self.assertEqual(bars[0].height, MIN_BAR_HEIGHT)
        self.assertEqual(bars[0].bottom, header + item_height)
        for rect in bars:
            self.assertGreaterEqual(rect.top, header)
            self.assertLessEqual(rect.bottom, header + item_height)
            self.assertAlmostEqual(rect.width, 40.0)

    def test_mixed_values_share_the_zero_line(self) -> None:
        surface = RecordingSurface()
        chart = BarChart(series=[[Entry(10.0), Entry(-5.0)]], bar_area_alpha=0)
        chart.draw(surface, 200, 300)
        up, down = [cmd.args["rect"] for cmd in surface.of_kind("rect")]
        self.assertAlmostEqual(up.bottom, down.top)


if __name__ == "__main__":
    unittest.main()
