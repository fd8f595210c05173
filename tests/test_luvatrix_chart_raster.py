import unittest

import numpy as np

from luvatrix_chart import LinearGradient, Paint, Path, Point, RasterSurface, Rect
from luvatrix_chart.raster.canvas import fill_polygon, new_canvas
from luvatrix_chart.raster.draw_lines import draw_polyline


class RasterPrimitiveTests(unittest.TestCase):
    def test_fill_rect_covers_pixel_centers_inside(self) -> None:
        surface = RasterSurface(20, 20)
        surface.draw_rect(Rect(2.0, 3.0, 6.0, 5.0), Paint(color=(255, 0, 0, 255)))
        alpha = surface.canvas[:, :, 3]
        ys, xs = np.nonzero(alpha)
        self.assertEqual((xs.min(), xs.max(), ys.min(), ys.max()), (2, 5, 3, 4))
        self.assertEqual(tuple(surface.canvas[3, 2]), (255, 0, 0, 255))

    def test_translucent_fill_blends_over_background(self) -> None:
        surface = RasterSurface(4, 4, background=(255, 255, 255, 255))
        surface.draw_rect(Rect(0.0, 0.0, 4.0, 4.0), Paint(color=(0, 0, 0, 128)))
        value = int(surface.canvas[1, 1, 0])
        self.assertTrue(120 <= value <= 135)

    def test_circle_is_filled_around_center(self) -> None:
        surface = RasterSurface(30, 30)
        surface.draw_circle(Point(15.0, 15.0), 5.0, Paint(color=(0, 255, 0, 255)))
        self.assertEqual(int(surface.canvas[15, 15, 1]), 255)
        self.assertEqual(int(surface.canvas[15, 25, 3]), 0)

    def test_gradient_fill_varies_across_columns(self) -> None:
        surface = RasterSurface(100, 20)
        gradient = LinearGradient(stops=((0.0, (255, 0, 0, 255)), (100.0, (0, 0, 255, 255))))
        path = Path().move_to(Point(0.0, 0.0)).line_to(Point(100.0, 0.0)).line_to(Point(100.0, 20.0))
        path.line_to(Point(0.0, 20.0)).close()
        surface.draw_path(path, Paint(style="fill", shader=gradient))
        left = surface.canvas[10, 2]
        right = surface.canvas[10, 97]
        self.assertGreater(int(left[0]), int(left[2]))
        self.assertGreater(int(right[2]), int(right[0]))

    def test_stroked_path_draws_thick_line(self) -> None:
        surface = RasterSurface(50, 50)
        path = Path().move_to(Point(5.0, 25.0)).line_to(Point(45.0, 25.0))
        surface.draw_path(path, Paint(color=(255, 255, 255, 255), style="stroke", stroke_width=3.0))
        column = surface.canvas[:, 20, 3]
        self.assertEqual(int(np.count_nonzero(column)), 3)

    def test_polyline_blends_overlaps_once(self) -> None:
        canvas = new_canvas(10, 10, color=(255, 255, 255, 255))
        draw_polyline(canvas, [(1.0, 5.0), (8.0, 5.0), (1.0, 5.0)], (0, 0, 0, 128), width=1.0)
        values = {int(v) for v in canvas[5, 1:9, 0]}
        self.assertEqual(len(values), 1)

    def test_polygon_fill_ignores_degenerate_input(self) -> None:
        canvas = new_canvas(10, 10)
        fill_polygon(canvas, [(1.0, 1.0), (5.0, 5.0)], (255, 0, 0, 255))
        self.assertFalse(np.any(canvas[:, :, 3]))

    def test_invalid_size_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RasterSurface(0, 10)


class RasterTextTests(unittest.TestCase):
    def test_text_measurement_grows_with_length(self) -> None:
        surface = RasterSurface(10, 10)
        paint = Paint(text_size=16.0)
        short = surface.measure_text("W", paint)
        long = surface.measure_text("WWWW", paint)
        self.assertGreater(long.width, short.width)
        self.assertGreater(short.height, 0)
        self.assertTrue(surface.measure_text("", paint).is_empty)

    def test_bold_text_measures_wider(self) -> None:
        surface = RasterSurface(10, 10)
        regular = surface.measure_text("value", Paint(text_size=16.0))
        bold = surface.measure_text("value", Paint(text_size=16.0, bold=True))
        self.assertGreater(bold.width, regular.width)

    def test_rotated_text_runs_vertically(self) -> None:
        surface = RasterSurface(80, 200)
        paint = Paint(color=(255, 255, 255, 255), text_size=16.0)
        surface.draw_text("1234567", 10.0, 10.0, paint, rotate_deg=90)
        ys, xs = np.nonzero(surface.canvas[:, :, 3])
        self.assertGreater(ys.size, 0)
        self.assertGreater(ys.max() - ys.min(), xs.max() - xs.min())

    def test_horizontal_text_starts_at_requested_corner(self) -> None:
        surface = RasterSurface(120, 40)
        paint = Paint(color=(255, 255, 255, 255), text_size=16.0)
        surface.draw_text("label", 30.0, 10.0, paint)
        ys, xs = np.nonzero(surface.canvas[:, :, 3])
        self.assertGreaterEqual(int(xs.min()), 30)
        self.assertGreaterEqual(int(ys.min()), 10)


if __name__ == "__main__":
    unittest.main()
