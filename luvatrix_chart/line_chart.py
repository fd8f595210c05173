from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, get_args

from luvatrix_chart.entry import Entry, with_alpha
from luvatrix_chart.layout import SeriesLayout
from luvatrix_chart.point_chart import PointChart
from luvatrix_chart.surface import LinearGradient, Paint, Path, Point, Surface


LineMode = Literal["none", "straight", "spline"]
LINE_MODES: tuple[str, ...] = get_args(LineMode)

SPLINE_CONTROL_RATIO = 0.8
DEFAULT_LINE_AREA_ALPHA = 32


def cubic_controls(point: Point, next_point: Point, item_width: float) -> tuple[Point, Point]:
    """Horizontal control points for the cubic segment from `point` to `next_point`."""

    offset = item_width * SPLINE_CONTROL_RATIO
    return point.offset(offset, 0.0), next_point.offset(-offset, 0.0)


def _extend_path(path: Path, points: Sequence[Point], item_width: float, mode: LineMode) -> None:
    if mode == "spline":
        for point, next_point in zip(points, points[1:]):
            control, next_control = cubic_controls(point, next_point, item_width)
            path.cubic_to(control, next_control, next_point)
        return
    for point in points[1:]:
        path.line_to(point)


def build_line_path(points: Sequence[Point], item_width: float, mode: LineMode) -> Path | None:
    if len(points) < 2 or mode == "none":
        return None
    path = Path().move_to(points[0])
    _extend_path(path, points, item_width, mode)
    return path


def build_area_path(points: Sequence[Point], item_width: float, mode: LineMode, origin: float) -> Path | None:
    """Region between the line and the zero line, closed at the first and last x."""

    if len(points) < 2:
        return None
    path = Path().move_to(Point(points[0].x, origin)).line_to(points[0])
    _extend_path(path, points, item_width, "spline" if mode == "spline" else "straight")
    path.line_to(Point(points[-1].x, origin))
    return path.close()


def line_gradient(entries: Sequence[Entry], points: Sequence[Point], alpha: int = 255) -> LinearGradient:
    return LinearGradient(
        stops=tuple((point.x, with_alpha(entry.color, alpha)) for entry, point in zip(entries, points))  # type: ignore[arg-type]
    )


@dataclass
class LineChart(PointChart):
    """Straight or spline line through the points, over a gradient-filled area."""

    point_size: float = 10.0
    line_size: float = 3.0
    line_mode: LineMode = "spline"
    line_area_alpha: int = DEFAULT_LINE_AREA_ALPHA

    def set_line_size(self, size: float) -> "LineChart":
        self.line_size = float(size)
        self._changed()
        return self

    def set_line_mode(self, mode: LineMode) -> "LineChart":
        if mode not in LINE_MODES:
            raise ValueError(f"unsupported line mode: {mode}")
        self.line_mode = mode
        self._changed()
        return self

    def set_line_area_alpha(self, alpha: int) -> "LineChart":
        self.line_area_alpha = int(alpha)
        self._changed()
        return self

    def draw_content(self, surface: Surface, width: float, height: float) -> list[SeriesLayout]:
        layouts: list[SeriesLayout] = []
        for layout in self.iter_layouts(surface, width, height):
            self.draw_area(surface, layout)
            self.draw_line(surface, layout)
            self.draw_points(surface, layout)
            self.draw_labels(surface, layout, height)
            self.draw_value_labels(surface, layout)
            layouts.append(layout)
        return layouts

    def draw_line(self, surface: Surface, layout: SeriesLayout) -> None:
        path = build_line_path(layout.points, layout.item_size.width, self.line_mode)
        if path is None:
            return
        paint = Paint(
            style="stroke",
            stroke_width=self.line_size,
            shader=line_gradient(layout.entries, layout.points),
        )
        surface.draw_path(path, paint)

    def draw_area(self, surface: Surface, layout: SeriesLayout) -> None:
        if self.line_area_alpha <= 0:
            return
        path = build_area_path(layout.points, layout.item_size.width, self.line_mode, layout.origin)
        if path is None:
            return
        paint = Paint(style="fill", shader=line_gradient(layout.entries, layout.points, self.line_area_alpha))
        surface.draw_path(path, paint)
