from __future__ import annotations

from dataclasses import dataclass

from luvatrix_chart.entry import Entry, with_alpha
from luvatrix_chart.layout import SeriesLayout
from luvatrix_chart.point_chart import PointChart
from luvatrix_chart.surface import Paint, Point, Rect, Size, Surface


MIN_BAR_HEIGHT = 4.0
DEFAULT_BAR_AREA_ALPHA = 32


def bar_rect(point: Point, item_size: Size, origin: float, header_height: float) -> Rect:
    """Bar from the zero line to the value, at least `MIN_BAR_HEIGHT` tall and inside the plot area."""

    x = point.x - item_size.width / 2
    top = min(origin, point.y)
    height = abs(origin - point.y)
    if height < MIN_BAR_HEIGHT:
        height = MIN_BAR_HEIGHT
        bottom_bound = header_height + item_size.height
        if top + height > bottom_bound:
            top = bottom_bound - height
    return Rect.from_xywh(x, top, item_size.width, height)


def bar_area_rect(entry: Entry, point: Point, item_size: Size, header_height: float) -> Rect:
    edge = header_height if entry.value > 0 else header_height + item_size.height
    top = min(edge, point.y)
    return Rect.from_xywh(point.x - item_size.width / 2, top, item_size.width, abs(edge - point.y))


@dataclass
class BarChart(PointChart):
    """Bars growing from the zero line, over an optional full-column tint."""

    point_size: float = 0.0
    bar_area_alpha: int = DEFAULT_BAR_AREA_ALPHA

    def set_bar_area_alpha(self, alpha: int) -> "BarChart":
        self.bar_area_alpha = int(alpha)
        self._changed()
        return self

    def draw_content(self, surface: Surface, width: float, height: float) -> list[SeriesLayout]:
        layouts: list[SeriesLayout] = []
        for layout in self.iter_layouts(surface, width, height):
            self.draw_bar_areas(surface, layout)
            self.draw_bars(surface, layout)
            self.draw_points(surface, layout)
            self.draw_labels(surface, layout, height)
            self.draw_value_labels(surface, layout)
            layouts.append(layout)
        return layouts

    def draw_bars(self, surface: Surface, layout: SeriesLayout) -> None:
        for entry, point in zip(layout.entries, layout.points):
            rect = bar_rect(point, layout.item_size, layout.origin, layout.header_height)
            surface.draw_rect(rect, Paint(color=entry.color, style="fill"))  # type: ignore[arg-type]

    def draw_bar_areas(self, surface: Surface, layout: SeriesLayout) -> None:
        if self.bar_area_alpha <= 0:
            return
        for entry, point in zip(layout.entries, layout.points):
            rect = bar_area_rect(entry, point, layout.item_size, layout.header_height)
            color = with_alpha(entry.color, self.bar_area_alpha)  # type: ignore[arg-type]
            surface.draw_rect(rect, Paint(color=color, style="fill"))
