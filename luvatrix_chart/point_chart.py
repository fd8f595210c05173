from __future__ import annotations

from dataclasses import dataclass
from typing import get_args

from luvatrix_chart.chart import Chart
from luvatrix_chart.decorations import draw_labels, draw_points, draw_value_labels
from luvatrix_chart.layout import SeriesLayout
from luvatrix_chart.surface import PointMode, Surface


POINT_MODES: tuple[str, ...] = get_args(PointMode)


@dataclass
class PointChart(Chart):
    """Plain point layout: one marker per entry plus axis and value labels."""

    point_size: float = 14.0
    point_mode: PointMode = "circle"

    def set_point_size(self, size: float) -> "PointChart":
        self.point_size = float(size)
        self._changed()
        return self

    def set_point_mode(self, mode: PointMode) -> "PointChart":
        if mode not in POINT_MODES:
            raise ValueError(f"unsupported point mode: {mode}")
        self.point_mode = mode
        self._changed()
        return self

    def draw_content(self, surface: Surface, width: float, height: float) -> list[SeriesLayout]:
        layouts: list[SeriesLayout] = []
        for layout in self.iter_layouts(surface, width, height):
            self.draw_points(surface, layout)
            self.draw_labels(surface, layout, height)
            self.draw_value_labels(surface, layout)
            layouts.append(layout)
        return layouts

    def draw_points(self, surface: Surface, layout: SeriesLayout) -> None:
        draw_points(
            surface,
            layout.entries,
            layout.points,
            point_size=self.point_size,
            point_mode=self.point_mode,
            selected_point=self.selected_point,
        )

    def draw_labels(self, surface: Surface, layout: SeriesLayout, height: float) -> None:
        draw_labels(
            surface,
            layout.entries,
            layout.points,
            layout.item_size,
            height,
            margin=self.margin,
            label_text_size=self.label_text_size,
        )

    def draw_value_labels(self, surface: Surface, layout: SeriesLayout) -> None:
        draw_value_labels(
            surface,
            layout.entries,
            layout.points,
            margin=self.margin,
            label_text_size=self.label_text_size,
        )
