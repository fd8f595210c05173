from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
from typing import Callable, Iterator, Sequence

from luvatrix_chart.entry import RGBA, ColorLike, Entry, parse_color
from luvatrix_chart.interaction import InteractionState
from luvatrix_chart.layout import (
    SeriesLayout,
    ValueRange,
    calculate_footer_height as _footer_height,
    calculate_header_height as _header_height,
    calculate_item_size as _item_size,
    calculate_points as _points,
    calculate_y_origin as _y_origin,
    compute_value_range,
    measure_value_labels as _measure_value_labels,
)
from luvatrix_chart.surface import Point, Rect, Size, Surface

LOGGER = logging.getLogger(__name__)

DEFAULT_MARGIN = 20.0
DEFAULT_LABEL_TEXT_SIZE = 16.0
DEFAULT_BACKGROUND: RGBA = (255, 255, 255, 255)


@dataclass
class Chart(ABC):
    """Base chart: owns the series, derives the value range and drives a draw.

    Subclasses implement `draw_content` and return the layouts they drew; the
    points of those layouts become the hit-test geometry for
    `select_nearest_point`.
    """

    series: list[list[Entry]] = field(default_factory=list)
    margin: float = DEFAULT_MARGIN
    label_text_size: float = DEFAULT_LABEL_TEXT_SIZE
    background_color: RGBA = DEFAULT_BACKGROUND
    min_value: float | None = None
    max_value: float | None = None
    on_change: Callable[["Chart"], None] | None = None
    interaction: InteractionState = field(default_factory=InteractionState)

    def __post_init__(self) -> None:
        self.background_color = parse_color(self.background_color)

    # configuration

    def set_series(self, series: Sequence[Sequence[Entry]]) -> "Chart":
        self.series = [list(entries) for entries in series]
        return self._changed()

    def set_entries(self, entries: Sequence[Entry]) -> "Chart":
        return self.set_series([entries])

    def add_series(self, entries: Sequence[Entry]) -> "Chart":
        self.series.append(list(entries))
        return self._changed()

    def set_margin(self, margin: float) -> "Chart":
        self.margin = float(margin)
        return self._changed()

    def set_label_text_size(self, size: float) -> "Chart":
        self.label_text_size = float(size)
        return self._changed()

    def set_background_color(self, color: ColorLike) -> "Chart":
        self.background_color = parse_color(color)
        return self._changed()

    def set_value_range(self, *, min_value: float | None = None, max_value: float | None = None) -> "Chart":
        self.min_value = min_value
        self.max_value = max_value
        return self._changed()

    def _changed(self) -> "Chart":
        if self.on_change is not None:
            self.on_change(self)
        return self

    # value range

    def value_range(self) -> ValueRange:
        return compute_value_range(self.series, min_override=self.min_value, max_override=self.max_value)

    @property
    def effective_min_value(self) -> float:
        return self.value_range().min_value

    @property
    def effective_max_value(self) -> float:
        return self.value_range().max_value

    def has_data(self) -> bool:
        return any(len(entries) > 0 for entries in self.series)

    # shared layout helpers

    def measure_value_labels(self, surface: Surface, series: Sequence[Entry]) -> list[Rect]:
        return _measure_value_labels(surface, series, label_text_size=self.label_text_size)

    def calculate_footer_height(self, series: Sequence[Entry]) -> float:
        return _footer_height(series, margin=self.margin, label_text_size=self.label_text_size)

    def calculate_header_height(self, label_boxes: Sequence[Rect]) -> float:
        return _header_height(label_boxes, margin=self.margin)

    def calculate_item_size(
        self,
        series: Sequence[Entry],
        width: float,
        height: float,
        footer_height: float,
        header_height: float,
    ) -> Size:
        return _item_size(
            len(series),
            width,
            height,
            margin=self.margin,
            footer_height=footer_height,
            header_height=header_height,
        )

    def calculate_y_origin(self, item_height: float, header_height: float) -> float:
        return _y_origin(self.value_range(), item_height, header_height)

    def calculate_points(self, item_size: Size, header_height: float, series: Sequence[Entry]) -> list[Point]:
        return _points(self.value_range(), item_size, header_height, series, margin=self.margin)

    def iter_layouts(self, surface: Surface, width: float, height: float) -> Iterator[SeriesLayout]:
        for index, entries in enumerate(self.series):
            if not entries:
                LOGGER.debug("skipping empty series %d", index)
                continue
            yield self.layout_series(surface, entries, width, height)

    def layout_series(
        self,
        surface: Surface,
        series: Sequence[Entry],
        width: float,
        height: float,
    ) -> SeriesLayout:
        entries = tuple(series)
        boxes = self.measure_value_labels(surface, entries)
        footer_height = self.calculate_footer_height(entries)
        header_height = self.calculate_header_height(boxes)
        item_size = self.calculate_item_size(entries, width, height, footer_height, header_height)
        return SeriesLayout(
            entries=entries,
            value_label_boxes=tuple(boxes),
            footer_height=footer_height,
            header_height=header_height,
            item_size=item_size,
            origin=self.calculate_y_origin(item_size.height, header_height),
            points=tuple(self.calculate_points(item_size, header_height, entries)),
        )

    # drawing

    def draw(self, surface: Surface, width: float, height: float) -> None:
        if not self.has_data():
            self.interaction.commit(())
            return
        surface.clear(self.background_color)
        layouts = self.draw_content(surface, width, height)
        self.interaction.commit(point for layout in layouts for point in layout.points)

    @abstractmethod
    def draw_content(self, surface: Surface, width: float, height: float) -> list[SeriesLayout]:
        raise NotImplementedError

    # interaction

    @property
    def points(self) -> tuple[Point, ...]:
        return self.interaction.points

    @property
    def selected_point(self) -> Point | None:
        return self.interaction.selected_point

    def select_nearest_point(self, tap: Point | tuple[float, float]) -> Point | None:
        if not isinstance(tap, Point):
            tap = Point(float(tap[0]), float(tap[1]))
        return self.interaction.select_nearest(tap)

    def clear_selection(self) -> "Chart":
        self.interaction.clear_selection()
        return self._changed()
