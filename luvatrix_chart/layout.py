from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Sequence

from luvatrix_chart.entry import Entry
from luvatrix_chart.surface import Paint, Point, Rect, Size, Surface

LOGGER = logging.getLogger(__name__)

# Substituted for max - min when every value is equal, so the mapping stays finite.
ZERO_RANGE_SPAN = 1.0


@dataclass(frozen=True)
class ValueRange:
    min_value: float
    max_value: float

    @property
    def span(self) -> float:
        span = self.max_value - self.min_value
        if span <= 0:
            return ZERO_RANGE_SPAN
        return span


@dataclass(frozen=True)
class SeriesLayout:
    """Geometry computed for one series during a single draw."""

    entries: tuple[Entry, ...]
    value_label_boxes: tuple[Rect, ...]
    footer_height: float
    header_height: float
    item_size: Size
    origin: float
    points: tuple[Point, ...]


def compute_value_range(
    series: Iterable[Sequence[Entry]],
    *,
    min_override: float | None = None,
    max_override: float | None = None,
) -> ValueRange:
    values = [entry.value for entries in series for entry in entries]
    computed_min = min(values) if values else 0.0
    computed_max = max(values) if values else 0.0
    lo = float(min_override) if min_override is not None else computed_min
    hi = float(max_override) if max_override is not None else computed_max
    if hi < lo:
        hi = lo
    if hi == lo and values:
        LOGGER.debug("zero value range at %s; mapping with unit span", lo)
    return ValueRange(min_value=lo, max_value=hi)


def measure_value_labels(surface: Surface, series: Sequence[Entry], *, label_text_size: float) -> list[Rect]:
    paint = Paint(text_size=label_text_size)
    boxes: list[Rect] = []
    for entry in series:
        if not entry.has_value_label:
            boxes.append(Rect.empty())
            continue
        boxes.append(surface.measure_text(entry.value_label, paint))
    return boxes


def calculate_footer_height(series: Sequence[Entry], *, margin: float, label_text_size: float) -> float:
    result = margin
    if any(entry.has_label for entry in series):
        result += label_text_size + margin
    return result


def calculate_header_height(label_boxes: Sequence[Rect], *, margin: float) -> float:
    result = margin
    if label_boxes:
        max_width = max(box.width for box in label_boxes)
        if max_width > 0:
            result += max_width + margin
    return result


def calculate_item_size(
    count: int,
    width: float,
    height: float,
    *,
    margin: float,
    footer_height: float,
    header_height: float,
) -> Size:
    """Column width and plot-area height; the column width is 0 for an empty series."""

    item_height = height - margin - footer_height - header_height
    if count <= 0:
        return Size(0.0, item_height)
    return Size((width - (count + 1) * margin) / count, item_height)


def calculate_y_origin(value_range: ValueRange, item_height: float, header_height: float) -> float:
    if value_range.max_value <= 0:
        return header_height
    if value_range.min_value > 0:
        return header_height + item_height
    return header_height + (value_range.max_value / value_range.span) * item_height


def calculate_points(
    value_range: ValueRange,
    item_size: Size,
    header_height: float,
    series: Sequence[Entry],
    *,
    margin: float,
) -> list[Point]:
    points: list[Point] = []
    for i, entry in enumerate(series):
        x = margin + item_size.width / 2 + i * (item_size.width + margin)
        y = header_height + ((value_range.max_value - entry.value) / value_range.span) * item_size.height
        points.append(Point(x, y))
    return points

