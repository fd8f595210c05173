from __future__ import annotations

from typing import Sequence

from luvatrix_chart.entry import RGBA, Entry
from luvatrix_chart.interaction import SELECTION_EPSILON
from luvatrix_chart.surface import Paint, Point, PointMode, Rect, Size, Surface


SELECTED_POINT_GROWTH = 20.0
LABEL_TRUNCATION_STEPS = (3, 1)


def draw_point(surface: Surface, point: Point, color: RGBA, size: float, mode: PointMode) -> None:
    if mode == "none" or size <= 0:
        return
    paint = Paint(color=color, style="fill")
    if mode == "circle":
        surface.draw_circle(point, size / 2, paint)
    elif mode == "square":
        half = size / 2
        surface.draw_rect(Rect(point.x - half, point.y - half, point.x + half, point.y + half), paint)
    else:
        raise ValueError(f"unsupported point mode: {mode}")


def draw_points(
    surface: Surface,
    entries: Sequence[Entry],
    points: Sequence[Point],
    *,
    point_size: float,
    point_mode: PointMode,
    selected_point: Point | None = None,
) -> None:
    if not points or point_mode == "none":
        return
    for entry, point in zip(entries, points):
        size = point_size
        if selected_point is not None and point.distance_to(selected_point) < SELECTION_EPSILON:
            size = point_size + SELECTED_POINT_GROWTH
        draw_point(surface, point, entry.color, size, point_mode)  # type: ignore[arg-type]


def fit_label(surface: Surface, text: str, paint: Paint, max_width: float) -> tuple[str, Rect]:
    """Shorten `text` to 3 then 1 characters while it is wider than `max_width`."""

    bounds = surface.measure_text(text, paint)
    for length in LABEL_TRUNCATION_STEPS:
        if bounds.width <= max_width:
            break
        text = text[:length]
        bounds = surface.measure_text(text, paint)
    return text, bounds


def draw_labels(
    surface: Surface,
    entries: Sequence[Entry],
    points: Sequence[Point],
    item_size: Size,
    height: float,
    *,
    margin: float,
    label_text_size: float,
) -> None:
    baseline = height - (margin + label_text_size / 2)
    for entry, point in zip(entries, points):
        if not entry.has_label:
            continue
        paint = Paint(color=entry.text_color, text_size=label_text_size)  # type: ignore[arg-type]
        text, bounds = fit_label(surface, entry.label, paint, item_size.width)
        surface.draw_text(text, point.x - bounds.width / 2, baseline - bounds.height, paint)


def draw_value_labels(
    surface: Surface,
    entries: Sequence[Entry],
    points: Sequence[Point],
    *,
    margin: float,
    label_text_size: float,
) -> None:
    # Rotated a quarter turn clockwise; the text height becomes the box width.
    for entry, point in zip(entries, points):
        if not entry.has_value_label:
            continue
        paint = Paint(color=entry.color, text_size=label_text_size, bold=True)  # type: ignore[arg-type]
        bounds = surface.measure_text(entry.value_label, paint)
        surface.draw_text(entry.value_label, point.x - bounds.height / 2, margin, paint, rotate_deg=90)
