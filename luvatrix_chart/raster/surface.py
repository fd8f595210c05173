from __future__ import annotations

import math

import numpy as np
from PIL import Image

from luvatrix_chart.entry import RGBA
from luvatrix_chart.raster.canvas import ColumnColors, fill_circle, fill_polygon, fill_rect, new_canvas
from luvatrix_chart.raster.draw_lines import draw_polyline
from luvatrix_chart.raster.draw_text import DEFAULT_FONT_FAMILY, draw_text, text_size
from luvatrix_chart.surface import DEFAULT_CUBIC_STEPS, Paint, Path, Point, Rect


BOLD_EMBOLDEN_PX = 2
CIRCLE_OUTLINE_SEGMENTS = 48


class RasterSurface:
    """`Surface` backed by an `(H, W, 4)` uint8 numpy canvas."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: RGBA = (0, 0, 0, 0),
        font_family: str = DEFAULT_FONT_FAMILY,
        cubic_steps: int = DEFAULT_CUBIC_STEPS,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface width/height must be > 0")
        self.canvas = new_canvas(int(width), int(height), color=background)
        self.font_family = font_family
        self.cubic_steps = cubic_steps

    @property
    def width(self) -> int:
        return int(self.canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self.canvas.shape[0])

    def clear(self, color: RGBA) -> None:
        self.canvas[:, :] = np.asarray(color, dtype=np.uint8)

    def draw_rect(self, rect: Rect, paint: Paint) -> None:
        if paint.style == "stroke":
            corners = [
                (rect.left, rect.top),
                (rect.right, rect.top),
                (rect.right, rect.bottom),
                (rect.left, rect.bottom),
            ]
            draw_polyline(
                self.canvas,
                corners,
                paint.color,
                width=paint.stroke_width,
                closed=True,
                column_colors=_column_colors(paint),
            )
            return
        fill_rect(
            self.canvas,
            rect.left,
            rect.top,
            rect.right,
            rect.bottom,
            paint.color,
            column_colors=_column_colors(paint),
        )

    def draw_circle(self, center: Point, radius: float, paint: Paint) -> None:
        if paint.style == "stroke":
            angles = np.linspace(0.0, 2.0 * math.pi, CIRCLE_OUTLINE_SEGMENTS, endpoint=False)
            outline = list(zip((center.x + radius * np.cos(angles)).tolist(), (center.y + radius * np.sin(angles)).tolist()))
            draw_polyline(self.canvas, outline, paint.color, width=paint.stroke_width, closed=True)
            return
        fill_circle(self.canvas, center.x, center.y, radius, paint.color)

    def draw_path(self, path: Path, paint: Paint) -> None:
        column_colors = _column_colors(paint)
        for vertices, closed in path.flatten(self.cubic_steps):
            if paint.style == "fill":
                fill_polygon(self.canvas, vertices, paint.color, column_colors=column_colors)
            else:
                draw_polyline(
                    self.canvas,
                    vertices,
                    paint.color,
                    width=paint.stroke_width,
                    closed=closed,
                    column_colors=column_colors,
                )

    def measure_text(self, text: str, paint: Paint) -> Rect:
        if not text:
            return Rect.empty()
        w, h = text_size(
            text,
            font_family=self.font_family,
            font_size_px=paint.text_size,
            embolden_px=BOLD_EMBOLDEN_PX if paint.bold else 1,
        )
        return Rect(0.0, -float(h), float(w), 0.0)

    def draw_text(self, text: str, x: float, y: float, paint: Paint, *, rotate_deg: int = 0) -> None:
        # Surface rotation is clockwise on a y-down canvas; the raster helper turns counter-clockwise.
        draw_text(
            self.canvas,
            int(round(x)),
            int(round(y)),
            text,
            paint.color,
            font_family=self.font_family,
            font_size_px=paint.text_size,
            embolden_px=BOLD_EMBOLDEN_PX if paint.bold else 1,
            rotate_deg=-rotate_deg,
        )

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.canvas))


def _column_colors(paint: Paint) -> ColumnColors | None:
    if paint.shader is None:
        return None
    return paint.shader.colors_at
