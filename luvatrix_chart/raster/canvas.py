from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np


RGBA = tuple[int, int, int, int]
# Maps pixel-center x coordinates to an (n, 4) uint8 color array.
ColumnColors = Callable[[np.ndarray], np.ndarray]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def fill_rect(
    dst: np.ndarray,
    left: float,
    top: float,
    right: float,
    bottom: float,
    color: RGBA,
    *,
    column_colors: ColumnColors | None = None,
) -> None:
    """Fill the pixels whose centers fall inside `[left, right) x [top, bottom)`."""

    xa, xb = _pixel_span(min(left, right), max(left, right), dst.shape[1])
    ya, yb = _pixel_span(min(top, bottom), max(top, bottom), dst.shape[0])
    if xa > xb or ya > yb:
        return
    colors = _span_colors(xa, xb, color, column_colors)
    blend_pixels(dst[ya : yb + 1, xa : xb + 1], colors.reshape(1, -1, 4))


def fill_circle(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA) -> None:
    if radius <= 0:
        return
    ya, yb = _pixel_span(cy - radius, cy + radius, dst.shape[0])
    xa, xb = _pixel_span(cx - radius, cx + radius, dst.shape[1])
    if xa > xb or ya > yb:
        return
    yy, xx = np.mgrid[ya : yb + 1, xa : xb + 1]
    inside = (xx + 0.5 - cx) ** 2 + (yy + 0.5 - cy) ** 2 <= radius * radius
    if not np.any(inside):
        return
    view = dst[ya : yb + 1, xa : xb + 1]
    src = np.zeros(view.shape, dtype=np.float32)
    src[inside] = np.asarray(color, dtype=np.float32)
    blend_pixels(view, src)


def fill_polygon(
    dst: np.ndarray,
    vertices: Sequence[tuple[float, float]],
    color: RGBA,
    *,
    column_colors: ColumnColors | None = None,
) -> None:
    """Even-odd scanline fill sampled at pixel centers; the polygon is implicitly closed."""

    if len(vertices) < 3:
        return
    pts = np.asarray(vertices, dtype=np.float64)
    x0 = pts[:, 0]
    y0 = pts[:, 1]
    x1 = np.roll(x0, -1)
    y1 = np.roll(y0, -1)
    sloped = y0 != y1
    x0, y0, x1, y1 = x0[sloped], y0[sloped], x1[sloped], y1[sloped]
    if x0.size == 0:
        return

    ya, yb = _pixel_span(float(pts[:, 1].min()), float(pts[:, 1].max()), dst.shape[0])
    for row in range(ya, yb + 1):
        sample_y = row + 0.5
        crossing = (sample_y >= np.minimum(y0, y1)) & (sample_y < np.maximum(y0, y1))
        if not np.any(crossing):
            continue
        xs = x0[crossing] + (sample_y - y0[crossing]) * (x1[crossing] - x0[crossing]) / (y1[crossing] - y0[crossing])
        xs.sort()
        for start, end in zip(xs[0::2], xs[1::2]):
            xa, xb = _pixel_span(float(start), float(end), dst.shape[1])
            if xa > xb:
                continue
            colors = _span_colors(xa, xb, color, column_colors)
            blend_pixels(dst[row, xa : xb + 1], colors)


def _pixel_span(lo: float, hi: float, limit: int) -> tuple[int, int]:
    first = max(0, int(math.ceil(lo - 0.5)))
    last = min(limit - 1, int(math.ceil(hi - 0.5)) - 1)
    return first, last


def _span_colors(xa: int, xb: int, color: RGBA, column_colors: ColumnColors | None) -> np.ndarray:
    if column_colors is None:
        return np.tile(np.asarray(color, dtype=np.float32), (xb - xa + 1, 1))
    centers = np.arange(xa, xb + 1, dtype=np.float64) + 0.5
    return np.asarray(column_colors(centers), dtype=np.float32)


def blend_pixels(view: np.ndarray, src: np.ndarray) -> None:
    alpha = src[..., 3:4] / 255.0
    inv = 1.0 - alpha
    dst_rgb = view[..., :3].astype(np.float32)
    view[..., :3] = np.clip(src[..., :3] * alpha + dst_rgb * inv, 0, 255).astype(np.uint8)
    covered = src[..., 3] > 0
    view[..., 3] = np.where(covered, 255, view[..., 3])
