from __future__ import annotations

from typing import Sequence

import numpy as np

from luvatrix_chart.raster.canvas import RGBA, ColumnColors, blend_pixels


def draw_polyline(
    dst: np.ndarray,
    vertices: Sequence[tuple[float, float]],
    color: RGBA,
    *,
    width: float = 1.0,
    closed: bool = False,
    column_colors: ColumnColors | None = None,
) -> None:
    """Stroke successive vertices with a square brush; each covered pixel is blended once."""

    if len(vertices) < 2:
        return
    pts = [(int(round(x)), int(round(y))) for x, y in vertices]
    if closed:
        pts.append(pts[0])

    xs: list[int] = []
    ys: list[int] = []
    for (x0, y0), (x1, y1) in zip(pts, pts[1:]):
        _trace_segment(x0, y0, x1, y1, xs, ys)

    radius = max(0, int(round(width)) // 2)
    offsets = np.arange(-radius, radius + 1)
    ox, oy = np.meshgrid(offsets, offsets)
    px = (np.asarray(xs)[:, None] + ox.reshape(1, -1)).ravel()
    py = (np.asarray(ys)[:, None] + oy.reshape(1, -1)).ravel()
    inside = (px >= 0) & (px < dst.shape[1]) & (py >= 0) & (py < dst.shape[0])
    if not np.any(inside):
        return
    unique = np.unique(np.stack([py[inside], px[inside]], axis=1), axis=0)
    rows = unique[:, 0]
    cols = unique[:, 1]
    if column_colors is None:
        src = np.tile(np.asarray(color, dtype=np.float32), (rows.size, 1))
    else:
        src = np.asarray(column_colors(cols.astype(np.float64) + 0.5), dtype=np.float32)
    view = dst[rows, cols]
    blend_pixels(view, src)
    dst[rows, cols] = view


def _trace_segment(x0: int, y0: int, x1: int, y1: int, xs: list[int], ys: list[int]) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        xs.append(x0)
        ys.append(y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
