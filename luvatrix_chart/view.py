from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

import numpy as np

from luvatrix_chart.chart import Chart
from luvatrix_chart.entry import RGBA
from luvatrix_chart.raster.draw_text import DEFAULT_FONT_FAMILY
from luvatrix_chart.raster.surface import RasterSurface
from luvatrix_chart.surface import Point

LOGGER = logging.getLogger(__name__)


@dataclass
class DirtyState:
    dirty: bool = True
    reason: str | None = "initial"


class ChartView:
    """Host adapter: owns a raster surface for a chart and turns taps into selection.

    The view installs itself as the chart's `on_change` callback so configuration
    changes mark the frame dirty; `frame()` re-renders only when dirty.
    """

    def __init__(
        self,
        chart: Chart | None = None,
        *,
        width: int = 400,
        height: int = 300,
        background: RGBA = (0, 0, 0, 0),
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("view width/height must be > 0")
        self._width = int(width)
        self._height = int(height)
        self._background = background
        self._font_family = font_family
        self._chart: Chart | None = None
        self._last_surface: RasterSurface | None = None
        self.dirty = DirtyState()
        self.chart = chart

    @property
    def chart(self) -> Chart | None:
        return self._chart

    @chart.setter
    def chart(self, chart: Chart | None) -> None:
        if self._chart is not None and self._chart.on_change == self._on_chart_changed:
            self._chart.on_change = None
        self._chart = chart
        if chart is not None:
            chart.on_change = self._on_chart_changed
        self.invalidate("chart")

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("view width/height must be > 0")
        if (width, height) == (self._width, self._height):
            return
        self._width = int(width)
        self._height = int(height)
        self.invalidate("resize")

    def invalidate(self, reason: str = "invalidate") -> None:
        self.dirty.dirty = True
        self.dirty.reason = reason

    def render(self) -> np.ndarray:
        return self._render_surface().canvas.copy()

    def _render_surface(self) -> RasterSurface:
        surface = RasterSurface(
            self._width,
            self._height,
            background=self._background,
            font_family=self._font_family,
        )
        if self._chart is not None:
            self._chart.draw(surface, self._width, self._height)
        LOGGER.debug("rendered %dx%d frame (%s)", self._width, self._height, self.dirty.reason)
        self._last_surface = surface
        self.dirty.dirty = False
        self.dirty.reason = None
        return surface

    def frame(self) -> np.ndarray:
        return self._current_surface().canvas.copy()

    def _current_surface(self) -> RasterSurface:
        if self.dirty.dirty or self._last_surface is None:
            return self._render_surface()
        return self._last_surface

    def on_tap(self, x: float, y: float) -> Point | None:
        if self._chart is None:
            return None
        selected = self._chart.select_nearest_point(Point(float(x), float(y)))
        self.invalidate("tap")
        return selected

    def save_png(self, path: str | Path) -> Path:
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        self._current_surface().to_image().save(out_path)
        return out_path

    def _on_chart_changed(self, chart: Chart) -> None:
        self.invalidate("config")
