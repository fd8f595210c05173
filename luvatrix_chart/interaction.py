from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from luvatrix_chart.surface import Point

LOGGER = logging.getLogger(__name__)

# Points closer than this to the selected coordinate render as selected.
SELECTION_EPSILON = 0.1


@dataclass
class InteractionState:
    """Geometry of the last draw plus the current selection.

    Written at the end of `Chart.draw` and read by hit-testing. Draws and
    hit-tests on one instance must be serialized by the host.
    """

    points: tuple[Point, ...] = ()
    selected_point: Point | None = None

    def commit(self, points: Iterable[Point]) -> None:
        self.points = tuple(points)

    def select_nearest(self, tap: Point) -> Point | None:
        nearest = nearest_point(self.points, tap)
        if nearest is None:
            return self.selected_point
        self.selected_point = nearest
        LOGGER.debug("selected point (%.2f, %.2f) for tap (%.2f, %.2f)", nearest.x, nearest.y, tap.x, tap.y)
        return nearest

    def clear_selection(self) -> None:
        self.selected_point = None

    def is_selected(self, point: Point) -> bool:
        if self.selected_point is None:
            return False
        return point.distance_to(self.selected_point) < SELECTION_EPSILON


def nearest_point(points: Iterable[Point], tap: Point) -> Point | None:
    """First point, in iteration order, at the minimum Euclidean distance from `tap`."""

    best: Point | None = None
    best_distance = 0.0
    for point in points:
        distance = point.distance_to(tap)
        if best is None or distance < best_distance:
            best = point
            best_distance = distance
    return best
