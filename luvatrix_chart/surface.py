from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Literal, Mapping, Protocol

import numpy as np

from luvatrix_chart.entry import RGBA


PointMode = Literal["none", "circle", "square"]
PaintStyle = Literal["fill", "stroke"]

# Line segments used to approximate one cubic segment when flattening paths.
DEFAULT_CUBIC_STEPS = 24


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(left=x, top=y, right=x + width, bottom=y + height)

    @classmethod
    def empty(cls) -> "Rect":
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class LinearGradient:
    """Horizontal gradient; each stop is `(x, color)` in canvas coordinates, clamped outside the stops."""

    stops: tuple[tuple[float, RGBA], ...]

    def __post_init__(self) -> None:
        if not self.stops:
            raise ValueError("gradient requires at least one stop")

    def colors_at(self, xs: np.ndarray) -> np.ndarray:
        xs = np.asarray(xs, dtype=np.float64)
        positions = np.asarray([x for x, _ in self.stops], dtype=np.float64)
        colors = np.asarray([c for _, c in self.stops], dtype=np.float64)
        if positions.size == 1:
            return np.repeat(colors[:1], xs.size, axis=0).astype(np.uint8)
        out = np.empty((xs.size, 4), dtype=np.float64)
        for channel in range(4):
            out[:, channel] = np.interp(xs, positions, colors[:, channel])
        return np.clip(np.rint(out), 0, 255).astype(np.uint8)

    def color_at(self, x: float) -> RGBA:
        r, g, b, a = self.colors_at(np.asarray([x])).tolist()[0]
        return (int(r), int(g), int(b), int(a))


@dataclass(frozen=True)
class Paint:
    color: RGBA = (0, 0, 0, 255)
    style: PaintStyle = "fill"
    stroke_width: float = 1.0
    shader: LinearGradient | None = None
    text_size: float = 16.0
    bold: bool = False


@dataclass
class Path:
    """Move/line/cubic/close command list, flattened to polylines by raster backends."""

    commands: list[tuple[Any, ...]] = field(default_factory=list)

    def move_to(self, point: Point) -> "Path":
        self.commands.append(("move", point))
        return self

    def line_to(self, point: Point) -> "Path":
        self.commands.append(("line", point))
        return self

    def cubic_to(self, control1: Point, control2: Point, end: Point) -> "Path":
        self.commands.append(("cubic", control1, control2, end))
        return self

    def close(self) -> "Path":
        self.commands.append(("close",))
        return self

    def flatten(self, cubic_steps: int = DEFAULT_CUBIC_STEPS) -> list[tuple[list[tuple[float, float]], bool]]:
        """Return `(vertices, closed)` per sub-path."""

        contours: list[tuple[list[tuple[float, float]], bool]] = []
        current: list[tuple[float, float]] = []
        for command in self.commands:
            kind = command[0]
            if kind == "move":
                if len(current) > 0:
                    contours.append((current, False))
                current = [(command[1].x, command[1].y)]
            elif kind == "line":
                if not current:
                    current = [(0.0, 0.0)]
                current.append((command[1].x, command[1].y))
            elif kind == "cubic":
                if not current:
                    current = [(0.0, 0.0)]
                current.extend(_sample_cubic(current[-1], command[1], command[2], command[3], cubic_steps))
            elif kind == "close":
                if current:
                    contours.append((current, True))
                current = []
        if current:
            contours.append((current, False))
        return contours


def _sample_cubic(
    start: tuple[float, float],
    c1: Point,
    c2: Point,
    end: Point,
    steps: int,
) -> list[tuple[float, float]]:
    t = np.linspace(0.0, 1.0, max(1, steps) + 1)[1:]
    mt = 1.0 - t
    a = mt**3
    b = 3.0 * mt**2 * t
    c = 3.0 * mt * t**2
    d = t**3
    xs = a * start[0] + b * c1.x + c * c2.x + d * end.x
    ys = a * start[1] + b * c1.y + c * c2.y + d * end.y
    return list(zip(xs.tolist(), ys.tolist()))


class Surface(Protocol):
    """Drawing target the chart renders into.

    `draw_text` positions the top-left corner of the drawn text box; with
    `rotate_deg` (clockwise quarter turns) the box is the rotated one.
    """

    def clear(self, color: RGBA) -> None:
        ...

    def draw_rect(self, rect: Rect, paint: Paint) -> None:
        ...

    def draw_circle(self, center: Point, radius: float, paint: Paint) -> None:
        ...

    def draw_path(self, path: Path, paint: Paint) -> None:
        ...

    def measure_text(self, text: str, paint: Paint) -> Rect:
        ...

    def draw_text(self, text: str, x: float, y: float, paint: Paint, *, rotate_deg: int = 0) -> None:
        ...


@dataclass(frozen=True)
class DrawCommand:
    kind: str
    args: dict[str, Any]


class RecordingSurface:
    """Surface that records commands and measures text from per-character widths.

    A character's width is `char_widths.get(ch, default_char_width) * text_size`
    and every line is `text_size` tall.
    """

    def __init__(
        self,
        *,
        default_char_width: float = 0.5,
        char_widths: Mapping[str, float] | None = None,
    ) -> None:
        self.default_char_width = default_char_width
        self.char_widths = dict(char_widths or {})
        self.commands: list[DrawCommand] = []

    def of_kind(self, kind: str) -> list[DrawCommand]:
        return [cmd for cmd in self.commands if cmd.kind == kind]

    def clear(self, color: RGBA) -> None:
        self.commands.append(DrawCommand("clear", {"color": color}))

    def draw_rect(self, rect: Rect, paint: Paint) -> None:
        self.commands.append(DrawCommand("rect", {"rect": rect, "paint": paint}))

    def draw_circle(self, center: Point, radius: float, paint: Paint) -> None:
        self.commands.append(DrawCommand("circle", {"center": center, "radius": radius, "paint": paint}))

    def draw_path(self, path: Path, paint: Paint) -> None:
        self.commands.append(DrawCommand("path", {"path": path, "paint": paint}))

    def measure_text(self, text: str, paint: Paint) -> Rect:
        if not text:
            return Rect.empty()
        width = sum(self.char_widths.get(ch, self.default_char_width) for ch in text) * paint.text_size
        return Rect(0.0, -paint.text_size, width, 0.0)

    def draw_text(self, text: str, x: float, y: float, paint: Paint, *, rotate_deg: int = 0) -> None:
        self.commands.append(
            DrawCommand("text", {"text": text, "x": x, "y": y, "paint": paint, "rotate_deg": rotate_deg})
        )
