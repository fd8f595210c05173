from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


RGBA = tuple[int, int, int, int]
ColorLike = Union[RGBA, tuple[int, int, int], str]

DEFAULT_ENTRY_COLOR: RGBA = (38, 100, 137, 255)
DEFAULT_TEXT_COLOR: RGBA = (128, 128, 128, 255)


def parse_color(value: ColorLike) -> RGBA:
    """Coerce `(r, g, b)`, `(r, g, b, a)` or a `#RGB[A]` / `#RRGGBB[AA]` hex string to RGBA."""

    if isinstance(value, str):
        return _parse_hex(value)
    channels = tuple(int(c) for c in value)
    if len(channels) == 3:
        channels = channels + (255,)
    if len(channels) != 4:
        raise ValueError(f"color must have 3 or 4 channels, got {len(channels)}")
    for c in channels:
        if c < 0 or c > 255:
            raise ValueError(f"color channel out of range: {c}")
    return channels  # type: ignore[return-value]


def with_alpha(color: RGBA, alpha: int) -> RGBA:
    return (color[0], color[1], color[2], max(0, min(255, int(alpha))))


def _parse_hex(value: str) -> RGBA:
    text = value.strip()
    if not text.startswith("#"):
        raise ValueError(f"hex color must start with '#': {value!r}")
    digits = text[1:]
    if len(digits) not in (3, 4, 6, 8):
        raise ValueError(f"hex color must be #RGB, #RGBA, #RRGGBB or #RRGGBBAA: {value!r}")
    try:
        if len(digits) in (3, 4):
            parts = [int(ch * 2, 16) for ch in digits]
        else:
            parts = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError as exc:
        raise ValueError(f"invalid hex color: {value!r}") from exc
    if len(parts) == 3:
        parts.append(255)
    return (parts[0], parts[1], parts[2], parts[3])


@dataclass(frozen=True)
class Entry:
    """One datum of a series.

    `value_label` is the display text for `value`; it is formatted by the caller
    and may be empty independently of `label`.
    """

    value: float
    label: str | None = None
    value_label: str | None = None
    color: ColorLike = DEFAULT_ENTRY_COLOR
    text_color: ColorLike = DEFAULT_TEXT_COLOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "color", parse_color(self.color))
        object.__setattr__(self, "text_color", parse_color(self.text_color))

    @property
    def has_label(self) -> bool:
        return bool(self.label)

    @property
    def has_value_label(self) -> bool:
        return bool(self.value_label)


Series = Sequence[Entry]
