from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from luvatrix_chart.entry import DEFAULT_ENTRY_COLOR, DEFAULT_TEXT_COLOR, ColorLike, Entry, parse_color
from luvatrix_chart.errors import ChartDataError


try:
    import pandas as pd
except ImportError:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def entries_from(
    values: Any,
    *,
    labels: Sequence[str | None] | None = None,
    value_labels: Sequence[str | None] | str | None = None,
    colors: Sequence[ColorLike] | ColorLike | None = None,
    text_color: ColorLike = DEFAULT_TEXT_COLOR,
) -> list[Entry]:
    """Build one series from a list, numpy array, mapping or pandas Series.

    Mappings and pandas Series supply labels from their keys/index unless
    `labels` is given. `value_labels="auto"` formats each value.
    """

    raw_values, inferred_labels = _split_values(values)
    arr = _coerce_1d_numeric(raw_values)
    if arr.size == 0:
        raise ChartDataError("empty series")
    if not np.all(np.isfinite(arr)):
        bad = int(np.flatnonzero(~np.isfinite(arr))[0])
        raise ChartDataError(f"series contains a non-finite value at index {bad}")

    n = int(arr.size)
    resolved_labels = _sized("labels", labels if labels is not None else inferred_labels, n)
    if isinstance(value_labels, str):
        if value_labels != "auto":
            raise ChartDataError(f"unsupported value_labels mode: {value_labels}")
        resolved_value_labels: list[str | None] = [format_value(v) for v in arr.tolist()]
    else:
        resolved_value_labels = _sized("value_labels", value_labels, n)
    resolved_colors = _resolve_colors(colors, n)
    resolved_text_color = parse_color(text_color)

    return [
        Entry(
            value=float(arr[i]),
            label=resolved_labels[i],
            value_label=resolved_value_labels[i],
            color=resolved_colors[i],
            text_color=resolved_text_color,
        )
        for i in range(n)
    ]


def format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def _split_values(values: Any) -> tuple[Any, list[str | None] | None]:
    if pd is not None and isinstance(values, pd.Series):
        return values.to_numpy(), [str(k) for k in values.index.tolist()]
    if isinstance(values, Mapping):
        return list(values.values()), [str(k) for k in values.keys()]
    return values, None


def _sized(name: str, items: Sequence[Any] | None, n: int) -> list[Any]:
    if items is None:
        return [None] * n
    out = list(items)
    if len(out) != n:
        raise ChartDataError(f"{name} length mismatch: {len(out)} != {n}")
    return out


def _resolve_colors(colors: Sequence[ColorLike] | ColorLike | None, n: int) -> list[Any]:
    if colors is None:
        return [DEFAULT_ENTRY_COLOR] * n
    if isinstance(colors, str) or (
        isinstance(colors, tuple) and len(colors) in (3, 4) and all(isinstance(c, (int, np.integer)) for c in colors)
    ):
        single = _parse(colors)
        return [single] * n
    resolved = [_parse(c) for c in colors]  # type: ignore[union-attr]
    if len(resolved) != n:
        raise ChartDataError(f"colors length mismatch: {len(resolved)} != {n}")
    return resolved


def _parse(color: Any) -> tuple[int, int, int, int]:
    try:
        return parse_color(color)
    except (TypeError, ValueError) as exc:
        raise ChartDataError(f"invalid color: {color!r}") from exc


def _coerce_1d_numeric(value: Any) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError("values must be 1-D")
        return _coerce_ndarray(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object))

    raise ChartDataError(f"unsupported values input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"values contain a non-numeric value at index {i}: {raw!r}") from exc
    return out
