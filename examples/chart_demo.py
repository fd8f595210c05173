from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np
from PIL import Image

from luvatrix_chart import BarChart, ChartView, LineChart, PointChart, entries_from


PALETTE = ("#266489", "#68B9C0", "#90D585", "#F3C151", "#F37F64", "#424856", "#8F97A4")


def _series():
    values = {"Mon": 212, "Tue": 248, "Wed": -128, "Thu": 514, "Fri": 180, "Sat": 95, "Sun": 320}
    return entries_from(values, value_labels="auto", colors=list(PALETTE))


def _render(chart, *, width: int, height: int, tap: tuple[float, float] | None = None) -> np.ndarray:
    view = ChartView(chart, width=width, height=height)
    view.render()
    if tap is not None:
        view.on_tap(*tap)
    return view.frame()


def main() -> None:
    parser = argparse.ArgumentParser(description="Render point, bar and line charts side by side.")
    parser.add_argument("--out", type=Path, default=Path("chart_demo.png"))
    parser.add_argument("--width", type=int, default=420)
    parser.add_argument("--height", type=int, default=320)
    args = parser.parse_args()

    entries = _series()
    line = LineChart(series=[entries])
    frames = [
        _render(PointChart(series=[entries]), width=args.width, height=args.height),
        _render(BarChart(series=[entries]), width=args.width, height=args.height),
        _render(line, width=args.width, height=args.height, tap=(args.width * 0.55, args.height * 0.3)),
    ]
    sheet = np.concatenate(frames, axis=1)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(sheet)).save(args.out)
    print(f"wrote {args.out} (selected {line.selected_point})")


if __name__ == "__main__":
    main()
