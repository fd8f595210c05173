from luvatrix_chart.adapters import entries_from
from luvatrix_chart.bar_chart import BarChart
from luvatrix_chart.chart import Chart
from luvatrix_chart.entry import Entry, parse_color
from luvatrix_chart.errors import ChartDataError
from luvatrix_chart.interaction import InteractionState
from luvatrix_chart.layout import SeriesLayout, ValueRange
from luvatrix_chart.line_chart import LineChart
from luvatrix_chart.point_chart import PointChart
from luvatrix_chart.raster import RasterSurface
from luvatrix_chart.surface import LinearGradient, Paint, Path, Point, Rect, RecordingSurface, Size, Surface
from luvatrix_chart.view import ChartView

__all__ = [
    "BarChart",
    "Chart",
    "ChartDataError",
    "ChartView",
    "Entry",
    "InteractionState",
    "LineChart",
    "LinearGradient",
    "Paint",
    "Path",
    "Point",
    "PointChart",
    "RasterSurface",
    "Rect",
    "RecordingSurface",
    "SeriesLayout",
    "Size",
    "Surface",
    "ValueRange",
    "entries_from",
    "parse_color",
]
