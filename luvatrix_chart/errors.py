from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when host-supplied chart data cannot be normalized into entries."""
