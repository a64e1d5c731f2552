"""Blade chart export package."""

from .blade_chart import CHART_COLUMNS, build_blade_chart
from .writer import ExportWriter, infer_format

__all__ = [
    "CHART_COLUMNS",
    "ExportWriter",
    "build_blade_chart",
    "infer_format",
]
