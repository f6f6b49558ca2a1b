"""Backends for fnlessons chart output."""

from .histogram import (
    GroupedHistogram,
    HistogramSeries,
    HistogramStyle,
    render_grouped_histogram,
    save_histogram,
    style_from_yaml,
)

__all__ = [
    "GroupedHistogram",
    "HistogramSeries",
    "HistogramStyle",
    "render_grouped_histogram",
    "save_histogram",
    "style_from_yaml",
]
