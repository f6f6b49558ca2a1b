"""
Grouped histogram renderer for tabular datasets.

Overlays one histogram per group label on a single matplotlib Figure.

Rendering rules:
    - Bin edges are computed once over every plotted value and shared
      by all groups, so the distributions are directly comparable
    - Each group is drawn semi-transparent so overlaps stay visible
    - The legend has exactly one entry per group label

The Figure is built through the object-oriented matplotlib API
(matplotlib.figure.Figure), so no pyplot state or display backend is
involved and repeated calls never share a canvas.
"""

import warnings
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
import yaml
from matplotlib.figure import Figure

from fnlessons.table import Table


@dataclass(frozen=True)
class HistogramStyle:
    """
    Presentation settings for a grouped histogram.

    Properties:
        bins: Bin count or a numpy binning strategy name ("auto", "sturges", ...)
        alpha: Fill opacity of each group, 0 (invisible) to 1 (opaque)
        figsize: Figure size in inches (width, height)
        xlabel: X axis label (defaults to the value column name)
        ylabel: Y axis label
    """

    bins: Union[int, str] = "auto"
    alpha: float = 0.5
    figsize: Tuple[float, float] = (8.0, 5.0)
    xlabel: Optional[str] = None
    ylabel: str = "count"

    def __post_init__(self):
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be between 0 and 1, got {self.alpha}")
        if isinstance(self.bins, int) and self.bins < 1:
            raise ValueError(f"bins must be positive, got {self.bins}")
        object.__setattr__(self, "figsize", tuple(self.figsize))


def style_from_dict(d: Optional[Dict[str, Any]]) -> HistogramStyle:
    """Build a HistogramStyle from a mapping; None or {} gives the defaults.

    Raises:
        ValueError: If the mapping has keys HistogramStyle does not know
    """
    if not d:
        return HistogramStyle()
    known = {f.name for f in fields(HistogramStyle)}
    unknown = set(d) - known
    if unknown:
        raise ValueError(f"Unknown histogram style keys: {sorted(unknown)}")
    return HistogramStyle(**d)


def style_from_yaml(s: str) -> HistogramStyle:
    """Build a HistogramStyle from YAML text (see style_from_dict)."""
    return style_from_dict(yaml.safe_load(s))


@dataclass(frozen=True)
class HistogramSeries:
    """Frequency counts of one group over the shared bins."""

    label: str
    counts: Tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.counts)


@dataclass(frozen=True)
class GroupedHistogram:
    """
    Result of render_grouped_histogram.

    Equality covers the data that was plotted (columns, edges, counts);
    the Figure itself is carried along but never compared.
    """

    value_column: str
    group_column: str
    bin_edges: Tuple[float, ...]
    series: Tuple[HistogramSeries, ...]
    figure: Optional[Figure] = field(default=None, compare=False, repr=False)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(s.label for s in self.series)

    @property
    def legend_labels(self) -> Tuple[str, ...]:
        """Legend entries as drawn on the figure."""
        if self.figure is None or not self.figure.axes:
            return ()
        legend = self.figure.axes[0].get_legend()
        if legend is None:
            return ()
        return tuple(text.get_text() for text in legend.get_texts())


def render_grouped_histogram(
    table: Table,
    value_column: str,
    group_column: str,
    style: Optional[HistogramStyle] = None,
) -> GroupedHistogram:
    """
    Overlay one histogram of value_column per label of group_column.

    Args:
        table: Dataset holding both columns
        value_column: Name of a numeric column
        group_column: Name of a categorical column
        style: Optional presentation settings

    Returns:
        GroupedHistogram with the shared bin edges, per-group counts and
        the rendered Figure

    Raises:
        InvalidColumnError: If a column is absent, value_column is not
            numeric or group_column is not categorical
    """
    style = style or HistogramStyle()

    groups = table.group_by(value_column, group_column)

    kept = sum(len(vals) for vals in groups.values())
    dropped = table.row_count - kept
    if dropped:
        warnings.warn(
            f"Dropped {dropped} row(s) with missing or infinite '{value_column}' or missing '{group_column}'",
            UserWarning,
        )

    all_values = np.array([v for vals in groups.values() for v in vals], dtype=float)
    edges = np.histogram_bin_edges(all_values, bins=style.bins)

    fig = Figure(figsize=style.figsize)
    ax = fig.add_subplot(1, 1, 1)

    series = []
    for label, vals in groups.items():
        counts, _ = np.histogram(np.array(vals, dtype=float), bins=edges)
        series.append(HistogramSeries(label=label, counts=tuple(int(c) for c in counts)))
        ax.hist(vals, bins=edges, alpha=style.alpha, label=str(label))

    ax.set_xlabel(style.xlabel or value_column)
    ax.set_ylabel(style.ylabel)
    ax.legend(title=group_column)

    return GroupedHistogram(
        value_column=value_column,
        group_column=group_column,
        bin_edges=tuple(float(e) for e in edges),
        series=tuple(series),
        figure=fig,
    )


def save_histogram(chart: GroupedHistogram, filepath: str, dpi: int = 100) -> None:
    """
    Write the chart's figure to an image file.

    The format follows the file extension (.png, .svg, .pdf, ...).
    """
    if chart.figure is None:
        raise ValueError("Chart has no figure to save")
    chart.figure.savefig(filepath, dpi=dpi)


__all__ = [
    "HistogramStyle",
    "HistogramSeries",
    "GroupedHistogram",
    "render_grouped_histogram",
    "save_histogram",
    "style_from_dict",
    "style_from_yaml",
]
