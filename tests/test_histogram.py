"""
Tests for the grouped histogram renderer.

Tests verify that the renderer:
    - Draws one distribution and one legend entry per group
    - Shares bin edges across groups
    - Rejects absent or mistyped columns
    - Returns equal results for equal inputs
"""

import math

import numpy as np
import pytest
from fnlessons.backends.histogram import (
    HistogramStyle,
    GroupedHistogram,
    render_grouped_histogram,
    save_histogram,
    style_from_yaml,
)
from fnlessons.csv_parser import parse_table_string
from fnlessons.examples import build_example_life_expectancy_table
from fnlessons.table import Table, InvalidColumnError


def test_two_groups_two_distributions():
    """Asia and Europe give two series and two legend entries."""
    table = build_example_life_expectancy_table()
    chart = render_grouped_histogram(table, "lifeExp", "continent")

    assert chart.labels == ("Asia", "Europe")
    assert len(chart.series) == 2
    assert chart.legend_labels == ("Asia", "Europe")


def test_counts_cover_every_row():
    table = build_example_life_expectancy_table()
    chart = render_grouped_histogram(table, "lifeExp", "continent")

    assert sum(s.total for s in chart.series) == table.row_count
    for s in chart.series:
        assert len(s.counts) == len(chart.bin_edges) - 1


def test_bins_shared_and_span_all_values():
    table = build_example_life_expectancy_table()
    chart = render_grouped_histogram(table, "lifeExp", "continent", style=HistogramStyle(bins=5))

    values = table.column("lifeExp").values
    assert len(chart.bin_edges) == 6
    assert chart.bin_edges[0] == pytest.approx(min(values))
    assert chart.bin_edges[-1] == pytest.approx(max(values))


def test_groups_are_semi_transparent():
    table = build_example_life_expectancy_table()
    chart = render_grouped_histogram(table, "lifeExp", "continent", style=HistogramStyle(alpha=0.4))

    patches = chart.figure.axes[0].patches
    assert patches
    assert all(p.get_alpha() == pytest.approx(0.4) for p in patches)


def test_axis_labels():
    table = build_example_life_expectancy_table()
    chart = render_grouped_histogram(table, "lifeExp", "continent")
    ax = chart.figure.axes[0]
    assert ax.get_xlabel() == "lifeExp"
    assert ax.get_ylabel() == "count"


def test_idempotent():
    """Identical inputs give equal results."""
    table = build_example_life_expectancy_table()
    first = render_grouped_histogram(table, "lifeExp", "continent")
    second = render_grouped_histogram(table, "lifeExp", "continent")
    assert first == second
    assert first.figure is not second.figure


def test_missing_value_column():
    table = build_example_life_expectancy_table()
    with pytest.raises(InvalidColumnError):
        render_grouped_histogram(table, "gdpPercap", "continent")


def test_missing_group_column():
    table = build_example_life_expectancy_table()
    with pytest.raises(InvalidColumnError):
        render_grouped_histogram(table, "lifeExp", "region")


def test_value_column_must_be_numeric():
    table = build_example_life_expectancy_table()
    with pytest.raises(InvalidColumnError):
        render_grouped_histogram(table, "country", "continent")


def test_group_column_must_be_categorical():
    table = build_example_life_expectancy_table()
    with pytest.raises(InvalidColumnError):
        render_grouped_histogram(table, "lifeExp", "year")


def test_rows_with_missing_cells_dropped_with_warning():
    table = Table(columns={
        "continent": ("Asia", "Europe", None, "Asia"),
        "lifeExp": (60.0, 70.0, 65.0, math.nan),
    })
    with pytest.warns(UserWarning, match="Dropped 2 row"):
        chart = render_grouped_histogram(table, "lifeExp", "continent")
    assert sum(s.total for s in chart.series) == 2


def test_infinite_values_dropped_with_warning():
    """Inf cells written by R are left out of the bins."""
    table = parse_table_string("continent,lifeExp\nAsia,60\nEurope,Inf\nEurope,-Inf\nEurope,70\n")
    with pytest.warns(UserWarning, match="Dropped 2 row"):
        chart = render_grouped_histogram(table, "lifeExp", "continent")
    assert all(math.isfinite(e) for e in chart.bin_edges)
    assert [s.total for s in chart.series] == [1, 1]


def test_numpy_value_column():
    table = Table(columns={"continent": ("Asia", "Europe", "Asia"), "lifeExp": np.array([1, 2, 3])})
    chart = render_grouped_histogram(table, "lifeExp", "continent")
    assert [s.total for s in chart.series] == [2, 1]


def test_mixed_type_labels():
    table = Table(columns={"g": ("Asia", 1, "Europe"), "v": (1.0, 2.0, 3.0)})
    chart = render_grouped_histogram(table, "v", "g")
    assert chart.labels == (1, "Asia", "Europe")
    assert chart.legend_labels == ("1", "Asia", "Europe")


def test_save_histogram(tmp_path):
    table = build_example_life_expectancy_table()
    chart = render_grouped_histogram(table, "lifeExp", "continent")
    out = tmp_path / "chart.png"
    save_histogram(chart, str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_save_without_figure():
    chart = GroupedHistogram(value_column="v", group_column="g", bin_edges=(0.0, 1.0), series=())
    with pytest.raises(ValueError):
        save_histogram(chart, "unused.png")


class TestHistogramStyle:
    """Test style configuration."""

    def test_defaults(self):
        style = HistogramStyle()
        assert style.bins == "auto"
        assert style.alpha == 0.5

    def test_alpha_out_of_range(self):
        with pytest.raises(ValueError):
            HistogramStyle(alpha=1.5)

    def test_bins_must_be_positive(self):
        with pytest.raises(ValueError):
            HistogramStyle(bins=0)

    def test_from_yaml(self):
        style = style_from_yaml("bins: 10\nalpha: 0.3\nfigsize: [4, 3]\n")
        assert style == HistogramStyle(bins=10, alpha=0.3, figsize=(4, 3))

    def test_from_empty_yaml(self):
        assert style_from_yaml("") == HistogramStyle()

    def test_unknown_yaml_key(self):
        with pytest.raises(ValueError):
            style_from_yaml("colour: red\n")
