"""
Test the worked-example inputs.
"""

from fnlessons.arithmetic import average
from fnlessons.examples import build_example_life_expectancy_table, example_numbers
from fnlessons.table import ColumnKind


def test_life_expectancy_table_structure():
    table = build_example_life_expectancy_table()

    assert table.column_names == ["country", "continent", "year", "lifeExp"]
    assert table.column("continent").distinct() == ["Asia", "Europe"]
    assert table.column("lifeExp").kind is ColumnKind.NUMERIC
    assert table.column("continent").kind is ColumnKind.CATEGORICAL


def test_example_numbers_average():
    assert example_numbers() == list(range(101))
    assert average(example_numbers()) == 50
