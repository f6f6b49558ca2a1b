"""
Example inputs for the worked examples of the functions lesson.

Builds a small life-expectancy table (country, continent, year, lifeExp)
for two continents, shaped like the gapminder extract the lesson plots,
so the grouped histogram can be demonstrated without a download.
"""
from fnlessons.table import Table


_LIFE_EXPECTANCY = [
    # country, continent, year, lifeExp
    ("Afghanistan", "Asia", 2007, 43.828),
    ("Bangladesh", "Asia", 2007, 64.062),
    ("China", "Asia", 2007, 72.961),
    ("India", "Asia", 2007, 64.698),
    ("Indonesia", "Asia", 2007, 70.650),
    ("Japan", "Asia", 2007, 82.603),
    ("Nepal", "Asia", 2007, 63.785),
    ("Pakistan", "Asia", 2007, 65.483),
    ("Vietnam", "Asia", 2007, 74.249),
    ("Austria", "Europe", 2007, 79.829),
    ("Bulgaria", "Europe", 2007, 73.005),
    ("France", "Europe", 2007, 80.657),
    ("Germany", "Europe", 2007, 79.406),
    ("Hungary", "Europe", 2007, 73.338),
    ("Italy", "Europe", 2007, 80.546),
    ("Poland", "Europe", 2007, 75.563),
    ("Romania", "Europe", 2007, 72.476),
    ("Turkey", "Europe", 2007, 71.777),
]


def build_example_life_expectancy_table() -> Table:
    countries, continents, years, life_exp = zip(*_LIFE_EXPECTANCY)
    return Table(columns={
        "country": countries,
        "continent": continents,
        "year": years,
        "lifeExp": life_exp,
    })


def example_numbers(upper: int = 100) -> list:
    """0, 1, ..., upper: the sequence the averaging example uses."""
    return list(range(upper + 1))
