"""
CSV Parser for tabular datasets (Raw Input → Table).

Converts a comma-separated file with a header row into a Table.

CSV Format:
    first row:   column names
    other rows:  one record per row, same number of cells as the header

Typing Notes:
    - Empty cells and NA are missing values
    - A column whose every present cell parses as a number becomes a
      numeric column of floats (missing → nan)
    - Any other column stays a categorical column of stripped strings
      (missing → None)
"""

import csv
import math
import os
from io import StringIO
from typing import Any, List, Optional, Tuple

from fnlessons.table import Table, TableError


MISSING_MARKERS = {"", "NA"}


class TableParseError(TableError):
    """Raised when CSV parsing fails."""
    pass


def _parse_number(cell: str) -> Optional[float]:
    try:
        return float(cell)
    except ValueError:
        return None


def _convert_column(cells: List[str]) -> Tuple[Any, ...]:
    """Turn raw string cells into floats or labels."""
    present = [c for c in cells if c not in MISSING_MARKERS]
    numeric = all(_parse_number(c) is not None for c in present)

    if numeric:
        return tuple(math.nan if c in MISSING_MARKERS else float(c) for c in cells)
    return tuple(None if c in MISSING_MARKERS else c for c in cells)


def parse_table_string(csv_content: str) -> Table:
    """
    Parse CSV content into a Table.

    Args:
        csv_content: CSV as string, header row first

    Returns:
        Table with one column per header cell

    Raises:
        TableParseError: If the content is empty, the header repeats a
            name, or a row has the wrong number of cells
    """
    reader = csv.reader(StringIO(csv_content))

    try:
        header = next(reader)
    except StopIteration:
        raise TableParseError("CSV is empty")

    header = [name.strip() for name in header]
    if not any(header):
        raise TableParseError("CSV header row is empty")
    if len(header) != len(set(header)):
        duplicates = {name for name in header if header.count(name) > 1}
        raise TableParseError(f"Duplicate column names: {duplicates}")

    cells: List[List[str]] = [[] for _ in header]
    for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is line 1)
        if not row:
            continue
        if len(row) != len(header):
            raise TableParseError(
                f"Error parsing row {row_num}: expected {len(header)} cells, got {len(row)}"
            )
        for i, cell in enumerate(row):
            cells[i].append(cell.strip())

    return Table(columns={name: _convert_column(col) for name, col in zip(header, cells)})


def parse_table_file(filepath: str) -> Table:
    """
    Parse CSV file into a Table.

    Raises:
        FileNotFoundError: If file doesn't exist
        TableParseError: If parsing fails
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8", newline="") as f:
        content = f.read()

    return parse_table_string(content)


__all__ = [
    "parse_table_string",
    "parse_table_file",
    "TableParseError",
    "MISSING_MARKERS",
]
