"""
Tabular Dataset Model

Defines the in-memory table the histogram renderer works on.

These are pure data classes representing:
    - Columns (a name, a kind and an ordered tuple of values)
    - Tables (an ordered set of equal-length columns)

ARCHITECTURAL RULE:
    Columns are addressed through typed accessors.
    A lookup either returns a Column of the requested kind or raises
    InvalidColumnError. Callers never poke at raw dictionaries by name.
"""

import math
import numbers
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class TableError(ValueError):
    """Base class for table construction and lookup errors."""
    pass


class InvalidColumnError(TableError):
    """Raised when a column is absent or of the wrong kind."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid column '{name}': {reason}")


class ColumnKind(Enum):
    """Semantic type of a column."""
    NUMERIC = "numeric"          # Real numbers, missing cells are nan
    CATEGORICAL = "categorical"  # String labels, missing cells are None


def is_missing(value: Any) -> bool:
    """True for None and nan, the two missing-value markers."""
    if value is None:
        return True
    return isinstance(value, numbers.Real) and math.isnan(value)


def _is_real(value: Any) -> bool:
    # numbers.Real also covers numpy scalars
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def infer_kind(values: Tuple[Any, ...]) -> ColumnKind:
    """
    Decide the kind of a column from its values.

    A column is numeric when every non-missing value is a real number.
    A column with no non-missing values at all is treated as numeric.
    """
    present = [v for v in values if not is_missing(v)]
    if all(_is_real(v) for v in present):
        return ColumnKind.NUMERIC
    return ColumnKind.CATEGORICAL


@dataclass(frozen=True)
class Column:
    """
    Typed handle to one column of a Table.

    Properties:
        name: Column name as given in the header row
        kind: NUMERIC or CATEGORICAL
        values: Cell values in row order
    """

    name: str
    kind: ColumnKind
    values: Tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def distinct(self) -> List[Any]:
        """Sorted distinct non-missing values.

        Labels of different types are grouped by type name first, so a
        column mixing strings and numbers still sorts.
        """
        present = {v for v in self.values if not is_missing(v)}
        return sorted(present, key=lambda v: (type(v).__name__, v))


@dataclass(frozen=True)
class Table:
    """
    An ordered collection of named, equal-length columns.

    Rows are aligned records: the i-th value of every column belongs to the
    same row.

    INVARIANTS:
        - Every column has the same length
        - Column names are unique (guaranteed by the mapping)
        - Values are stored as tuples, so a Table is never mutated
        - A Table is not hashable (columns live in a mapping)
    """

    columns: Dict[str, Tuple[Any, ...]] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self):
        normalized = OrderedDict((name, tuple(values)) for name, values in self.columns.items())
        lengths = {name: len(values) for name, values in normalized.items()}
        if len(set(lengths.values())) > 1:
            raise TableError(f"Columns have unequal lengths: {lengths}")
        object.__setattr__(self, "columns", normalized)

    @property
    def column_names(self) -> List[str]:
        return list(self.columns)

    @property
    def row_count(self) -> int:
        for values in self.columns.values():
            return len(values)
        return 0

    def column(self, name: str) -> Column:
        """
        Retrieve a column by name.

        Args:
            name: Column name

        Returns:
            Column with its inferred kind

        Raises:
            InvalidColumnError: If no column has this name
        """
        if name not in self.columns:
            raise InvalidColumnError(name, f"not in table (columns: {self.column_names})")
        values = self.columns[name]
        return Column(name=name, kind=infer_kind(values), values=values)

    def numeric_column(self, name: str) -> Column:
        """Retrieve a column that must be numeric."""
        col = self.column(name)
        if col.kind is not ColumnKind.NUMERIC:
            raise InvalidColumnError(name, "expected a numeric column")
        return col

    def categorical_column(self, name: str) -> Column:
        """Retrieve a column that must be categorical."""
        col = self.column(name)
        if col.kind is not ColumnKind.CATEGORICAL:
            raise InvalidColumnError(name, "expected a categorical column")
        return col

    def group_by(self, value_column: str, group_column: str) -> "OrderedDict[Any, Tuple[float, ...]]":
        """
        Partition a numeric column by the labels of a categorical column.

        Rows whose value or label is missing are skipped, as are rows with
        an infinite value. Labels come out in
        sorted order; every distinct label gets an entry.

        Raises:
            InvalidColumnError: If either column is absent or of the wrong kind
        """
        values = self.numeric_column(value_column)
        groups = self.categorical_column(group_column)

        partition: "OrderedDict[Any, List[float]]" = OrderedDict(
            (label, []) for label in groups.distinct()
        )
        for value, label in zip(values.values, groups.values):
            if is_missing(value) or is_missing(label) or math.isinf(value):
                continue
            partition[label].append(float(value))

        return OrderedDict((label, tuple(vals)) for label, vals in partition.items())


__all__ = [
    "Table",
    "Column",
    "ColumnKind",
    "TableError",
    "InvalidColumnError",
    "infer_kind",
    "is_missing",
]
