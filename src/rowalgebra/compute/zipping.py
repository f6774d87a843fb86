"""Operators that combine two tables row by row.

Zipping pairs the rows of two tables by their position,
the first row of the left table with the first row of the
right one and so on. The result is as long as the shortest table.

This is not a relational join: no key is involved,
rows are only matched on their position. See
:mod:`rowalgebra.compute.join` for joining rows on their values.
"""

from collections.abc import Callable
from typing import Any

from ..model import Table


def zip_with(combine: Callable[[Any, Any], Any], left: Table, right: Table) -> Table:
    """Combine the rows of two tables positionally.

    >>> from rowalgebra.model import Table
    >>> zip_with(lambda a, b: a * b, Table([1, 2, 3]), Table([10, 20]))
    Table([10, 40])
    """
    # Both tables are non-empty, so the result is never empty.
    return Table(combine(lrow, rrow) for lrow, rrow in zip(left, right))


def union_rows_with(combine: Callable[[Any, Any], Any], left: Table, right: Table) -> Table:
    """Merge the rows of two tables positionally.

    Each row of the left table is merged with the row
    of the right table at the same position, when both
    rows have the same column, ``combine`` is invoked with
    the left and right values to compute the merged one.

    >>> from rowalgebra.model import Row, Table
    >>> jan = Table([Row({"shop": "A", "sold": 3}), Row({"shop": "B", "sold": 1})])
    >>> feb = Table([Row({"sold": 5}), Row({"sold": 2, "closed": True})])
    >>> union_rows_with(lambda a, b: a + b, jan, feb)
    Table([Row({'shop': 'A', 'sold': 8}), Row({'shop': 'B', 'sold': 3, 'closed': True})])
    """
    return zip_with(lambda lrow, rrow: lrow.union_with(combine, rrow), left, right)
