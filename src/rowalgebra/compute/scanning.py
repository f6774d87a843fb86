"""Operators that accumulate values over the rows of a table.

Scanning is like folding a table into a single value,
but instead of returning only the final accumulated value
it returns all the intermediate ones too. This is useful to
compute things like running totals.

The accumulated values include the seed, so the resulting
table always has one more entry than the scanned one.
"""

from collections.abc import Callable
from typing import Any

from ..model import Table


def scan_left(combine: Callable[[Any, Any], Any], seed: Any, table: Table) -> Table:
    """Accumulate from the first row to the last one.

    ``combine`` is invoked as ``combine(accumulated, row)``
    and the result starts with the seed.

    >>> from rowalgebra.model import Row, Table
    >>> sales = Table([Row({"sold": 3}), Row({"sold": 1}), Row({"sold": 5})])
    >>> scan_left(lambda total, row: total + row["sold"], 0, sales)
    Table([0, 3, 4, 9])
    """
    acc = seed
    results = [acc]
    for row in table:
        acc = combine(acc, row)
        results.append(acc)
    return Table(results)


def scan_right(combine: Callable[[Any, Any], Any], seed: Any, table: Table) -> Table:
    """Accumulate from the last row to the first one.

    ``combine`` is invoked as ``combine(row, accumulated)``
    and the result ends with the seed.

    >>> from rowalgebra.model import Row, Table
    >>> sales = Table([Row({"sold": 3}), Row({"sold": 1}), Row({"sold": 5})])
    >>> scan_right(lambda row, total: row["sold"] + total, 0, sales)
    Table([9, 6, 5, 0])
    """
    acc = seed
    results = [acc]
    for row in reversed(table):
        acc = combine(row, acc)
        results.append(acc)
    results.reverse()
    return Table(results)
