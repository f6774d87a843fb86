"""Operators that group rows by the value of a column.

Frequently when analysing data is necessary to split
it in groups that share the same value for a column,
like the ``GROUP BY`` clause in SQL queries.

For example, given the following data::

    city, shop, n_employees
    New York, Shop A, 10
    New York, Shop B, 15
    Los Angeles, Shop C, 8
    Los Angeles, Shop D, 12
    New York, Shop E, 20

Grouping by city would lead to::

    New York:
        New York, Shop A, 10
        New York, Shop B, 15
        New York, Shop E, 20
    Los Angeles:
        Los Angeles, Shop C, 8
        Los Angeles, Shop D, 12

Grouping is implemented through the same hash table
built during the build phase of :func:`rowalgebra.compute.inner_join`.
"""

from collections.abc import Hashable, Iterable

from ..model import Row, Table
from .join import build_index


def group_by(key: Hashable, rows: Iterable[Row]) -> dict[Hashable, list[Row]] | None:
    """Group rows by the value of column ``key``.

    Each group preserves the order of the rows in the input.
    If any of the rows lacks the column, the rows can't be grouped
    and ``None`` is returned.

    >>> from rowalgebra.model import Row
    >>> shops = [Row({"city": "New York", "n_employees": 10}),
    ...          Row({"city": "Los Angeles", "n_employees": 8}),
    ...          Row({"city": "New York", "n_employees": 20})]
    >>> groups = group_by("city", shops)
    >>> sorted(groups)
    ['Los Angeles', 'New York']
    >>> groups["New York"]
    [Row({'city': 'New York', 'n_employees': 10}), Row({'city': 'New York', 'n_employees': 20})]
    >>> print(group_by("shop", shops))
    None
    """
    return build_index(key, rows)


def group_table(key: Hashable, rows: Iterable[Row]) -> dict[Hashable, Table] | None:
    """Group rows by the value of column ``key`` into tables.

    Like :func:`group_by` but each group is a :class:`rowalgebra.model.Table`.
    Groups are only created when a row is added to them,
    so they can never be empty.

    >>> from rowalgebra.model import Row
    >>> group_table("city", [Row({"city": "Rome"}), Row({"city": "Rome", "shop": "B"})])
    {'Rome': Table([Row({'city': 'Rome'}), Row({'city': 'Rome', 'shop': 'B'})])}
    """
    groups = group_by(key, rows)
    if groups is None:
        return None
    return {value: Table(bucket) for value, bucket in groups.items()}
