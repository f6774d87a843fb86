"""Operators that implement join operations.

The join operations are implemented through a hash join algorithm
that builds a hash table from one of the tables (the build phase)
and then probes it with the rows of the other table to find
the matching rows (the probe phase).

The build phase is also what :mod:`rowalgebra.compute.grouping`
relies on to group rows by the value of a column.

Inner Join
==========

Provided by :func:`inner_join`, the function provides a complete description
of the steps involved in performing an inner join operation.

>>> from rowalgebra.model import Row, Table
>>> from rowalgebra.compute import inner_join
>>> left = Table([Row({"id": 1, "name": "Alice"}), Row({"id": 2, "name": "Bob"}),
...               Row({"id": 3, "name": "Charlie"})])
>>> right = Table([Row({"id": 3, "age": 25}), Row({"id": 2, "age": 30})])
>>> for row in inner_join("id", "id", left, right):
...     print(row)
Row({'id': 2, 'name': 'Bob', 'age': 30})
Row({'id': 3, 'name': 'Charlie', 'age': 25})

Missing keys
============

A join key is a structural requirement of the join: if any row,
on either side, lacks its join key the whole join is aborted
and ``None`` is returned. On the other side a row whose key has no
match in the other table is a perfectly valid outcome and just
contributes no rows to the result.
"""

import logging
from collections.abc import Hashable, Iterable

from ..errors import MissingKeyError
from ..model import Row

log = logging.getLogger(__name__)


def build_index(key: Hashable, rows: Iterable[Row]) -> dict[Hashable, list[Row]] | None:
    """Index rows by the value they have for column ``key``.

    This is the build phase of the hash join algorithm,
    rows having the same value are collected in the same
    bucket, in the order they were provided.

    >>> from rowalgebra.model import Row
    >>> build_index("city", [Row({"city": "Rome", "shop": "A"}), Row({"city": "Milan", "shop": "B"}),
    ...                      Row({"city": "Rome", "shop": "C"})])
    {'Rome': [Row({'city': 'Rome', 'shop': 'A'}), Row({'city': 'Rome', 'shop': 'C'})], 'Milan': [Row({'city': 'Milan', 'shop': 'B'})]}

    When a row doesn't have the column, the index can't be built
    and ``None`` is returned.
    """
    try:
        return _build(key, rows)
    except MissingKeyError as e:
        log.debug("Unable to build index on %r: %s", key, e)
        return None


def matching_rows(key: Hashable, value: Hashable, rows: Iterable[Row]) -> list[Row] | None:
    """Return all the rows that have ``value`` in column ``key``.

    This is a full build and probe cycle for a single value,
    when multiple values have to be looked up prefer
    :func:`build_index` and probe the index directly.

    An empty list is returned when no row matches,
    while ``None`` is returned when any row lacks the column.
    """
    index = build_index(key, rows)
    if index is None:
        return None
    return list(index.get(value, []))


def inner_join(
    left_key: Hashable,
    right_key: Hashable,
    left_rows: Iterable[Row],
    right_rows: Iterable[Row],
) -> list[Row] | None:
    """Join two sets of rows using an inner join.

    Both sides can be a :class:`rowalgebra.model.Table` or any
    finite iterable of rows, each side is consumed only once.

    Supposing we have two tables::

        left:
        +----+--------+
        | id | name   |
        +----+--------+
        | 1  | Alice  |
        | 2  | Bob    |
        | 3  | Charlie|
        +----+--------+

        right:
        +----+-----+
        | id | age |
        +----+-----+
        | 3  | 25  |
        | 2  | 30  |
        +----+-----+

    We would perform the following steps:

    1. Build a hash table of the right rows, indexed by the
       value of their join key::

        {3: [{id: 3, age: 25}],
         2: [{id: 2, age: 30}]}

    2. For each left row, in order, look up the value of its
       join key in the hash table. Alice has no match
       and contributes no rows, while Bob and Charlie
       each find one matching right row.

    3. Merge each left row with every right row it matched.
       The merge is a left biased union, so when both rows have
       the same column (like ``id`` when the two join keys
       share the same name) the value of the left row is kept::

        combined:
        +----+--------+-----+
        | id | name   | age |
        +----+--------+-----+
        | 2  | Bob    | 30  |
        | 3  | Charlie| 25  |
        +----+--------+-----+

    The result follows the order of the left rows, and for each
    left row its matches follow the order of the right rows.

    :param left_key: The key to join on in the left rows.
    :param right_key: The key to join on in the right rows.
    :param left_rows: The left rows to join, drive the order of the result.
    :param right_rows: The right rows to join, used to build the hash table.
    :returns: The joined rows, possibly an empty list when nothing matched,
              or ``None`` when any row lacks its join key.
    """
    try:
        index = _build(right_key, right_rows)
        return list(_probe(left_key, left_rows, index))
    except MissingKeyError as e:
        log.debug("Unable to join on %r = %r: %s", left_key, right_key, e)
        return None


def _build(key: Hashable, rows: Iterable[Row]) -> dict[Hashable, list[Row]]:
    """Build phase of the hash join, raises MissingKeyError."""
    index: dict[Hashable, list[Row]] = {}
    for position, row in enumerate(rows):
        if key not in row:
            raise MissingKeyError(key, position)
        index.setdefault(row[key], []).append(row)
    return index


def _probe(key: Hashable, rows: Iterable[Row], index: dict[Hashable, list[Row]]):
    """Probe phase of the hash join, raises MissingKeyError."""
    for position, row in enumerate(rows):
        if key not in row:
            raise MissingKeyError(key, position)
        for match in index.get(row[key], ()):
            yield row.union(match)
