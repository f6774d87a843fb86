"""Operators that implement filtering of rows.

A common request in queries is to filter the data to
pick only the rows that respect a specific filter.
An example is the ``WHERE`` condition in SQL queries.

As a :class:`rowalgebra.model.Table` can't be empty,
when no row survives the filter ``None`` is returned
in place of the table.

Filtering treats missing data as a fact about the data,
not as an error: a row that lacks the filtered column
is simply discarded.
"""

import logging
from collections.abc import Callable, Hashable
from typing import Any

from ..model import Table
from ..utils.inspect import get_qualname

log = logging.getLogger(__name__)


def filter_rows(predicate: Callable[[Any], bool], table: Table) -> Table | None:
    """Keep the rows for which ``predicate`` is true.

    The predicate receives the whole row and the order
    of the surviving rows is preserved.

    >>> from rowalgebra.model import Row, Table
    >>> data = Table([Row({"values": v}) for v in [1, 2, 3, 4, 5]])
    >>> filter_rows(lambda row: row["values"] > 3, data)
    Table([Row({'values': 4}), Row({'values': 5})])
    >>> print(filter_rows(lambda row: row["values"] > 10, data))
    None
    """
    kept = [row for row in table if predicate(row)]
    if not kept:
        log.debug("filter %s discarded all %d rows", get_qualname(predicate), len(table))
        return None
    return Table(kept)


def filter_by_elem(
    predicate: Callable[[Any], bool], key: Hashable, table: Table
) -> Table | None:
    """Keep the rows where the value of column ``key`` satisfies ``predicate``.

    The predicate receives only the value of the column,
    rows that don't have the column never match.

    >>> from rowalgebra.model import Row, Table
    >>> data = Table([Row({"n_legs": 2}), Row({"name": "snake"}), Row({"n_legs": 100})])
    >>> filter_by_elem(lambda v: v >= 5, "n_legs", data)
    Table([Row({'n_legs': 100})])
    """
    return filter_rows(lambda row: row.matches(key, predicate), table)
