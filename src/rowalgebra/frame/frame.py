"""The Frame, a columnar companion of the Table.

While a :class:`rowalgebra.model.Table` stores each row as a mapping,
a :class:`Frame` stores the column keys only once and each row
as a plain vector of values, positionally aligned to the keys::

    keys:  ["item", "id", "qty"]
    index: {"item": 0, "id": 1, "qty": 2}
    rows:  [("book", "129", "1"),
            ("ball", "234", "1")]

This is the same layout used by Apache Arrow, so frames are
the entry and exit point for exchanging data with
:class:`pyarrow.Table` and :class:`pyarrow.RecordBatch` objects.

>>> import pyarrow as pa
>>> frame = Frame.from_arrow(pa.record_batch({"animals": ["Flamingo", "Horse", "Centipede"],
...                                           "n_legs": [2, 4, 100]}))
>>> str(frame)
"Frame(columns=['animals', 'n_legs'], rows=3)"
>>> frame.filter_by_key(lambda n_legs: n_legs >= 4, "n_legs").to_table()
Table([Row({'animals': 'Horse', 'n_legs': 4}), Row({'animals': 'Centipede', 'n_legs': 100})])
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, Self

import pyarrow as pa

from ..model import Row, Table
from ..utils.inspect import get_qualname

log = logging.getLogger(__name__)


class Frame:
    """Data organised as column keys and row vectors.

    Differently from tables, frames can be empty,
    as they always know their columns even when they have no rows.
    """

    def __init__(self, keys: Iterable[Hashable], rows: Iterable[Sequence] = ()) -> None:
        """
        :param keys: The column keys, in the order of the values in the rows.
        :param rows: The row vectors, each value positioned
                     like the column key it belongs to.
        """
        self.keys = list(keys)
        self.index = {key: position for position, key in enumerate(self.keys)}
        if len(self.index) != len(self.keys):
            raise ValueError(f"Duplicate column keys in {self.keys}")
        self.rows = [tuple(row) for row in rows]

    def __str__(self) -> str:
        return f"Frame(columns={self.keys}, rows={len(self.rows)})"

    __repr__ = __str__

    def __len__(self) -> int:
        return len(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return self.keys == other.keys and self.rows == other.rows

    __hash__ = None

    def filter_by_key(self, predicate: Callable[[Any], bool], key: Hashable) -> Self | None:
        """Keep the rows where the value of column ``key`` satisfies ``predicate``.

        If the column doesn't exist, or any of the rows is too short
        to have a value for it, the frame can't be filtered and
        ``None`` is returned. A filter that matches no rows
        instead leads to an empty frame.
        """
        position = self.index.get(key)
        if position is None:
            log.debug("Unable to filter %s on unknown column %r", self, key)
            return None

        kept = []
        for rownum, row in enumerate(self.rows):
            if position >= len(row):
                log.debug("Unable to filter %s, row %d has no value for %r", self, rownum, key)
                return None
            if predicate(row[position]):
                kept.append(row)
        log.debug("filter %s kept %d of %d rows", get_qualname(predicate), len(kept), len(self.rows))
        return self.__class__(self.keys, kept)

    @classmethod
    def from_arrow(cls, data: pa.Table | pa.RecordBatch) -> Self:
        """Create a Frame out of a pyarrow Table or RecordBatch."""
        columns = [column.to_pylist() for column in data.columns]
        return cls(data.column_names, zip(*columns))

    def to_arrow(self) -> pa.Table:
        """Export the Frame data as a :class:`pyarrow.Table`.

        Rows that are too short to have a value for
        a column will have a null value for it.
        """
        return pa.Table.from_pydict(
            {
                key: [row[position] if position < len(row) else None for row in self.rows]
                for key, position in self.index.items()
            }
        )

    @classmethod
    def from_table(cls, table: Iterable[Row]) -> Self:
        """Create a Frame out of the rows of a Table.

        The columns of the frame are those of the rows,
        in the order they are first encountered.
        When a row lacks one of the columns its value is ``None``.

        >>> from rowalgebra.model import Row, Table
        >>> Frame.from_table(Table([Row({"id": 1}), Row({"id": 2, "price": 50})])).rows
        [(1, None), (2, 50)]
        """
        table = list(table)
        keys = list(dict.fromkeys(key for row in table for key in row))
        return cls(keys, (tuple(row.lookup(key) for key in keys) for row in table))

    def to_table(self) -> Table | None:
        """Convert the Frame to a Table, ``None`` if the frame has no rows."""
        return Table.from_list_safe(Row(zip(self.keys, row)) for row in self.rows)


def filter_by_key(predicate: Callable[[Any], bool], key: Hashable, frame: Frame) -> Frame | None:
    """See :meth:`Frame.filter_by_key`."""
    return frame.filter_by_key(predicate, key)
