"""The Row, the atomic unit of data.

A row is an association of column keys to values, like a record
or a line of a CSV file where each value is named by its column.

Rows are immutable: every operation that would change a row
returns a new one instead and leaves the original untouched.
This means that rows can be freely shared between tables,
join results and groups without having to copy them.

>>> from rowalgebra.model import Row
>>> order = Row.from_pairs([("item", "book"), ("id", "129"), ("qty", "1")])
>>> order.lookup("item")
'book'
>>> order.insert("qty", "5")
Row({'item': 'book', 'id': '129', 'qty': '5'})
>>> order
Row({'item': 'book', 'id': '129', 'qty': '1'})
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Row(Mapping, Generic[K, V]):
    """An immutable mapping of column keys to values.

    Keys must be hashable, values only need to be hashable
    when the row is joined or grouped on them.

    Rows behave like read only dictionaries, so the usual
    ``row[key]``, ``key in row`` and ``len(row)`` work.
    Two rows are equal when they hold the same keys
    with the same values, regardless of their order.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping | Iterable[tuple] = ()) -> None:
        """
        :param data: A mapping or an iterable of ``(key, value)`` pairs.
                     When a key appears multiple times the last value wins.
        """
        self._data: dict[K, V] = dict(data)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple]) -> "Row[K, V]":
        """Build a row from a sequence of ``(key, value)`` pairs.

        Later duplicate keys overwrite earlier ones:

        >>> Row.from_pairs([("a", 1), ("b", 2), ("a", 3)])
        Row({'a': 3, 'b': 2})
        """
        return cls(pairs)

    @classmethod
    def _wrap(cls, data: dict) -> "Row[K, V]":
        # Takes ownership of ``data`` without copying it.
        row = cls.__new__(cls)
        row._data = data
        return row

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Row({self._data!r})"

    def lookup(self, key: K) -> V | None:
        """Value of the column, ``None`` if the row has no such column.

        Never raises, use ``key in row`` when a column might
        legitimately hold ``None``.
        """
        return self._data.get(key)

    def lookup_default(self, key: K, default: V) -> V:
        """Value of the column, ``default`` if the row has no such column."""
        return self._data.get(key, default)

    def keys(self) -> list[K]:
        """The column keys of the row, in the order they were inserted."""
        return list(self._data)

    def insert(self, key: K, value: V) -> "Row[K, V]":
        """Return a new row with ``key`` set to ``value``.

        If the column already exists its value is replaced
        in the new row, the original row is not modified.
        """
        data = dict(self._data)
        data[key] = value
        return self._wrap(data)

    def insert_derived(self, key: K, derive: Callable[["Row[K, V]"], V]) -> "Row[K, V]":
        """Create or update a column computing it from the whole row.

        ``derive`` is invoked once with the row and its
        result is stored under ``key`` in a new row:

        >>> r = Row({"qty": 2, "price": 50})
        >>> r.insert_derived("total", lambda row: row["qty"] * row["price"])
        Row({'qty': 2, 'price': 50, 'total': 100})
        """
        return self.insert(key, derive(self))

    def union(self, other: Mapping) -> "Row[K, V]":
        """Merge two rows, values of this row win on conflicts.

        This is a left biased union, all the columns of both rows
        end up in the result, but when both rows have the
        same column the value is taken from ``self``:

        >>> Row({"id": 1, "a": "x"}).union(Row({"id": 2, "b": "y"}))
        Row({'id': 1, 'a': 'x', 'b': 'y'})
        """
        data = dict(self._data)
        for key, value in other.items():
            if key not in data:
                data[key] = value
        return self._wrap(data)

    def union_with(self, combine: Callable[[V, V], V], other: Mapping) -> "Row[K, V]":
        """Merge two rows, resolving conflicts through ``combine``.

        When both rows have a column, the result holds
        ``combine(self_value, other_value)`` for it:

        >>> Row({"qty": 1, "a": "x"}).union_with(lambda a, b: a + b, Row({"qty": 4}))
        Row({'qty': 5, 'a': 'x'})
        """
        data = dict(self._data)
        for key, value in other.items():
            if key in data:
                data[key] = combine(data[key], value)
            else:
                data[key] = value
        return self._wrap(data)

    def matches(self, key: K, predicate: Callable[[V], bool]) -> bool:
        """Check the value of a column against a predicate.

        A row that doesn't have the column never matches,
        the predicate is not even invoked in that case.
        """
        if key not in self._data:
            return False
        return bool(predicate(self._data[key]))
