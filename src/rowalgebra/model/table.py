"""The Table, a non-empty ordered sequence of rows.

A table can never be empty: building one out of no rows
raises :class:`rowalgebra.errors.EmptyInputError`.
This guarantees that operations like :meth:`Table.head`
are always defined, and forces the operations that might
end up with no rows (like filtering) to explicitly
say so by returning ``None`` instead of a table.

>>> from rowalgebra.model import Row, Table
>>> orders = Table([Row({"item": "book", "qty": 1}), Row({"item": "ball", "qty": 3})])
>>> orders.head()
Row({'item': 'book', 'qty': 1})
>>> orders.filter_by_elem(lambda qty: qty > 2, "qty")
Table([Row({'item': 'ball', 'qty': 3})])
>>> print(orders.filter_by_elem(lambda qty: qty > 5, "qty"))
None
"""

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from ..errors import EmptyInputError

R = TypeVar("R")


class Table(Sequence, Generic[R]):
    """Immutable non-empty sequence of rows.

    The order of the rows is preserved by the structural
    operations (filtering, zipping and scanning), while joins
    and groupings produce plain lists and dictionaries as their
    result is not guaranteed to be non-empty or ordered like the input.

    Usually a table contains :class:`rowalgebra.model.Row` objects,
    but it can hold any value, for example the partial results
    of :meth:`scan_left`.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[R]) -> None:
        """
        :param rows: The rows of the table, at least one must be provided.
        """
        rows = tuple(rows)
        if not rows:
            raise EmptyInputError("A Table requires at least one row")
        self._rows: tuple[R, ...] = rows

    @classmethod
    def from_list(cls, rows: Iterable[R]) -> "Table[R]":
        """Build a table, raising EmptyInputError if there are no rows."""
        return cls(rows)

    @classmethod
    def from_list_safe(cls, rows: Iterable[R]) -> "Table[R] | None":
        """Build a table, or return ``None`` if there are no rows.

        >>> print(Table.from_list_safe([]))
        None
        >>> Table.from_list_safe([1, 2])
        Table([1, 2])
        """
        rows = tuple(rows)
        if not rows:
            return None
        return cls(rows)

    def __getitem__(self, index):
        # Slices can be empty, so they are returned as plain tuples.
        return self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[R]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None

    def __repr__(self) -> str:
        return f"Table({list(self._rows)!r})"

    def head(self) -> R:
        """The first row of the table, always available."""
        return self._rows[0]

    def filter(self, predicate: Callable[[R], bool]) -> "Table[R] | None":
        """See :func:`rowalgebra.compute.filter_rows`."""
        from ..compute.filtering import filter_rows

        return filter_rows(predicate, self)

    def filter_by_elem(self, predicate: Callable[[Any], bool], key: Hashable) -> "Table[R] | None":
        """See :func:`rowalgebra.compute.filter_by_elem`."""
        from ..compute.filtering import filter_by_elem

        return filter_by_elem(predicate, key, self)

    def zip_with(self, combine: Callable[[R, Any], Any], other: "Table") -> "Table":
        """See :func:`rowalgebra.compute.zip_with`."""
        from ..compute.zipping import zip_with

        return zip_with(combine, self, other)

    def scan_left(self, combine: Callable[[Any, R], Any], seed: Any) -> "Table":
        """See :func:`rowalgebra.compute.scan_left`."""
        from ..compute.scanning import scan_left

        return scan_left(combine, seed, self)

    def scan_right(self, combine: Callable[[R, Any], Any], seed: Any) -> "Table":
        """See :func:`rowalgebra.compute.scan_right`."""
        from ..compute.scanning import scan_right

        return scan_right(combine, seed, self)

    def group_by(self, key: Hashable) -> dict | None:
        """See :func:`rowalgebra.compute.group_by`."""
        from ..compute.grouping import group_by

        return group_by(key, self)

    def group_table(self, key: Hashable) -> "dict[Any, Table[R]] | None":
        """See :func:`rowalgebra.compute.group_table`."""
        from ..compute.grouping import group_table

        return group_table(key, self)

    def inner_join(self, other: Iterable, left_key: Hashable, right_key: Hashable) -> list | None:
        """Join this table (left side) with ``other`` (right side).

        See :func:`rowalgebra.compute.inner_join`.
        """
        from ..compute.join import inner_join

        return inner_join(left_key, right_key, self, other)
