"""Exceptions raised by RowAlgebra.

Only :class:`EmptyInputError` ever reaches the caller, when a
:class:`rowalgebra.model.Table` is built out of nothing.

:class:`MissingKeyError` is used internally by the operators that
need a key on every row (joins and grouping). The operators catch it
at their boundary and return ``None``, so that callers can decide
whether a malformed input is fatal for them or not.
"""


class EmptyInputError(ValueError):
    """A Table was constructed from an empty sequence of rows."""


class MissingKeyError(KeyError):
    """A row lacks a key that the operation requires on every row."""

    def __init__(self, key, index: int) -> None:
        """
        :param key: The column key that was looked up.
        :param index: Position of the offending row in its input.
        """
        super().__init__(key)
        self.key = key
        self.index = index

    def __str__(self) -> str:
        return f"row {self.index} has no key {self.key!r}"
