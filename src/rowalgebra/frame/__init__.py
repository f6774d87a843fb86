"""Columnar frames and Apache Arrow interoperability.

The :class:`Frame` provides a columnar representation of data,
that can be filtered by column and converted from and to
:class:`rowalgebra.model.Table` and :mod:`pyarrow` objects.
"""

from .frame import Frame, filter_by_key

__all__ = ("Frame", "filter_by_key")
