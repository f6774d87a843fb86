"""The RowAlgebra Compute Engine

The compute engine provides the relational operators
that work on the :mod:`rowalgebra.model` data structures.

The operators are plain functions that never modify their
inputs and always return new data, which allows to easily
chain them one after the other::

    (Table)-->filter_by_elem--(Table)-->inner_join--(rows)-->group_table--(groups)

Operators come in two families:

* Structural operators (:func:`filter_rows`, :func:`filter_by_elem`,
  :func:`zip_with`, :func:`union_rows_with`, :func:`scan_left`,
  :func:`scan_right`) take tables and return tables,
  preserving the order of the rows.
* Relational operators (:func:`inner_join`, :func:`group_by`,
  :func:`group_table`) accept any iterable of rows and
  return lists or dictionaries, as their result is not
  guaranteed to be non-empty or ordered like the input.

Every operator that can't produce a result returns ``None``:

>>> from rowalgebra.model import Row, Table
>>> from rowalgebra.compute import filter_by_elem, inner_join
>>> orders = Table([Row({"item": "book", "id": "129", "qty": 1}),
...                 Row({"item": "bike", "id": "410", "qty": 1})])
>>> prices = Table([Row({"id": "129", "price": 100}), Row({"id": "234", "price": 50})])
>>> inner_join("id", "id", orders, prices)
[Row({'item': 'book', 'id': '129', 'qty': 1, 'price': 100})]
>>> print(filter_by_elem(lambda qty: qty > 1, "qty", orders))
None
"""

from .filtering import filter_by_elem, filter_rows
from .grouping import group_by, group_table
from .join import build_index, inner_join, matching_rows
from .scanning import scan_left, scan_right
from .zipping import union_rows_with, zip_with

__all__ = (
    "filter_rows",
    "filter_by_elem",
    "zip_with",
    "union_rows_with",
    "scan_left",
    "scan_right",
    "build_index",
    "matching_rows",
    "inner_join",
    "group_by",
    "group_table",
)
