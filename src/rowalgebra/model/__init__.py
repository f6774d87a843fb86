"""The RowAlgebra data model.

Data is modelled as :class:`Table` objects, which are
non-empty sequences of :class:`Row` objects, each row
being an immutable mapping of column keys to values::

    Table
    +-----------------------------------------+
    | Row({"item": "book", "id": "129", ...}) |
    | Row({"item": "ball", "id": "234", ...}) |
    +-----------------------------------------+

Rows don't need to share the same columns, a row
can lack a column that other rows in the same table have.
It's up to the operators to decide how to deal with that.
"""

from .row import Row
from .table import Table

__all__ = ("Row", "Table")
