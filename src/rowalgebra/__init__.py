"""RowAlgebra

Relational algebra on in-memory rows.

RowAlgebra models tabular data as non-empty tables of
immutable rows, where each row maps column keys to values,
and provides the relational operators to filter, group and join them.

The library is constituted by multiple components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Model, which defines :class:`Row` and :class:`Table`.
* The Compute Engine, which provides the operators working on tables.
* The Frame, a columnar representation used to exchange data with Apache Arrow.

For the user guide and code documentation of each component, refer to the
component itself.

The library logs through the ``rowalgebra`` logger and
never configures handlers on its own, it's up to applications
to enable it, for example with ``logging.basicConfig(level=logging.DEBUG)``.
"""

import logging

from . import compute, frame, model
from .errors import EmptyInputError, MissingKeyError
from .model import Row, Table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "compute",
    "frame",
    "model",
    "Row",
    "Table",
    "EmptyInputError",
    "MissingKeyError",
)
