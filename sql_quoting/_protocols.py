"""SQL quoting protocol definitions.

These define the interface contract that ANY quoter must satisfy.  Consumer
code depends on this protocol, never on a concrete implementation.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ._types import SQL


@runtime_checkable
class SqlQuoter(Protocol):
    """Turn raw Python values into escaped SQL fragments for one dialect.

    Every method returns an :class:`SQL` input unchanged and never produces a
    partial result: it either quotes the whole vector or raises.
    """

    name: str

    def quote_identifier(self, value: Any) -> SQL:
        """Quote table, column or schema names.

        Accepts text, a :class:`~sql_quoting.Table` composite or an already
        escaped :class:`SQL`.

        Raises:
            SqlTypeError: *value* is not text.
            NullInputError: any element is missing.
        """
        ...

    def quote_string_literal(self, value: Any) -> SQL:
        """Quote text as string literals.  Missing elements become ``NULL``.

        Raises:
            SqlTypeError: *value* is not text.
        """
        ...

    def quote_typed_literal(self, value: Any) -> SQL:
        """Quote a value as a literal of the SQL type matching its kind.

        Dispatch order: escaped, text, blob sequence, boolean, numeric.

        Raises:
            SqlTypeError: the kind is not supported.
            UnsupportedElementError: an element of a blob or numeric vector
                cannot be written as a literal.
        """
        ...
