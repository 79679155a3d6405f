"""Module-level quoting operations.

Each function resolves the dialect handle through :func:`get_quoter` and
delegates to the quoter.  An :class:`SQL` value is returned unchanged before
the dialect is even looked at, so already-escaped fragments survive any
number of passes.
"""

from __future__ import annotations

from typing import Any

from ._factory import get_quoter
from ._protocols import SqlQuoter
from ._types import SQL, Dialect

DialectHandle = Dialect | str | SqlQuoter | None


def quote_identifier(dialect: DialectHandle, value: Any) -> SQL:
    """Quote *value* for use as a table, column or schema name.

    Args:
        dialect: Dialect enum member, registered name, quoter instance, or
            ``None`` for the configured default.
        value: Text, a vector of text, a :class:`~sql_quoting.Table`, or an
            already-escaped :class:`SQL`.

    Returns:
        One quoted element per input element; a ``Table`` yields a single
        element with its parts joined by ``.``.

    Raises:
        SqlTypeError: *value* is not text.
        NullInputError: any element is ``None``.
    """
    if isinstance(value, SQL):
        return value
    return get_quoter(dialect).quote_identifier(value)


def quote_string_literal(dialect: DialectHandle, value: Any) -> SQL:
    """Quote *value* as string literals; ``None`` elements become ``NULL``."""
    if isinstance(value, SQL):
        return value
    return get_quoter(dialect).quote_string_literal(value)


def quote_typed_literal(dialect: DialectHandle, value: Any) -> SQL:
    """Quote *value* as literals of the SQL type matching its kind.

    Text delegates to :func:`quote_string_literal`, byte strings become
    ``X'..'`` blob literals, booleans become ``1``/``0`` and numbers their
    decimal text.  ``None`` and NaN become ``NULL``.
    """
    if isinstance(value, SQL):
        return value
    return get_quoter(dialect).quote_typed_literal(value)
