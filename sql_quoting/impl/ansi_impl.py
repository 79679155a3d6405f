"""ANSI SQL-92 implementation of the quoting protocol.

This is the default quoter.  Backends with different rules subclass
:class:`AnsiQuoter` and override the formatting hooks; the passthrough of
already-escaped fragments and the dispatch order are inherited.

Only ``"`` in identifiers and ``'`` in string literals are escaped.  Control
characters pass through untouched.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from .._kinds import BYTES_LIKE, ValueKind, as_values, classify, describe, is_missing, kind_name
from .._types import SQL, NullInputError, SqlTypeError, Table, UnsupportedElementError

if TYPE_CHECKING:
    from ..config import Settings


class AnsiQuoter:
    """Quote values using ANSI SQL-92 rules."""

    name = "ansi"
    null_keyword = "NULL"

    def __init__(self, *, hex_uppercase: bool = False) -> None:
        self.hex_uppercase = hex_uppercase

    @classmethod
    def from_settings(cls, settings: Settings) -> AnsiQuoter:
        return cls(hex_uppercase=settings.blob_hex_uppercase)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(hex_uppercase={self.hex_uppercase})"

    # -- identifiers ----------------------------------------------------------

    def quote_identifier(self, value: Any) -> SQL:
        if isinstance(value, SQL):
            return value
        if isinstance(value, Table):
            quoted = []
            for index, part in enumerate(value.parts):
                fragment = self.quote_identifier(part)
                if len(fragment) != 1:
                    raise SqlTypeError(
                        f"Table part {index} must be a single name, got {len(fragment)} values",
                        kind=kind_name(part),
                    )
                quoted.append(fragment[0])
            return SQL((".".join(quoted),))

        values = as_values(value)
        if classify(values) not in (ValueKind.TEXT, ValueKind.MISSING):
            raise SqlTypeError(
                f"value must be character or already-escaped, got {describe(values)}",
                kind=describe(values),
            )
        for index, element in enumerate(values):
            if is_missing(element):
                raise NullInputError(
                    f"Cannot pass NULL to quote_identifier() (element {index})",
                    index=index,
                )
        return SQL(tuple(self.escape_identifier(element) for element in values))

    def escape_identifier(self, text: str) -> str:
        """Double embedded ``"`` and wrap *text* in double quotes."""
        return '"' + text.replace('"', '""') + '"'

    # -- string literals ------------------------------------------------------

    def quote_string_literal(self, value: Any) -> SQL:
        if isinstance(value, SQL):
            return value
        if isinstance(value, Table):
            raise SqlTypeError("value must be character or already-escaped, got Table", kind="Table")

        values = as_values(value)
        if classify(values) not in (ValueKind.TEXT, ValueKind.MISSING):
            raise SqlTypeError(
                f"value must be character or already-escaped, got {describe(values)}",
                kind=describe(values),
            )
        return SQL(
            tuple(self.null_keyword if is_missing(element) else self.escape_string(element) for element in values)
        )

    def escape_string(self, text: str) -> str:
        """Double embedded ``'`` and wrap *text* in single quotes."""
        return "'" + text.replace("'", "''") + "'"

    # -- typed literals -------------------------------------------------------

    def quote_typed_literal(self, value: Any) -> SQL:
        # Explicit ordered dispatch: escaped, text, blob, boolean, numeric.
        if isinstance(value, SQL):
            return value
        if isinstance(value, Table):
            raise SqlTypeError("Cannot quote a Table as a literal", kind="Table")

        values = as_values(value)
        kind = classify(values)

        if kind in (ValueKind.TEXT, ValueKind.MISSING):
            return self.quote_string_literal(values)
        if kind is ValueKind.BLOB:
            return SQL(tuple(self._blob_literal(index, element) for index, element in enumerate(values)))
        if kind is ValueKind.BOOLEAN:
            return SQL(
                tuple(self.null_keyword if is_missing(element) else self.format_boolean(element) for element in values)
            )
        if kind is ValueKind.NUMERIC:
            return SQL(tuple(self._numeric_literal(index, element) for index, element in enumerate(values)))

        raise SqlTypeError(
            f"Cannot quote a literal from values of type {describe(values)}",
            kind=describe(values),
        )

    def _blob_literal(self, index: int, element: Any) -> str:
        if is_missing(element):
            return self.null_keyword
        if not isinstance(element, BYTES_LIKE):
            raise UnsupportedElementError(
                f"Blob sequences must contain bytes or None, got {kind_name(element)} at element {index}",
                index=index,
                kind=kind_name(element),
            )
        return self.format_blob(bytes(element))

    def _numeric_literal(self, index: int, element: Any) -> str:
        if is_missing(element):
            return self.null_keyword
        if not _is_finite(element):
            raise UnsupportedElementError(
                f"Cannot write non-finite number {element!r} as a SQL literal (element {index})",
                index=index,
                kind=kind_name(element),
            )
        return self.format_number(element)

    def format_blob(self, data: bytes) -> str:
        """Render *data* as ``X'<hex>'``, two digits per byte."""
        digits = data.hex()
        if self.hex_uppercase:
            digits = digits.upper()
        return f"X'{digits}'"

    def format_boolean(self, flag: bool) -> str:
        """Booleans become the integers 1 and 0."""
        return self.format_number(int(flag))

    def format_number(self, number: Any) -> str:
        """Locale-independent decimal text for *number*."""
        if isinstance(number, numbers.Integral):
            return str(int(number))
        if isinstance(number, Decimal):
            return str(number)
        return repr(float(number))


def _is_finite(number: Any) -> bool:
    if isinstance(number, Decimal):
        return number.is_finite()
    if isinstance(number, numbers.Integral):
        return True
    return math.isfinite(float(number))
