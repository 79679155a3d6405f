"""Runtime-kind classification of raw values.

Quoters work on vectors: a bare scalar is treated as a one-element vector and
a ``list``/``tuple`` is taken element by element.  :func:`classify` inspects
the present (non-missing) elements and reports a single :class:`ValueKind`
that the quoters dispatch on.
"""

from __future__ import annotations

import enum
import math
import numbers
from decimal import Decimal
from typing import Any

from ._types import SQL, SqlTypeError, Table

BYTES_LIKE = (bytes, bytearray, memoryview)

# Scalars accepted as vector elements.
_SCALAR_TYPES = (str, *BYTES_LIKE, bool, numbers.Number, Decimal)


class ValueKind(str, enum.Enum):
    """The kind of a normalised vector, checked in declaration order."""

    TEXT = "text"
    MISSING = "missing"
    BLOB = "blob"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    MIXED = "mixed"


def kind_name(value: Any) -> str:
    """Short type name used in error messages."""
    return type(value).__name__


def is_missing(value: Any) -> bool:
    """``None`` and NaN both mark a missing value."""
    if value is None:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def is_numeric(value: Any) -> bool:
    if isinstance(value, Decimal):
        return True
    return isinstance(value, numbers.Real)


def as_values(value: Any) -> tuple[Any, ...]:
    """Normalise *value* into a tuple of elements.

    Raises:
        SqlTypeError: *value* is neither a scalar nor a ``list``/``tuple``.
    """
    if isinstance(value, (SQL, Table)):
        raise SqlTypeError(f"{kind_name(value)} is not a vector of raw values", kind=kind_name(value))
    if value is None or isinstance(value, _SCALAR_TYPES):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    raise SqlTypeError(
        f"Cannot quote a value of type {kind_name(value)}",
        kind=kind_name(value),
    )


def classify(values: tuple[Any, ...]) -> ValueKind:
    """Return the kind of a normalised vector.

    An empty vector classifies as text so that every operation maps it to an
    empty fragment.
    """
    present = [v for v in values if not is_missing(v)]
    if not values:
        return ValueKind.TEXT
    if not present:
        return ValueKind.MISSING
    if all(isinstance(v, str) for v in present):
        return ValueKind.TEXT
    if any(isinstance(v, BYTES_LIKE) for v in present):
        return ValueKind.BLOB
    if all(isinstance(v, bool) for v in present):
        return ValueKind.BOOLEAN
    if all(is_numeric(v) for v in present):
        return ValueKind.NUMERIC
    return ValueKind.MIXED


def describe(values: tuple[Any, ...]) -> str:
    """Comma-separated element type names, for error messages."""
    names = sorted({kind_name(v) for v in values if not is_missing(v)})
    return ", ".join(names) or "NoneType"
