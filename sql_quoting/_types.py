"""SQL quoting shared types.

Every type here is dialect-agnostic.  Quoter implementations consume and
produce these types exclusively; consumer code never sees a backend's
internals.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

# ---------------------------------------------------------------------------
# Dialect
# ---------------------------------------------------------------------------


class Dialect(str, enum.Enum):
    """Dialects shipped with the package.

    Further dialects are plain names registered through
    :func:`sql_quoting.register_implementation`.
    """

    ANSI = "ansi"


# ---------------------------------------------------------------------------
# Escaped fragments
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SQL:
    """A sequence of text values that are already valid SQL.

    Immutable.  Every quoting operation returns an ``SQL`` and passes an
    ``SQL`` input through unchanged, so a fragment is never escaped twice.
    A single ``str`` becomes a one-element fragment.
    """

    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        raw = self.values
        if isinstance(raw, str):
            values: tuple[str, ...] = (raw,)
        elif isinstance(raw, Iterable):
            values = tuple(raw)
        else:
            raise SqlTypeError(
                f"SQL fragments must be built from text, got {type(raw).__name__}",
                kind=type(raw).__name__,
            )
        for value in values:
            if not isinstance(value, str):
                raise SqlTypeError(
                    f"SQL fragments must be built from text, got {type(value).__name__}",
                    kind=type(value).__name__,
                )
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> SQL: ...

    def __getitem__(self, index: int | slice) -> str | SQL:
        if isinstance(index, slice):
            return SQL(self.values[index])
        return self.values[index]

    def __repr__(self) -> str:
        if not self.values:
            return "<SQL>"
        return "\n".join(f"<SQL> {value}" for value in self.values)

    def __str__(self) -> str:
        return self.join()

    def join(self, sep: str = ", ") -> str:
        """Concatenate the fragments into one piece of query text."""
        return sep.join(self.values)


def make_escaped(values: str | Iterable[str] = ()) -> SQL:
    """Label *values* as already-escaped SQL."""
    return SQL(values)


# ---------------------------------------------------------------------------
# Composite identifiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, init=False)
class Table:
    """A composite identifier such as ``schema.table``.

    Each part is quoted on its own and the results are joined with ``.``.
    Parts may be plain text or already-escaped :class:`SQL`.
    """

    parts: tuple[str | SQL, ...]

    def __init__(self, *parts: str | SQL) -> None:
        if not parts:
            raise EmptyIdentifierError("Table requires at least one name part")
        object.__setattr__(self, "parts", tuple(parts))


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SqlQuotingError(Exception):
    """Base exception for all sql_quoting errors."""


class SqlTypeError(SqlQuotingError, TypeError):
    """The value's kind is not accepted by the quoting operation."""

    def __init__(self, message: str, *, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class UnsupportedElementError(SqlTypeError):
    """One element of an otherwise acceptable vector cannot be quoted."""

    def __init__(self, message: str, *, index: int, kind: str | None = None) -> None:
        super().__init__(message, kind=kind)
        self.index = index


class NullInputError(SqlQuotingError, ValueError):
    """A missing value was supplied where NULL is not allowed."""

    def __init__(self, message: str, *, index: int) -> None:
        super().__init__(message)
        self.index = index


class EmptyIdentifierError(SqlQuotingError, ValueError):
    """A composite identifier was built without any name parts."""


class UnknownDialectError(SqlQuotingError, KeyError):
    """The dialect handle does not name a registered dialect."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
