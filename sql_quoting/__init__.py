"""SQL quoting: type-directed, injection-safe escaping of values into SQL text.

Usage::

    from sql_quoting import Dialect, Table, quote_identifier, quote_typed_literal

    quote_identifier(Dialect.ANSI, Table("analytics", "orders"))
    # <SQL> "analytics"."orders"
    quote_typed_literal(Dialect.ANSI, [True, False, None])
    # <SQL> 1 / <SQL> 0 / <SQL> NULL

Every operation returns an :class:`SQL` fragment and passes an ``SQL`` input
through unchanged, which prevents double escaping.  The default dialect
follows ANSI SQL-92; a different backend can be plugged in via
``register_implementation()`` without touching consumer code.
"""

from ._api import quote_identifier, quote_string_literal, quote_typed_literal
from ._factory import available_dialects, get_quoter, register_implementation, reset_quoters
from ._protocols import SqlQuoter
from ._types import (
    SQL,
    Dialect,
    EmptyIdentifierError,
    NullInputError,
    SqlQuotingError,
    SqlTypeError,
    Table,
    UnknownDialectError,
    UnsupportedElementError,
    make_escaped,
)
from .config import Settings, load_settings
from .impl.ansi_impl import AnsiQuoter

__all__ = [
    # Operations
    "quote_identifier",
    "quote_string_literal",
    "quote_typed_literal",
    "make_escaped",
    # Factory
    "get_quoter",
    "register_implementation",
    "available_dialects",
    "reset_quoters",
    # Protocols & implementations
    "SqlQuoter",
    "AnsiQuoter",
    # Types
    "SQL",
    "Table",
    "Dialect",
    # Configuration
    "Settings",
    "load_settings",
    # Exceptions
    "SqlQuotingError",
    "SqlTypeError",
    "UnsupportedElementError",
    "NullInputError",
    "EmptyIdentifierError",
    "UnknownDialectError",
]
