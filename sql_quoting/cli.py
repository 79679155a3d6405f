"""sql-quoting CLI -- Typer-based front end to the quoting operations.

Quoted fragments go to *stdout*, one per line (or as a JSON array with
``--json``), so the output composes with shell pipelines.  Human-readable
output goes to *stderr* via Rich.
"""

from __future__ import annotations

import enum
import json
import logging
import sys
from typing import Any, Callable

import typer
from rich.console import Console
from rich.markup import escape

from ._api import quote_identifier, quote_string_literal, quote_typed_literal
from ._types import SQL, SqlQuotingError, Table
from .display import display_fragment, display_pairs

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App & global state
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="sql-quoting",
    help="Quote identifiers and literals as injection-safe SQL.",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Mutable global options populated by the Typer callback.
_json_output: bool = False
_dialect: str | None = None


class LiteralType(str, enum.Enum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BLOB = "blob"


_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "1"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "0"})


# ---------------------------------------------------------------------------
# Callback -- global options
# ---------------------------------------------------------------------------


@app.callback()
def _global_options(
    dialect: str | None = typer.Option(
        None,
        "--dialect",
        help="Dialect to quote for (defaults to SQL_QUOTING_DEFAULT_DIALECT or 'ansi').",
    ),
    json_mode: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Emit a JSON array to stdout instead of one fragment per line.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """Global options applied to every command."""
    global _json_output, _dialect  # noqa: PLW0603
    _json_output = json_mode
    _dialect = dialect
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=3)


def _apply_na(values: list[str], na: str) -> list[str | None]:
    return [None if v == na else v for v in values]


def _parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as exc:
        raise _fail(f"Invalid number '{text}'") from exc


def _parse_boolean(text: str) -> bool:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise _fail(f"Invalid boolean '{text}'. Use one of: {', '.join(sorted(_TRUE_WORDS | _FALSE_WORDS))}")


def _parse_blob(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise _fail(f"Invalid hex blob '{text}': {exc}") from exc


_PARSERS: dict[LiteralType, Callable[[str], Any]] = {
    LiteralType.TEXT: str,
    LiteralType.NUMBER: _parse_number,
    LiteralType.BOOLEAN: _parse_boolean,
    LiteralType.BLOB: _parse_blob,
}


def _run(op: Callable[[Any, Any], SQL], value: Any, inputs: list[Any], show: bool) -> None:
    """Quote *value* with *op* and write the result."""
    try:
        fragment = op(_dialect, value)
    except SqlQuotingError as exc:
        raise _fail(f"Error: {exc}") from exc
    logger.debug("Quoted %d value(s) with dialect %s", len(fragment), _dialect or "default")

    if show:
        display_fragment(console, fragment)
        if len(fragment) == len(inputs):
            display_pairs(console, inputs, fragment)

    if _json_output:
        typer.echo(json.dumps(list(fragment), ensure_ascii=False))
    else:
        for line in fragment:
            typer.echo(line)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def identifier(
    values: list[str] = typer.Argument(..., help="Names to quote."),
    table: bool = typer.Option(False, "--table", help="Join the names into one composite identifier."),
    na: str = typer.Option("NA", "--na", help="Argument text treated as a missing value."),
    show: bool = typer.Option(False, "--show", help="Render the quoted fragments on stderr."),
) -> None:
    """Quote table, column or schema names."""
    raw = _apply_na(values, na)
    value: Any = Table(*raw) if table else raw
    _run(quote_identifier, value, raw, show)


@app.command()
def string(
    values: list[str] = typer.Argument(..., help="Text to quote as string literals."),
    na: str = typer.Option("NA", "--na", help="Argument text treated as a missing value."),
    show: bool = typer.Option(False, "--show", help="Render the quoted fragments on stderr."),
) -> None:
    """Quote string literals; missing values become NULL."""
    raw = _apply_na(values, na)
    _run(quote_string_literal, raw, raw, show)


@app.command()
def literal(
    values: list[str] = typer.Argument(..., help="Values to quote as typed literals."),
    type_: LiteralType = typer.Option(
        LiteralType.TEXT,
        "--type",
        "-t",
        case_sensitive=False,
        help="How to interpret the arguments.",
    ),
    na: str = typer.Option("NA", "--na", help="Argument text treated as a missing value."),
    show: bool = typer.Option(False, "--show", help="Render the quoted fragments on stderr."),
) -> None:
    """Quote literals of the SQL type given by --type."""
    parse = _PARSERS[type_]
    raw = [None if v is None else parse(v) for v in _apply_na(values, na)]
    _run(quote_typed_literal, raw, raw, show)
