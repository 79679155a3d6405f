"""Unit tests for sql_quoting._types."""

from __future__ import annotations

import pytest

from sql_quoting import (
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

# ---------------------------------------------------------------------------
# SQL fragments
# ---------------------------------------------------------------------------


class TestSqlFragment:
    def test_single_string_becomes_one_element(self):
        assert SQL("SELECT").values == ("SELECT",)

    def test_sequence_keeps_order(self):
        assert SQL(["a", "b", "c"]).values == ("a", "b", "c")

    def test_empty_fragment(self):
        fragment = SQL()
        assert len(fragment) == 0
        assert list(fragment) == []

    def test_generator_input(self):
        assert SQL(s for s in ("x", "y")).values == ("x", "y")

    def test_non_text_element_rejected(self):
        with pytest.raises(SqlTypeError, match="must be built from text"):
            SQL(["a", 1])  # type: ignore[list-item]

    def test_non_iterable_rejected(self):
        with pytest.raises(SqlTypeError) as exc_info:
            SQL(42)  # type: ignore[arg-type]
        assert exc_info.value.kind == "int"

    def test_immutable(self):
        fragment = SQL("a")
        with pytest.raises(AttributeError):
            fragment.values = ("b",)  # type: ignore[misc]

    def test_equality_by_content(self):
        assert SQL("a") == SQL(("a",))
        assert SQL("a") != SQL("b")
        assert SQL(["a", "b"]) != SQL(["b", "a"])

    def test_hashable(self):
        assert len({SQL("a"), SQL(["a"]), SQL("b")}) == 2

    def test_indexing_and_slicing(self):
        fragment = SQL(["a", "b", "c"])
        assert fragment[0] == "a"
        assert fragment[-1] == "c"
        assert fragment[1:] == SQL(["b", "c"])

    def test_join(self):
        assert SQL(["'a'", "'b'"]).join() == "'a', 'b'"
        assert SQL(['"s"', '"t"']).join(".") == '"s"."t"'
        assert SQL().join() == ""

    def test_str_is_query_text(self):
        assert str(SQL("'a'")) == "'a'"
        assert str(SQL(["'a'", "'b'"])) == "'a', 'b'"
        assert str(SQL()) == ""

    def test_str_differs_from_display_form(self):
        fragment = SQL('"orders"')
        assert "<SQL>" not in str(fragment)
        assert "<SQL>" in repr(fragment)


class TestDisplayForm:
    def test_one_line_per_element(self):
        assert repr(SQL(["'x'", "NULL"])) == "<SQL> 'x'\n<SQL> NULL"

    def test_single_element(self):
        assert repr(SQL("SELECT")) == "<SQL> SELECT"

    def test_empty(self):
        assert repr(SQL()) == "<SQL>"


class TestMakeEscaped:
    def test_wraps_sequence(self):
        assert make_escaped(["a", "b"]) == SQL(("a", "b"))

    def test_wraps_single_string(self):
        assert make_escaped("SELECT") == SQL("SELECT")

    def test_empty_by_default(self):
        assert make_escaped() == SQL()

    def test_content_untouched(self):
        raw = "it's \"already\" escaped"
        assert make_escaped(raw).values == (raw,)


# ---------------------------------------------------------------------------
# Composite identifiers
# ---------------------------------------------------------------------------


class TestTable:
    def test_parts_in_order(self):
        assert Table("catalog", "schema", "name").parts == ("catalog", "schema", "name")

    def test_single_part(self):
        assert Table("orders").parts == ("orders",)

    def test_requires_a_part(self):
        with pytest.raises(EmptyIdentifierError, match="at least one name part"):
            Table()

    def test_empty_table_error_in_hierarchy(self):
        with pytest.raises(SqlQuotingError):
            Table()

    def test_equality(self):
        assert Table("a", "b") == Table("a", "b")
        assert Table("a", "b") != Table("b", "a")

    def test_frozen(self):
        table = Table("a")
        with pytest.raises(AttributeError):
            table.parts = ("b",)  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Dialect & exceptions
# ---------------------------------------------------------------------------


class TestDialect:
    def test_ansi_value(self):
        assert Dialect.ANSI.value == "ansi"

    def test_is_string_enum(self):
        assert Dialect.ANSI == "ansi"
        assert Dialect("ansi") is Dialect.ANSI


class TestExceptionHierarchy:
    def test_type_error_is_builtin_type_error(self):
        assert issubclass(SqlTypeError, TypeError)
        assert issubclass(SqlTypeError, SqlQuotingError)

    def test_unsupported_element_is_type_error(self):
        assert issubclass(UnsupportedElementError, SqlTypeError)
        err = UnsupportedElementError("bad", index=2, kind="str")
        assert err.index == 2
        assert err.kind == "str"

    def test_null_input_is_value_error(self):
        assert issubclass(NullInputError, ValueError)
        assert NullInputError("null", index=0).index == 0

    def test_unknown_dialect_is_key_error_with_plain_message(self):
        err = UnknownDialectError("Unknown dialect 'x'")
        assert isinstance(err, KeyError)
        assert str(err) == "Unknown dialect 'x'"

    def test_empty_identifier_is_value_error(self):
        assert issubclass(EmptyIdentifierError, ValueError)
        assert issubclass(EmptyIdentifierError, SqlQuotingError)
