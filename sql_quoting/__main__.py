"""Entry point for `python -m sql_quoting` and the `sql-quoting` console script."""

from __future__ import annotations

from sql_quoting.cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
