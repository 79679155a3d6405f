"""Concrete quoter implementations."""

from __future__ import annotations

from .ansi_impl import AnsiQuoter

__all__ = ["AnsiQuoter"]
