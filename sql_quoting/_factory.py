"""SQL quoter factory.

Provides :func:`get_quoter`, the single entry point for resolving a dialect
handle to a quoter.  Thread-safe lazy singletons, one per dialect name.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from ._protocols import SqlQuoter
from ._types import Dialect, SqlTypeError, UnknownDialectError
from .config import load_settings

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_instances: dict[str, SqlQuoter] = {}
_factories: dict[str, Callable[[], SqlQuoter]] = {}
_default_name: str | None = None


def _default_ansi() -> SqlQuoter:
    from .impl.ansi_impl import AnsiQuoter

    return AnsiQuoter.from_settings(load_settings())


_BUILTIN: dict[str, Callable[[], SqlQuoter]] = {Dialect.ANSI.value: _default_ansi}


def dialect_name(dialect: Dialect | str) -> str:
    """Normalise a dialect handle to its registry key."""
    if isinstance(dialect, Dialect):
        return dialect.value
    if not isinstance(dialect, str):
        raise SqlTypeError(
            f"Dialect handle must be a Dialect, a name or a quoter, got {type(dialect).__name__}",
            kind=type(dialect).__name__,
        )
    name = dialect.strip().lower()
    if not name:
        raise UnknownDialectError("Dialect name must not be empty")
    return name


def register_implementation(dialect: Dialect | str, factory_fn: Callable[[], SqlQuoter]) -> None:
    """Register a factory creating the :class:`SqlQuoter` for *dialect*.

    Replaces any earlier registration, including the built-in ANSI quoter.
    The cached instance is dropped and re-created on next access.
    """
    name = dialect_name(dialect)
    with _lock:
        _factories[name] = factory_fn
        _instances.pop(name, None)
    logger.debug("Registered quoter factory for dialect '%s'", name)


def available_dialects() -> list[str]:
    """Names of every dialect that :func:`get_quoter` can resolve."""
    with _lock:
        return sorted(set(_BUILTIN) | set(_factories))


def _default_dialect() -> str:
    """The configured default dialect name, read from settings once."""
    global _default_name  # noqa: PLW0603
    name = _default_name
    if name is not None:
        return name
    with _lock:
        if _default_name is None:
            _default_name = dialect_name(load_settings().default_dialect)
            logger.debug("Default dialect resolved to '%s'", _default_name)
        return _default_name


def get_quoter(dialect: Dialect | str | SqlQuoter | None = None) -> SqlQuoter:
    """Return the quoter for a dialect handle.

    A quoter instance is returned as-is.  ``None`` resolves to the configured
    default dialect.  Instances are created lazily and cached per dialect.

    Raises:
        UnknownDialectError: The handle names no registered dialect.
        SqlTypeError: The handle is not a dialect handle at all.
    """
    if not isinstance(dialect, str) and isinstance(dialect, SqlQuoter):
        return dialect

    name = _default_dialect() if dialect is None else dialect_name(dialect)
    instance = _instances.get(name)
    if instance is not None:
        return instance

    with _lock:
        # Double-checked locking
        instance = _instances.get(name)
        if instance is not None:
            return instance

        factory_fn = _factories.get(name) or _BUILTIN.get(name)
        if factory_fn is None:
            available = ", ".join(sorted(set(_BUILTIN) | set(_factories)))
            raise UnknownDialectError(f"Unknown dialect '{name}'. Available: {available}")

        instance = factory_fn()
        _instances[name] = instance
        logger.debug("Created quoter %r for dialect '%s'", instance, name)
        return instance


def reset_quoters() -> None:
    """Drop cached quoters, registrations and the default name.  **For testing only.**"""
    global _default_name  # noqa: PLW0603
    with _lock:
        _default_name = None
        _instances.clear()
        _factories.clear()

