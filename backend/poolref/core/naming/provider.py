"""
Naming provider: lookups in a given context plus the process default context.

The default context is created lazily: an InMemoryContext, or a RedisContext
when NAMING_DEFAULT_BACKEND is "redis". set_default_context() replaces it.
"""

import threading
from typing import Any, Protocol

from poolref.core.config import settings

from .context import InMemoryContext, NamingContext
from .redis_context import RedisContext


class NamingProvider(Protocol):
    def lookup(self, context: NamingContext, name: str) -> Any: ...

    def default_context(self) -> NamingContext | None: ...


class DefaultNamingProvider:
    """Looks names up in the given context; default context is the process one."""

    def lookup(self, context: NamingContext, name: str) -> Any:
        return context.lookup(name)

    def default_context(self) -> NamingContext | None:
        """Process default context, or None when it is Redis and Redis is unavailable."""
        ctx = get_default_context()
        if isinstance(ctx, RedisContext) and not ctx.available:
            return None
        return ctx


_default_context: NamingContext | None = None
_default_lock = threading.Lock()


def _create_default_context() -> NamingContext:
    if settings.NAMING_DEFAULT_BACKEND == "redis":
        return RedisContext()
    return InMemoryContext()


def get_default_context() -> NamingContext:
    """Return the process default context (thread-safe double-checked locking)."""
    global _default_context
    if _default_context is None:
        with _default_lock:
            if _default_context is None:
                _default_context = _create_default_context()
    return _default_context


def set_default_context(context: NamingContext | None) -> None:
    """Install *context* as the process default. ``None`` = recreate lazily."""
    global _default_context
    with _default_lock:
        _default_context = context
