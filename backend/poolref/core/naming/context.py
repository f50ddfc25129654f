"""
In-process naming context.

Binds names to arbitrary objects. Bound StoredReferences are dereferenced
through the object-factory registry on every lookup, so each lookup of a
reference yields a freshly built object.
"""

import threading
from typing import Any, Protocol, runtime_checkable

from .errors import NameAlreadyBoundError, NameNotFoundError, NamingError
from .factories import get_object_instance


@runtime_checkable
class NamingContext(Protocol):
    def lookup(self, name: str) -> Any: ...


def _normalize(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise NamingError("Name must be a non-empty string")
    return name.strip()


class InMemoryContext:
    """Thread-safe dict-backed naming context."""

    def __init__(self, environment: dict[str, Any] | None = None) -> None:
        self._bindings: dict[str, Any] = {}
        self._lock = threading.Lock()
        self.environment: dict[str, Any] = dict(environment or {})

    def bind(self, name: str, obj: Any) -> None:
        key = _normalize(name)
        with self._lock:
            if key in self._bindings:
                raise NameAlreadyBoundError(key)
            self._bindings[key] = obj

    def rebind(self, name: str, obj: Any) -> None:
        key = _normalize(name)
        with self._lock:
            self._bindings[key] = obj

    def unbind(self, name: str) -> None:
        """Remove a binding; unbinding an unknown name is a no-op."""
        key = _normalize(name)
        with self._lock:
            self._bindings.pop(key, None)

    def list(self) -> list[str]:
        with self._lock:
            return sorted(self._bindings)

    def lookup(self, name: str) -> Any:
        key = _normalize(name)
        with self._lock:
            if key not in self._bindings:
                raise NameNotFoundError(key)
            obj = self._bindings[key]
        return get_object_instance(obj, key, self, self.environment)
