"""Test helpers for references and naming contexts."""

from typing import Any
from unittest.mock import MagicMock

from poolref.core.naming import NameNotFoundError, NamingError
from poolref.models import DATA_SOURCE_TYPE, StoredReference


def make_reference(
    properties: dict[str, Any] | None = None,
    *,
    class_name: str = DATA_SOURCE_TYPE,
    factory: str | None = None,
) -> StoredReference:
    return StoredReference.from_properties(
        class_name, properties or {}, factory=factory
    )


def make_delegate() -> MagicMock:
    """A stand-in data source: get_connection() returns a fresh MagicMock."""
    ds = MagicMock(name="delegate")
    ds.get_connection.side_effect = lambda: MagicMock(name="conn")
    return ds


class FakeContext:
    """Dict-backed context recording every looked-up name; *fail* raises on lookup."""

    def __init__(
        self,
        bindings: dict[str, Any] | None = None,
        fail: Exception | None = None,
    ) -> None:
        self.bindings = dict(bindings or {})
        self.fail = fail
        self.lookups: list[str] = []

    def lookup(self, name: str) -> Any:
        self.lookups.append(name)
        if self.fail is not None:
            raise self.fail
        if name not in self.bindings:
            raise NameNotFoundError(name)
        return self.bindings[name]


class FakeNamingProvider:
    """NamingProvider with a fixed default context (or none)."""

    def __init__(self, default: FakeContext | None = None) -> None:
        self.default = default
        self.default_requested = 0

    def lookup(self, context: Any, name: str) -> Any:
        return context.lookup(name)

    def default_context(self) -> FakeContext | None:
        self.default_requested += 1
        return self.default


def provider_fault(name: str = "myDS") -> NamingError:
    return NamingError(f"provider fault while resolving {name}")
