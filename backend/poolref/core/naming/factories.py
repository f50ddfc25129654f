"""
Object-factory registry.

Contexts hand every bound object to get_object_instance() on lookup. A
StoredReference naming a registered factory is turned into a live object;
anything else comes back unchanged.
"""

import logging
import threading
from typing import Any, Protocol

from poolref.models import StoredReference

_log = logging.getLogger(__name__)

_factories: dict[str, "ObjectFactory"] = {}
_factories_lock = threading.Lock()


class ObjectFactory(Protocol):
    def get_object_instance(
        self,
        obj: Any,
        name: str | None,
        context: Any,
        environment: dict[str, Any] | None,
    ) -> Any: ...


def register_object_factory(name: str, factory: ObjectFactory) -> None:
    """Register (or replace) the factory used for references naming *name*."""
    with _factories_lock:
        _factories[name] = factory


def unregister_object_factory(name: str) -> None:
    with _factories_lock:
        _factories.pop(name, None)


def get_object_factory(name: str) -> ObjectFactory | None:
    return _factories.get(name)


def get_object_instance(
    obj: Any,
    name: str | None,
    context: Any,
    environment: dict[str, Any] | None = None,
) -> Any:
    """
    Dereference *obj* through its factory.

    Returns *obj* itself when it is not a reference, names no factory, names
    an unknown factory, or the factory declines it (returns None). Factory
    errors propagate.
    """
    if not isinstance(obj, StoredReference) or not obj.factory:
        return obj
    factory = get_object_factory(obj.factory)
    if factory is None:
        _log.debug("No object factory registered as %s (name=%s)", obj.factory, name)
        return obj
    result = factory.get_object_instance(obj, name, context, environment)
    return obj if result is None else result
