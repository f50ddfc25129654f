"""
Naming: contexts, object-factory registry, default-context provider, errors.
"""

from poolref.core.naming.context import InMemoryContext, NamingContext
from poolref.core.naming.errors import (
    DelegateLookupError,
    MisconfiguredDelegationError,
    NameAlreadyBoundError,
    NameNotFoundError,
    NamingError,
    UnsupportedTargetTypeError,
)
from poolref.core.naming.factories import (
    get_object_factory,
    get_object_instance,
    register_object_factory,
    unregister_object_factory,
)
from poolref.core.naming.provider import (
    DefaultNamingProvider,
    NamingProvider,
    get_default_context,
    set_default_context,
)
from poolref.core.naming.redis_context import RedisContext

__all__ = [
    "DefaultNamingProvider",
    "DelegateLookupError",
    "InMemoryContext",
    "MisconfiguredDelegationError",
    "NameAlreadyBoundError",
    "NameNotFoundError",
    "NamingContext",
    "NamingError",
    "NamingProvider",
    "RedisContext",
    "UnsupportedTargetTypeError",
    "get_default_context",
    "get_object_factory",
    "get_object_instance",
    "register_object_factory",
    "set_default_context",
    "unregister_object_factory",
]
