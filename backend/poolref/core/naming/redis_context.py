"""
Redis-backed naming context.

Stores StoredReferences as JSON under NAMING_KEY_PREFIX so several processes
share one directory. Only references can be bound; lookups dereference them
through the object-factory registry like the in-process context does.
"""

import logging
from typing import Any

from pydantic import ValidationError

from poolref.core.config import settings
from poolref.core.redis_client import get_redis
from poolref.models import StoredReference

from .context import _normalize
from .errors import NameAlreadyBoundError, NameNotFoundError, NamingError
from .factories import get_object_instance

_LOG = logging.getLogger(__name__)


def _require_reference(name: str, obj: Any) -> None:
    if not isinstance(obj, StoredReference):
        raise NamingError(
            f'Only stored references can be bound in Redis, got {type(obj).__name__} for "{name}"'
        )


class RedisContext:
    def __init__(
        self,
        client: Any = None,
        *,
        prefix: str | None = None,
        environment: dict[str, Any] | None = None,
    ) -> None:
        self._redis = client
        self._prefix = prefix if prefix is not None else settings.NAMING_KEY_PREFIX
        self.environment: dict[str, Any] = dict(environment or {})

    @property
    def available(self) -> bool:
        """True when a Redis client is configured and reachable."""
        return self._redis is not None or get_redis() is not None

    def _client(self) -> Any:
        r = self._redis if self._redis is not None else get_redis()
        if r is None:
            raise NamingError(
                "Redis naming context is unavailable (CACHE_ENABLED is off or Redis is unreachable)"
            )
        return r

    def _key(self, name: str) -> str:
        return f"{self._prefix}{_normalize(name)}"

    def bind(self, name: str, ref: StoredReference) -> None:
        key = self._key(name)
        _require_reference(name, ref)
        r = self._client()
        try:
            created = r.set(key, ref.model_dump_json(), nx=True)
        except Exception as e:
            raise NamingError(f'Failed to bind "{name}": {e}') from e
        if not created:
            raise NameAlreadyBoundError(name)

    def rebind(self, name: str, ref: StoredReference) -> None:
        key = self._key(name)
        _require_reference(name, ref)
        r = self._client()
        try:
            r.set(key, ref.model_dump_json())
        except Exception as e:
            raise NamingError(f'Failed to rebind "{name}": {e}') from e

    def unbind(self, name: str) -> None:
        key = self._key(name)
        r = self._client()
        try:
            r.delete(key)
        except Exception as e:
            raise NamingError(f'Failed to unbind "{name}": {e}') from e

    def list(self) -> list[str]:
        r = self._client()
        n = len(self._prefix)
        return sorted(k[n:] for k in r.scan_iter(match=f"{self._prefix}*"))

    def lookup(self, name: str) -> Any:
        key = self._key(name)
        r = self._client()
        try:
            raw = r.get(key)
        except Exception as e:
            raise NamingError(f'Failed to look up "{name}": {e}') from e
        if raw is None:
            raise NameNotFoundError(name.strip())
        try:
            ref = StoredReference.model_validate_json(raw)
        except ValidationError as e:
            raise NamingError(f'Entry for "{name}" is not a valid reference') from e
        _LOG.debug("Loaded reference %s (class_name=%s)", key, ref.class_name)
        return get_object_instance(ref, name.strip(), self, self.environment)
