"""
Pooled data source: one connection pool per PoolConfig.

Reuses connections to avoid open/close on every checkout. Includes a
health-check on checkout of long-idle connections and max-age eviction.
New connections come from the delegate data source when the config carries
one, otherwise from connect(config).
"""

import logging
import threading
import time
import weakref
from collections.abc import Mapping
from typing import Any, NamedTuple, Protocol, runtime_checkable

from poolref.core.binder import bind_properties
from poolref.core.config import settings
from poolref.models import PoolConfig

from .connect import connect
from .health import health_check

_log = logging.getLogger(__name__)

_PING_IDLE_THRESHOLD = 30.0  # only ping connections idle longer than this (seconds)


@runtime_checkable
class DataSourceLike(Protocol):
    """Anything that hands out DB-API connections."""

    def get_connection(self) -> Any: ...


class _PoolEntry(NamedTuple):
    conn: Any
    created_at: float  # time.monotonic() when the connection was opened
    last_used: float   # time.monotonic() when last returned to pool


class PooledDataSource:
    """Connection pool over a single PoolConfig, with health-check and max-age."""

    def __init__(self, config: PoolConfig) -> None:
        self._config = config
        self._idle: list[_PoolEntry] = []
        # created_at of checked-out connections; entries vanish with the connection
        self._in_use: weakref.WeakKeyDictionary[Any, float] = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()
        self._closed = False
        self._pool_size: int = config.maximum_pool_size or settings.EXTERNAL_DB_POOL_SIZE
        self._max_age: float = float(
            config.max_lifetime or settings.EXTERNAL_DB_POOL_MAX_AGE_SEC
        )

    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def delegate(self) -> Any:
        return self._config.data_source

    @property
    def closed(self) -> bool:
        return self._closed

    def get_connection(self) -> Any:
        """Get a healthy connection (from the idle list or freshly opened)."""
        if self._closed:
            raise RuntimeError(f"Pool {self._name} has been closed")
        now = time.monotonic()
        while True:
            entry = self._pop()
            if entry is None:
                break
            if self._is_expired(entry):
                self._discard(entry.conn, "max age reached")
                continue
            idle_sec = now - entry.last_used
            if idle_sec > _PING_IDLE_THRESHOLD and not health_check(
                entry.conn, self._config.connection_test_query
            ):
                self._discard(entry.conn, "failed health check")
                continue
            try:
                entry.conn.rollback()
            except Exception:
                self._discard(entry.conn, "rollback failed")
                continue
            self._track(entry.conn, entry.created_at)
            return entry.conn

        return self._open()

    def release(self, conn: Any) -> None:
        """Return a connection to the pool (or close it if the pool is full or closed)."""
        try:
            conn.rollback()
        except Exception:
            self._discard(conn, "rollback failed")
            return

        created_at = self._untrack(conn)
        with self._lock:
            if not self._closed and len(self._idle) < self._pool_size:
                self._idle.append(
                    _PoolEntry(conn=conn, created_at=created_at, last_used=time.monotonic())
                )
                return

        self._discard(conn)

    def close(self) -> None:
        """Close idle connections and refuse further checkouts."""
        with self._lock:
            self._closed = True
            entries = list(self._idle)
            self._idle.clear()
        for e in entries:
            self._discard(e.conn)
        _log.debug("Pool %s closed (%d idle connections dropped)", self._name, len(entries))

    def stats(self) -> dict[str, int]:
        """Return pool statistics for monitoring."""
        with self._lock:
            return {
                "idle_connections": len(self._idle),
                "max_pool_size": self._pool_size,
            }

    def __repr__(self) -> str:
        return f"PooledDataSource(name={self._name!r}, delegate={self.delegate is not None})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @property
    def _name(self) -> str:
        return self._config.pool_name or f"pool-{id(self):x}"

    def _open(self) -> Any:
        if self.delegate is not None:
            conn = self.delegate.get_connection()
        else:
            conn = connect(self._config)
        init_sql = self._config.connection_init_sql
        if init_sql:
            try:
                cur = conn.cursor()
                try:
                    cur.execute(init_sql)
                finally:
                    cur.close()
            except Exception:
                self._discard(conn, "connection init sql failed")
                raise
        self._track(conn, time.monotonic())
        _log.debug("Pool %s opened a new connection", self._name)
        return conn

    def _pop(self) -> _PoolEntry | None:
        with self._lock:
            if self._idle:
                return self._idle.pop()
        return None

    def _track(self, conn: Any, created_at: float) -> None:
        with self._lock:
            try:
                self._in_use[conn] = created_at
            except TypeError:
                # not weak-referenceable: age restarts on release
                pass

    def _untrack(self, conn: Any) -> float:
        """Forget a checked-out connection; return when it was opened (now if unknown)."""
        with self._lock:
            try:
                created_at = self._in_use.pop(conn, None)
            except TypeError:
                created_at = None
        return time.monotonic() if created_at is None else created_at

    def _is_expired(self, entry: _PoolEntry) -> bool:
        return (time.monotonic() - entry.created_at) > self._max_age

    def _discard(self, conn: Any, reason: str | None = None) -> None:
        if reason:
            _log.warning("Pool %s discarding connection: %s", self._name, reason)
        self._untrack(conn)
        try:
            conn.close()
        except Exception:
            pass


# ---------------------------------------------------------------------------
# Pool capability used by the reference resolver
# ---------------------------------------------------------------------------


def new_pool_config(properties: Mapping[str, str]) -> PoolConfig:
    """Build a PoolConfig from string properties (unchanged pydantic errors on failure)."""
    return bind_properties(PoolConfig, properties)


def set_delegate(config: PoolConfig, data_source: Any) -> None:
    """Make *config* wrap an existing data source instead of connecting directly."""
    config.data_source = data_source


def new_data_source(config: PoolConfig) -> PooledDataSource:
    return PooledDataSource(config)
