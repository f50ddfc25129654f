"""
Reference resolver: turns a stored DataSource reference into a PooledDataSource.

A naming context calls get_object_instance() when a looked-up name is bound to
a StoredReference naming this factory. Properties are copied from the
reference for every name PoolConfig declares; unknown entries are ignored.

When dataSourceJNDI is set the new pool wraps another data source found by
that name instead of connecting on its own:

- context given: look it up there; any failure is fatal (no fallback).
- no context, or the context gave back nothing: look it up in the process
  default context; "not bound" there yields None, other failures are fatal.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from poolref.core.binder import property_names as binder_property_names
from poolref.core.naming.context import NamingContext
from poolref.core.naming.errors import (
    DelegateLookupError,
    MisconfiguredDelegationError,
    NameNotFoundError,
    NamingError,
    UnsupportedTargetTypeError,
)
from poolref.core.naming.factories import register_object_factory
from poolref.core.naming.provider import DefaultNamingProvider, NamingProvider
from poolref.core.pool import (
    DataSourceLike,
    PooledDataSource,
    new_data_source,
    new_pool_config,
    set_delegate,
)
from poolref.models import DATA_SOURCE_JNDI, DATA_SOURCE_TYPE, PoolConfig, StoredReference

_log = logging.getLogger(__name__)

FACTORY_NAME = "poolref.PooledDataSourceFactory"


class PooledDataSourceFactory:
    """Object factory producing PooledDataSource instances from stored references."""

    def __init__(
        self,
        naming_provider: NamingProvider | None = None,
        property_names: Callable[[type[BaseModel]], list[str]] = binder_property_names,
    ) -> None:
        self._naming = naming_provider or DefaultNamingProvider()
        self._property_names = property_names

    def get_object_instance(
        self,
        obj: Any,
        name: str | None,
        context: NamingContext | None,
        environment: dict[str, Any] | None,
    ) -> PooledDataSource | None:
        return self.resolve(obj, context)

    def resolve(
        self, candidate: Any, context: NamingContext | None = None
    ) -> PooledDataSource | None:
        """
        Build a data source from *candidate*, or return None if it is not a reference.

        Raises UnsupportedTargetTypeError before reading any property when the
        reference is not for a DataSource.
        """
        if not isinstance(candidate, StoredReference):
            return None
        if candidate.class_name != DATA_SOURCE_TYPE:
            raise UnsupportedTargetTypeError(candidate.class_name)

        properties: dict[str, str] = {}
        for prop in self._property_names(PoolConfig):
            addr = candidate.get(prop)
            if addr is not None and addr.content is not None:
                properties[prop] = str(addr.content)

        return self.construct(properties, context)

    def construct(
        self, properties: dict[str, str], context: NamingContext | None = None
    ) -> PooledDataSource | None:
        if properties.get(DATA_SOURCE_JNDI):
            return self._lookup_via_name(properties, context)

        ds = new_data_source(new_pool_config(properties))
        _log.debug("Built pooled data source %r", ds)
        return ds

    def _lookup_via_name(
        self, properties: dict[str, str], context: NamingContext | None
    ) -> PooledDataSource | None:
        jndi_name = properties[DATA_SOURCE_JNDI]
        delegate: Any = None

        if context is not None:
            phase = "local"
            try:
                delegate = self._naming.lookup(context, jndi_name)
            except NamingError as e:
                raise DelegateLookupError(phase, jndi_name) from e

        if delegate is None:
            phase = "default"
            default_ctx = self._naming.default_context()
            if default_ctx is None:
                raise MisconfiguredDelegationError(jndi_name)
            try:
                delegate = self._naming.lookup(default_ctx, jndi_name)
            except NameNotFoundError:
                _log.debug('Delegate "%s" is not bound in the default context', jndi_name)
                delegate = None
            except NamingError as e:
                raise DelegateLookupError(phase, jndi_name) from e

        if delegate is None:
            return None
        if not isinstance(delegate, DataSourceLike):
            raise DelegateLookupError(
                phase,
                jndi_name,
                f'The name "{jndi_name}" is bound to {type(delegate).__name__}, not a data source.',
            )

        config = new_pool_config(properties)
        set_delegate(config, delegate)
        _log.info('Pooled data source wraps delegate "%s" (%s context)', jndi_name, phase)
        return new_data_source(config)


register_object_factory(FACTORY_NAME, PooledDataSourceFactory())
