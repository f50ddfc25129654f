"""
poolref: resolve stored data source references into pooled data sources.

Importing the package registers PooledDataSourceFactory with the
object-factory registry, so naming contexts can dereference references
that name it.
"""

from poolref.core.resolver import FACTORY_NAME, PooledDataSourceFactory
from poolref.models import (
    DATA_SOURCE_JNDI,
    DATA_SOURCE_TYPE,
    PoolConfig,
    ProductTypeEnum,
    RefAddr,
    StoredReference,
)

__all__ = [
    "DATA_SOURCE_JNDI",
    "DATA_SOURCE_TYPE",
    "FACTORY_NAME",
    "PoolConfig",
    "PooledDataSourceFactory",
    "ProductTypeEnum",
    "RefAddr",
    "StoredReference",
]
