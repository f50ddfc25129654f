"""
Connection pool behind resolved data sources.

No driver layer: psycopg, pymysql and trino are installed via pip; PoolConfig is enough.
"""

from .connect import connect
from .datasource import (
    DataSourceLike,
    PooledDataSource,
    new_data_source,
    new_pool_config,
    set_delegate,
)
from .health import health_check

__all__ = [
    "connect",
    "health_check",
    "DataSourceLike",
    "PooledDataSource",
    "new_data_source",
    "new_pool_config",
    "set_delegate",
]
