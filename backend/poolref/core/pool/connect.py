"""
DB connection helper for pooled data sources.

Uses psycopg (PostgreSQL), pymysql (MySQL), or trino (Trino) based on productType.
No driver layer: libs are installed via pip; PoolConfig (productType, host, ...) is enough.
"""

from typing import Any

import psycopg
import pymysql
from trino.auth import BasicAuthentication
from trino.dbapi import connect as trino_connect

from poolref.core.config import settings
from poolref.models import PoolConfig, ProductTypeEnum

_DEFAULT_PORTS = {
    ProductTypeEnum.POSTGRES: 5432,
    ProductTypeEnum.MYSQL: 3306,
    ProductTypeEnum.TRINO: 8080,
}


def connect(config: PoolConfig) -> Any:
    """
    Open a new DB-API connection described by *config*.

    Raises ValueError when productType, host, database or username is missing.
    """
    pt = config.product_type
    if pt is None:
        raise ValueError("productType is required to open a connection")

    for name, val in [
        ("host", config.host),
        ("database", config.database),
        ("username", config.username),
    ]:
        if val is None:
            raise ValueError(f"pool config must provide {name}")
    host = config.host
    port = config.port or _DEFAULT_PORTS[pt]
    password = config.password if config.password is not None else ""
    timeout = config.connection_timeout or settings.EXTERNAL_DB_CONNECT_TIMEOUT

    if pt == ProductTypeEnum.POSTGRES:
        conn = psycopg.connect(
            host=host,
            port=int(port),
            dbname=config.database,
            user=config.username,
            password=password,
            connect_timeout=int(timeout),
            autocommit=config.auto_commit,
        )
        if config.read_only:
            conn.read_only = True
        return conn
    if pt == ProductTypeEnum.MYSQL:
        return pymysql.connect(
            host=host,
            port=int(port),
            database=config.database,
            user=config.username,
            password=password,
            connect_timeout=int(timeout),
            autocommit=config.auto_commit,
        )
    if pt == ProductTypeEnum.TRINO:
        if config.use_ssl and not (password and password.strip()):
            raise ValueError("Password is required for Trino when using SSL/HTTPS.")
        return trino_connect(
            host=host,
            port=int(port),
            user=config.username,
            auth=BasicAuthentication(config.username, password),
            catalog=config.database,
            schema="default",
            source=config.pool_name or settings.PROJECT_NAME,
            http_scheme="https" if config.use_ssl else "http",
            request_timeout=timeout,
        )
    raise ValueError(f"Unsupported productType: {pt}")
