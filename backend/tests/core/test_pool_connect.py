"""
Unit tests for core.pool.connect and health_check.

Drivers are patched; no database is required.
"""

from unittest.mock import MagicMock, patch

import pytest

from poolref.core.pool import connect, health_check
from poolref.models import PoolConfig, ProductTypeEnum


def _config(**kwargs: object) -> PoolConfig:
    base: dict[str, object] = {
        "product_type": ProductTypeEnum.POSTGRES,
        "host": "localhost",
        "database": "app",
        "username": "postgres",
        "password": "secret",
    }
    base.update(kwargs)
    return PoolConfig(**base)


@patch("poolref.core.pool.connect.psycopg")
def test_connect_postgres(mock_psycopg: MagicMock) -> None:
    conn = connect(_config(connection_timeout=3))
    mock_psycopg.connect.assert_called_once_with(
        host="localhost",
        port=5432,
        dbname="app",
        user="postgres",
        password="secret",
        connect_timeout=3,
        autocommit=True,
    )
    assert conn is mock_psycopg.connect.return_value


@patch("poolref.core.pool.connect.psycopg")
def test_connect_postgres_read_only(mock_psycopg: MagicMock) -> None:
    conn = connect(_config(read_only=True))
    assert conn.read_only is True


@patch("poolref.core.pool.connect.settings")
@patch("poolref.core.pool.connect.pymysql")
def test_connect_mysql_uses_default_port_and_timeout(
    mock_pymysql: MagicMock, mock_settings: MagicMock
) -> None:
    mock_settings.EXTERNAL_DB_CONNECT_TIMEOUT = 7
    connect(_config(product_type=ProductTypeEnum.MYSQL, auto_commit=False))
    kwargs = mock_pymysql.connect.call_args.kwargs
    assert kwargs["port"] == 3306
    assert kwargs["connect_timeout"] == 7
    assert kwargs["autocommit"] is False


@patch("poolref.core.pool.connect.trino_connect")
def test_connect_trino_https(mock_trino: MagicMock) -> None:
    connect(_config(product_type=ProductTypeEnum.TRINO, use_ssl=True, pool_name="reports"))
    kwargs = mock_trino.call_args.kwargs
    assert kwargs["http_scheme"] == "https"
    assert kwargs["catalog"] == "app"
    assert kwargs["source"] == "reports"


def test_connect_trino_ssl_requires_password() -> None:
    with pytest.raises(ValueError, match="Password is required"):
        connect(_config(product_type=ProductTypeEnum.TRINO, use_ssl=True, password=""))


def test_connect_requires_product_type() -> None:
    with pytest.raises(ValueError, match="productType"):
        connect(_config(product_type=None))


def test_connect_requires_host() -> None:
    with pytest.raises(ValueError, match="host"):
        connect(_config(host=None))


def test_health_check_ok() -> None:
    conn = MagicMock()
    assert health_check(conn, "SELECT 42") is True
    conn.cursor.return_value.execute.assert_called_once_with("SELECT 42")
    conn.cursor.return_value.close.assert_called_once()


def test_health_check_fails_on_broken_connection() -> None:
    conn = MagicMock()
    conn.cursor.return_value.execute.side_effect = RuntimeError("connection closed")
    assert health_check(conn) is False
