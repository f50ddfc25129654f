"""Unit tests for the shared Redis client."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from poolref.core import redis_client


@pytest.fixture(autouse=True)
def _reset_client() -> Generator[None, None, None]:
    redis_client._client = None
    redis_client._tried = False
    yield
    redis_client._client = None
    redis_client._tried = False


def test_get_redis_none_when_cache_disabled() -> None:
    with patch("poolref.core.redis_client.settings") as m:
        m.CACHE_ENABLED = False
        assert redis_client.get_redis() is None


def test_get_redis_none_when_ping_fails() -> None:
    fake = MagicMock()
    fake.Redis.from_url.return_value.ping.side_effect = ConnectionError("down")
    with (
        patch("poolref.core.redis_client.settings") as m,
        patch.object(redis_client, "redis", fake),
    ):
        m.CACHE_ENABLED = True
        m.redis_url = "redis://localhost:6379/0"
        assert redis_client.get_redis() is None


def test_get_redis_created_once() -> None:
    fake = MagicMock()
    with (
        patch("poolref.core.redis_client.settings") as m,
        patch.object(redis_client, "redis", fake),
    ):
        m.CACHE_ENABLED = True
        m.redis_url = "redis://localhost:6379/0"
        first = redis_client.get_redis()
        second = redis_client.get_redis()
    assert first is second is fake.Redis.from_url.return_value
    fake.Redis.from_url.assert_called_once_with(
        "redis://localhost:6379/0", decode_responses=True
    )
