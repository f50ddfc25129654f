from collections.abc import Generator

import pytest

from poolref.core.naming import provider


@pytest.fixture(autouse=True)
def _reset_default_context() -> Generator[None, None, None]:
    """Each test starts with a fresh process default context."""
    provider.set_default_context(None)
    yield
    provider.set_default_context(None)
