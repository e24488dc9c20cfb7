from collections.abc import Iterator

import pytest

from safescript.html import trustedtypes


@pytest.fixture(autouse=True)
def _reset_default_bridge() -> Iterator[None]:
    """Each test starts without a cached default bridge."""
    trustedtypes.reset_default_bridge()
    yield
    trustedtypes.reset_default_bridge()
