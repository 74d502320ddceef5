"""Every `IdGenerator` adapter must satisfy the tests in this package."""

from collections.abc import Callable

import pytest

from wolflix.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from wolflix.interfaces.id_generator import IdGenerator

ADAPTERS: dict[str, Callable[[], IdGenerator]] = {
    "ulid": ULIDGenerator,
    "uuid4": UUIDv4Generator,
    "simple": SimpleIdGenerator,
}

# Adapters that promise ordered ids even when shared between threads.
MONOTONIC_ADAPTERS = ("ulid",)


@pytest.fixture(params=sorted(ADAPTERS))
def id_generator(request: pytest.FixtureRequest) -> IdGenerator:
    """A fresh generator, once per adapter."""
    return ADAPTERS[request.param]()


@pytest.fixture(params=MONOTONIC_ADAPTERS)
def monotonic_id_generator(request: pytest.FixtureRequest) -> IdGenerator:
    """A fresh generator, once per order-preserving adapter."""
    return ADAPTERS[request.param]()
