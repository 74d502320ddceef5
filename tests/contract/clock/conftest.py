"""Fixtures for clock contract tests."""

from collections.abc import Iterable

import pytest

from wolflix.adapters.clocks import FrozenClock, SystemClock
from wolflix.interfaces.clock import Clock


@pytest.fixture(params=["system", "frozen"])
def clock(request: pytest.FixtureRequest) -> Iterable[Clock]:
    """Return a fresh Clock instance for the requested backend."""
    match request.param:
        case "system":
            yield SystemClock()
        case "frozen":
            yield FrozenClock()
        case _:
            raise ValueError(f"unknown clock type: {request.param}")
