"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from caretrack.adapters.id_generators import SequentialIdGenerator, ULIDGenerator
from caretrack.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "sequential"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for the requested backend.

    Supported params:
      - `"ulid"` → ULIDGenerator
      - `"sequential"` → SequentialIdGenerator
    """
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "sequential":
            yield SequentialIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
