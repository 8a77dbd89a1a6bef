from __future__ import annotations

from collections.abc import Iterator

import pytest

from skydodge import config
from skydodge.game.ai import default
from skydodge.util import rng


@pytest.fixture(autouse=True)
def seeded_rng() -> Iterator[None]:
    """Give every test the same deterministic random streams."""
    rng.init(config.RANDOM_SEED)
    yield


@pytest.fixture(autouse=True)
def fresh_default_ai() -> Iterator[None]:
    """Drop the shared default AI before and after each test."""
    default._default_ai = None
    yield
    default._default_ai = None
