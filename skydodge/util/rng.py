"""Deterministic random streams keyed by domain name.

Each consumer of randomness (plan-log sampling, benchmark scenario builders,
host-side meteor jitter) draws from its own numpy Generator. Every stream is
seeded from the master seed plus its domain name, so a run replays exactly
from the same master seed and one domain drawing more numbers never shifts
another domain's sequence.

Usage:
    from skydodge.util import rng
    rng.init(config.RANDOM_SEED)

    _rng = rng.get("ai.plan_logging")   # safe to cache at import time

    if _rng.random() < sample_rate:
        ...

Domains are dotted names: "ai.plan_logging", "arena.meteors", "bench.hazards".
"""

from __future__ import annotations

import zlib
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from skydodge.types import RandomSeed


def _seed_material(value: int | str) -> int:
    # Strings go through crc32 because hash() is salted per process.
    if isinstance(value, int):
        return abs(value)
    return zlib.crc32(value.encode())


def _make_generator(master_seed: RandomSeed, domain: str) -> np.random.Generator:
    if master_seed is None:
        return np.random.default_rng()
    sequence = np.random.SeedSequence(
        entropy=_seed_material(master_seed),
        spawn_key=(_seed_material(domain),),
    )
    return np.random.default_rng(sequence)


class RNGStream:
    """Cacheable handle on one domain's generator.

    The generator is looked up on every call, so a handle taken before
    rng.reset() draws from the fresh generator afterwards.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self.domain = domain

    @property
    def generator(self) -> np.random.Generator:
        return self._provider.generator_for(self.domain)

    def random(self) -> float:
        """Float in [0.0, 1.0)."""
        return float(self.generator.random())

    def uniform(self, low: float, high: float) -> float:
        """Float in [low, high)."""
        return float(self.generator.uniform(low, high))


class RNGProvider:
    """Owns the generators for every domain under one master seed."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self.master_seed = master_seed
        self._generators: dict[str, np.random.Generator] = {}
        self._streams: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        stream = self._streams.get(domain)
        if stream is None:
            stream = self._streams[domain] = RNGStream(self, domain)
        return stream

    def generator_for(self, domain: str) -> np.random.Generator:
        generator = self._generators.get(domain)
        if generator is None:
            generator = _make_generator(self.master_seed, domain)
            self._generators[domain] = generator
        return generator

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Drop every generator and reseed lazily from ``master_seed``."""
        self.master_seed = master_seed
        self._generators.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Seed the shared provider, resetting it if it already exists."""
    global _provider
    if _provider is None:
        _provider = RNGProvider(master_seed)
    else:
        _provider.reset(master_seed)


def get(domain: str) -> RNGStream:
    """Stream for ``domain``; falls back to an unseeded provider before init()."""
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
