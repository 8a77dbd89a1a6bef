"""Hazard records and normalisation of host-supplied hazard data.

The host game hands over whatever it has lying around each tick: plain dicts
decoded from a message, its own entity objects, or the typed records defined
here. Everything is normalised into Meteor / Enemy / Hole before the planner
sees it. Entries that cannot be read are dropped rather than aborting the
tick; a hazard the AI cannot locate is treated as absent.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from skydodge.types import Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Meteor:
    """A falling hazard. ``velocity`` is None when the host does not track it."""

    position: Vec3
    velocity: Vec3 | None = None


@dataclass(frozen=True, slots=True)
class Enemy:
    """A pursuing hostile. Enemies never report their own velocity."""

    position: Vec3


@dataclass(frozen=True, slots=True)
class Hole:
    """Axis-aligned square danger region on the ground plane."""

    x: float
    z: float
    half_size: float

    def contains(self, x: float, z: float) -> bool:
        return abs(x - self.x) <= self.half_size and abs(z - self.z) <= self.half_size


def _field(source: Any, *names: str) -> Any:
    """Read the first present field from a mapping or attribute-bearing object."""
    for name in names:
        if isinstance(source, Mapping):
            if name in source:
                return source[name]
        elif hasattr(source, name):
            return getattr(source, name)
    return None


def _number(value: Any) -> float | None:
    # numbers.Real covers numpy scalars (np.float32, np.int64, ...) too.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def try_read_vec3(source: Any) -> Vec3 | None:
    """Read an (x, y, z) triple from a mapping, object, 3-sequence or array.

    Returns None when the source is missing or any component is not a finite
    number.
    """
    if source is None:
        return None
    if isinstance(source, Vec3):
        return source
    if isinstance(source, np.ndarray):
        if source.shape != (3,):
            return None
        components = [_number(v) for v in source]
    elif isinstance(source, list | tuple):
        if len(source) != 3:
            return None
        components = [_number(v) for v in source]
    else:
        components = [_number(_field(source, axis)) for axis in ("x", "y", "z")]
    if any(c is None for c in components):
        return None
    x, y, z = components
    return Vec3(x, y, z)  # type: ignore[arg-type]


def read_vec3(source: Any) -> Vec3:
    """Like try_read_vec3, but for required vectors such as the agent position."""
    vec = try_read_vec3(source)
    if vec is None:
        raise ValueError(f"Expected an (x, y, z) position, got {source!r}")
    return vec


def parse_meteors(raw: Iterable[Any] | None) -> list[Meteor]:
    """Normalise host meteor data. Entries without a usable position are dropped."""
    meteors: list[Meteor] = []
    for entry in raw or ():
        if isinstance(entry, Meteor):
            meteors.append(entry)
            continue
        position = try_read_vec3(_field(entry, "position"))
        if position is None:
            logger.debug("Dropping meteor without a usable position: %r", entry)
            continue
        # A malformed velocity is treated like a missing one: the predictor
        # substitutes the current fall speed.
        velocity = try_read_vec3(_field(entry, "velocity"))
        meteors.append(Meteor(position=position, velocity=velocity))
    return meteors


def parse_enemies(raw: Iterable[Any] | None) -> list[Enemy]:
    """Normalise host enemy data. Entries without a usable position are dropped."""
    enemies: list[Enemy] = []
    for entry in raw or ():
        if isinstance(entry, Enemy):
            enemies.append(entry)
            continue
        position = try_read_vec3(_field(entry, "position"))
        if position is None:
            logger.debug("Dropping enemy without a usable position: %r", entry)
            continue
        enemies.append(Enemy(position=position))
    return enemies


def parse_holes(raw: Iterable[Any] | None) -> list[Hole]:
    """Normalise host hole data. Accepts ``halfSize`` or ``half_size``."""
    holes: list[Hole] = []
    for entry in raw or ():
        if isinstance(entry, Hole):
            holes.append(entry)
            continue
        x = _number(_field(entry, "x"))
        z = _number(_field(entry, "z"))
        half_size = _number(_field(entry, "half_size", "halfSize"))
        if x is None or z is None or half_size is None:
            logger.debug("Dropping malformed hole: %r", entry)
            continue
        holes.append(Hole(x=x, z=z, half_size=half_size))
    return holes
