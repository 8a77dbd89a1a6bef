"""The fixed catalog of candidate movement directions."""

from __future__ import annotations

from dataclasses import dataclass

# Diagonal component, rounded so that diagonals read as +/-0.707 to the host.
_DIAGONAL = 0.707


@dataclass(frozen=True, slots=True)
class CandidateDirection:
    dx: float
    dz: float
    name: str

    @property
    def is_still(self) -> bool:
        return self.dx == 0 and self.dz == 0


STAY = CandidateDirection(0.0, 0.0, "stay")

# Order matters: the selector keeps the first of equally-scored entries, so
# "stay" wins exact ties, then the cardinal directions, then the diagonals.
DIRECTION_CATALOG: tuple[CandidateDirection, ...] = (
    STAY,
    CandidateDirection(-1.0, 0.0, "left"),
    CandidateDirection(1.0, 0.0, "right"),
    CandidateDirection(0.0, -1.0, "forward"),
    CandidateDirection(0.0, 1.0, "backward"),
    CandidateDirection(-_DIAGONAL, -_DIAGONAL, "left-forward"),
    CandidateDirection(_DIAGONAL, -_DIAGONAL, "right-forward"),
    CandidateDirection(-_DIAGONAL, _DIAGONAL, "left-backward"),
    CandidateDirection(_DIAGONAL, _DIAGONAL, "right-backward"),
)

DIRECTIONS_BY_NAME: dict[str, CandidateDirection] = {
    direction.name: direction for direction in DIRECTION_CATALOG
}
