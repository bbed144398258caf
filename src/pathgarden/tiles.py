# Tile kinds, directions and the rotation tables shared by the generator and
# the connectivity engine.

from enum import Enum
from typing import Dict, FrozenSet, Tuple


class Direction(Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


class TileKind(Enum):
    STRAIGHT = "straight"
    CORNER = "corner"


N, E, S, W = Direction.N, Direction.E, Direction.S, Direction.W

_OPPOSITE = {N: S, S: N, E: W, W: E}
_DELTAS = {N: (0, -1), E: (1, 0), S: (0, 1), W: (-1, 0)}

ROTATIONS = (0, 90, 180, 270)
ALT_OFFSETS = (90, 180, 270)

# Corner at 0 opens N+E; each +90 turns the pair clockwise.
CORNER_OPENINGS: Dict[int, Tuple[Direction, Direction]] = {
    0: (N, E),
    90: (E, S),
    180: (S, W),
    270: (W, N),
}
STRAIGHT_OPENINGS: Dict[int, Tuple[Direction, Direction]] = {
    0: (N, S),
    90: (E, W),
    180: (N, S),
    270: (E, W),
}

# Unordered direction pair -> (kind, solved rotation)
PAIR_TO_TILE: Dict[FrozenSet[Direction], Tuple[TileKind, int]] = {
    frozenset((N, S)): (TileKind.STRAIGHT, 0),
    frozenset((E, W)): (TileKind.STRAIGHT, 90),
    frozenset((N, E)): (TileKind.CORNER, 0),
    frozenset((E, S)): (TileKind.CORNER, 90),
    frozenset((S, W)): (TileKind.CORNER, 180),
    frozenset((W, N)): (TileKind.CORNER, 270),
}


def normalize_rotation(rotation: int) -> int:
    return rotation % 360


def snap_rotation(rotation: float) -> int:
    """Snap any angle to the nearest quarter turn in [0, 360)."""
    normalized = rotation % 360
    return (int(normalized / 90 + 0.5) * 90) % 360


def rotate(rotation: int, delta: int = 90) -> int:
    return normalize_rotation(rotation + delta)


def open_directions(kind: TileKind, rotation: int) -> Tuple[Direction, Direction]:
    normalized = normalize_rotation(rotation)
    if kind is TileKind.STRAIGHT:
        return STRAIGHT_OPENINGS[0 if normalized % 180 == 0 else 90]
    if kind is TileKind.CORNER:
        # Off-grid angles fall through to the last quarter, as the board
        # only ever holds multiples of 90.
        return CORNER_OPENINGS.get(normalized, CORNER_OPENINGS[270])
    raise ValueError(f"unknown tile kind: {kind!r}")


def tile_for_directions(d1: Direction, d2: Direction) -> Tuple[TileKind, int]:
    if d1 == d2:
        raise ValueError(f"tile needs two distinct openings, got {d1.value}{d2.value}")
    return PAIR_TO_TILE[frozenset((d1, d2))]
