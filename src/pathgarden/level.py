from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .grid import Point
from .levels import Theme
from .tiles import TileKind

Layout = Tuple[Tuple[TileKind, ...], ...]
RotationRows = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class RequiredSwitch:
    tile: Point
    rotations: FrozenSet[int]


@dataclass(frozen=True)
class PerspectiveLink:
    """Bridge between two path cells; treated as adjacency while active."""
    a: Point
    b: Point
    required_switch: Optional[RequiredSwitch] = None

    def touches(self, p: Point) -> bool:
        return p == self.a or p == self.b

    def other(self, p: Point) -> Point:
        return self.b if p == self.a else self.a


@dataclass(frozen=True)
class Level:
    layout: Layout
    initial_rotations: RotationRows
    start: Point
    goal: Point
    perspective_links: Tuple[PerspectiveLink, ...] = ()
    id: int = 0
    name: str = ""
    vibe: str = ""
    expected_moves: int = 0
    theme: Optional[Theme] = None
    flower_tile_keys: Tuple[str, ...] = ()
    obstacle_tile_keys: Tuple[str, ...] = ()
    seed: int = 0

    def __post_init__(self) -> None:
        if self.start == self.goal:
            raise ValueError(f"level {self.id}: start and goal coincide at {self.start}")
        if len(self.initial_rotations) != len(self.layout) or any(
            len(r) != len(k) for r, k in zip(self.initial_rotations, self.layout)
        ):
            raise ValueError(f"level {self.id}: layout and rotations differ in shape")

    @property
    def rows(self) -> int:
        return len(self.layout)

    @property
    def cols(self) -> int:
        return len(self.layout[0]) if self.layout else 0

    def kind_at(self, p: Point) -> TileKind:
        return self.layout[p.y][p.x]


def freeze_rows(grid) -> tuple:
    return tuple(tuple(row) for row in grid)
