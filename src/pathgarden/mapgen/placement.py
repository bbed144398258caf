# src/pathgarden/mapgen/placement.py
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..grid import Point, iter_cells
from ..rng import SeededRandom

FLOWER_CEILING = 0.9
OBSTACLE_CEILING = 1.05


@dataclass(frozen=True)
class Decorations:
    free_cells: Tuple[Point, ...]      # non-path pool, row-major
    flower_keys: Tuple[str, ...]
    obstacle_keys: Tuple[str, ...]


def free_cells(cols: int, rows: int, path: Sequence[Point]) -> List[Point]:
    on_path = set(path)
    ends = {path[0], path[-1]} if path else set()
    return [p for p in iter_cells(cols, rows) if p not in on_path and p not in ends]


def place_decorations(
    cols: int,
    rows: int,
    path: Sequence[Point],
    rng: SeededRandom,
    density: float,
) -> Decorations:
    """
    Flag free cells as flower / obstacle. Purely cosmetic.
    Order:
      1) one draw per free cell for flowers  (hit when r > 0.9 - density)
      2) one draw per free cell for obstacles (hit when r > 1.05 - density)
    A cell may end up with both flags.
    """
    pool = free_cells(cols, rows, path)
    flowers = tuple(p.key for p in pool if rng.next() > FLOWER_CEILING - density)
    obstacles = tuple(p.key for p in pool if rng.next() > OBSTACLE_CEILING - density)
    return Decorations(free_cells=tuple(pool), flower_keys=flowers, obstacle_keys=obstacles)
