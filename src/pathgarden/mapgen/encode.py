from typing import List, Sequence, Tuple

from ..grid import Point, direction_between
from ..tiles import Direction, TileKind, tile_for_directions


def path_cell_directions(path: Sequence[Point], i: int) -> Tuple[Direction, Direction]:
    """
    The two openings of path[i]. Endpoints point at their single neighbour and
    at its opposite, so Spring and Gate come out as straights.
    """
    cur = path[i]
    prev = path[i - 1] if i > 0 else None
    nxt = path[i + 1] if i < len(path) - 1 else None
    if prev is not None and nxt is not None:
        return direction_between(cur, prev), direction_between(cur, nxt)
    if nxt is not None:
        d = direction_between(cur, nxt)
        return d, d.opposite
    if prev is not None:
        d = direction_between(cur, prev)
        return d, d.opposite
    return Direction.E, Direction.W


def encode_path(
    path: Sequence[Point],
    layout: List[List[TileKind]],
    solved: List[List[int]],
) -> None:
    """Write (kind, solved rotation) for every path cell, replacing filler in place."""
    for i, p in enumerate(path):
        kind, rotation = tile_for_directions(*path_cell_directions(path, i))
        layout[p.y][p.x] = kind
        solved[p.y][p.x] = rotation
