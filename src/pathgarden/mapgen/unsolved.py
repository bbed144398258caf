# src/pathgarden/mapgen/unsolved.py
# Make sure a board is not handed out already solved.

import logging
from typing import List, Sequence

from ..engine.connectivity import is_solved
from ..grid import Point, Rotations, clone_rotations
from ..level import Level
from ..tiles import ALT_OFFSETS, rotate

logger = logging.getLogger(__name__)


def cell_order(level: Level) -> List[Point]:
    """Row-major cells, rotated so the walk starts at seed mod cell count."""
    cols, rows = level.cols, level.rows
    count = cols * rows
    first = abs(level.seed) % count
    return [Point(i % cols, i // cols) for i in ((first + k) % count for k in range(count))]


def ensure_unsolved(level: Level, rotations: Sequence[Sequence[int]]) -> Rotations:
    """
    Return a copy of rotations that does not satisfy is_solved.

    1) single tiles in seed order, each tried at +90/+180/+270
    2) pairs (second cell after the first in the same order), every 3x3 combo
    If both passes fail the solved copy is returned unchanged. The pair pass
    is quadratic in cell count; boards here stay at 36 cells or fewer.
    """
    grid = clone_rotations(rotations)
    if not is_solved(level, grid):
        return grid

    order = cell_order(level)

    for p in order:
        original = grid[p.y][p.x]
        for delta in ALT_OFFSETS:
            grid[p.y][p.x] = rotate(original, delta)
            if not is_solved(level, grid):
                return grid
        grid[p.y][p.x] = original

    for i, a in enumerate(order):
        a_orig = grid[a.y][a.x]
        for a_delta in ALT_OFFSETS:
            grid[a.y][a.x] = rotate(a_orig, a_delta)
            for b in order[i + 1:]:
                b_orig = grid[b.y][b.x]
                for b_delta in ALT_OFFSETS:
                    grid[b.y][b.x] = rotate(b_orig, b_delta)
                    if not is_solved(level, grid):
                        return grid
                grid[b.y][b.x] = b_orig
        grid[a.y][a.x] = a_orig

    logger.debug("level %d: no single or paired rotation escapes the solved state", level.id)
    return grid
