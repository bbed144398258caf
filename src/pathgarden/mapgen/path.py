# src/pathgarden/mapgen/path.py
# Biased random walk from an entry edge to the opposite edge.
# Coordinates are 0-based (x = column, y = row).

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..grid import Point, direction_between
from ..rng import SeededRandom

logger = logging.getLogger(__name__)

PATH_ATTEMPTS = 18
TURN_WEIGHT = 1.8


class PathDirection(Enum):
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"
    TOP_TO_BOTTOM = "top_to_bottom"
    BOTTOM_TO_TOP = "bottom_to_top"


@dataclass(frozen=True)
class PathOptions:
    forward_bias: float = 2.8
    wander_bias: float = 1.4
    revisit_penalty: float = 2.2
    max_steps_multiplier: float = 9


# (unit step along the traversal axis)
_FORWARD: Dict[PathDirection, Tuple[int, int]] = {
    PathDirection.LEFT_TO_RIGHT: (1, 0),
    PathDirection.RIGHT_TO_LEFT: (-1, 0),
    PathDirection.TOP_TO_BOTTOM: (0, 1),
    PathDirection.BOTTOM_TO_TOP: (0, -1),
}


def _endpoints(
    cols: int, rows: int, rng: SeededRandom, direction: PathDirection
) -> Tuple[Point, Point, Callable[[Point], bool]]:
    """Entry cell (random along the entry edge), reference goal, exit-edge test."""
    if direction is PathDirection.RIGHT_TO_LEFT:
        start = Point(cols - 1, rng.random_int(0, rows - 1))
        return start, Point(0, start.y), lambda p: p.x <= 0
    if direction is PathDirection.TOP_TO_BOTTOM:
        start = Point(rng.random_int(0, cols - 1), 0)
        return start, Point(start.x, rows - 1), lambda p: p.y >= rows - 1
    if direction is PathDirection.BOTTOM_TO_TOP:
        start = Point(rng.random_int(0, cols - 1), rows - 1)
        return start, Point(start.x, 0), lambda p: p.y <= 0
    start = Point(0, rng.random_int(0, rows - 1))
    return start, Point(cols - 1, start.y), lambda p: p.x >= cols - 1


def _orthogonal(cols: int, rows: int, p: Point) -> List[Point]:
    out = []
    if p.x > 0:
        out.append(Point(p.x - 1, p.y))
    if p.x < cols - 1:
        out.append(Point(p.x + 1, p.y))
    if p.y > 0:
        out.append(Point(p.x, p.y - 1))
    if p.y < rows - 1:
        out.append(Point(p.x, p.y + 1))
    return out


class _Trail:
    """Ordered walk that erases loops, so every cell appears at most once."""

    def __init__(self, start: Point) -> None:
        self.cells: List[Point] = [start]
        self.index: Dict[Point, int] = {start: 0}

    @property
    def head(self) -> Point:
        return self.cells[-1]

    def push(self, p: Point) -> None:
        i = self.index.get(p)
        if i is not None:
            for dropped in self.cells[i + 1:]:
                del self.index[dropped]
            del self.cells[i + 1:]
            return
        self.index[p] = len(self.cells)
        self.cells.append(p)


def build_path(
    cols: int,
    rows: int,
    rng: SeededRandom,
    direction: PathDirection = PathDirection.LEFT_TO_RIGHT,
    options: Optional[PathOptions] = None,
) -> List[Point]:
    """
    Walk from a random cell on the entry edge until the exit edge is reached.

    Every orthogonal neighbour is scored as
        1 + forward/wander bonus + max(0, cols+rows - manhattan) - revisit
    and one is drawn by weighted choice. When the step budget
    (cols*rows*max_steps_multiplier) runs out, the walk is finished with a
    straight run along the traversal axis.
    """
    opts = options or PathOptions()
    dx, dy = _FORWARD[direction]
    axis_len = cols if dx else rows
    if axis_len < 2:
        raise ValueError(f"{direction.value} needs at least 2 cells along its axis, got {cols}x{rows}")

    start, goal, at_exit = _endpoints(cols, rows, rng, direction)
    trail = _Trail(start)
    visited = {start}
    max_steps = cols * rows * opts.max_steps_multiplier
    span = cols + rows

    steps = 0
    while not at_exit(trail.head) and steps < max_steps:
        steps += 1
        cur = trail.head
        scored = []
        for cand in _orthogonal(cols, rows, cur):
            forward = (cand.x - cur.x, cand.y - cur.y) == (dx, dy)
            manhattan = abs(goal.x - cand.x) + abs(goal.y - cand.y)
            score = 1.0
            score += opts.forward_bias if forward else opts.wander_bias
            score += max(0, span - manhattan)
            if cand in visited:
                score -= opts.revisit_penalty
            scored.append((cand, score))
        nxt = rng.weighted_choice(scored)
        trail.push(nxt)
        visited.add(nxt)

    if not at_exit(trail.head):
        logger.debug("walk budget of %d steps exhausted at %s; completing straight", steps, trail.head)
        while not at_exit(trail.head):
            cur = trail.head
            trail.push(Point(cur.x + dx, cur.y + dy))

    return list(trail.cells)


def count_turns(path: Sequence[Point]) -> int:
    turns = 0
    for i in range(2, len(path)):
        if direction_between(path[i - 2], path[i - 1]) != direction_between(path[i - 1], path[i]):
            turns += 1
    return turns


def path_score(path: Sequence[Point], min_turns: int, target_length: int) -> float:
    return abs(count_turns(path) - min_turns) * TURN_WEIGHT + abs(len(path) - target_length)


def select_path(paths: Sequence[List[Point]], min_turns: int, target_length: int) -> List[Point]:
    # min() keeps the first of equal scores
    return min(paths, key=lambda p: path_score(p, min_turns, target_length))


def synthesize_path(
    rng: SeededRandom,
    cols: int,
    rows: int,
    directions: Sequence[PathDirection],
    min_turns: int,
    target_length: int,
    level_id: int,
    attempts: int = PATH_ATTEMPTS,
) -> List[Point]:
    """Run several independent walks with jittered biases and keep the best fit."""
    candidates = []
    for _ in range(attempts):
        direction = rng.choice(directions)
        options = PathOptions(
            forward_bias=2.2 + level_id * 0.08 + rng.next() * 0.6,
            wander_bias=0.9 + level_id * 0.05 + rng.next() * 1.2,
            revisit_penalty=1.2 + rng.next() * 1.6,
            max_steps_multiplier=7 + level_id * 0.45,
        )
        candidates.append(build_path(cols, rows, rng, direction, options))
    return select_path(candidates, min_turns, target_length)
