# src/pathgarden/engine/connectivity.py
# Reachability and win check over a caller-owned rotation grid (pure functions).

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence, Set

from ..grid import Point, check_rotation_grid, neighbor
from ..level import Level, PerspectiveLink
from ..tiles import Direction, open_directions, snap_rotation

Grid = Sequence[Sequence[int]]


def tile_openings(level: Level, rotations: Grid, p: Point):
    return open_directions(level.kind_at(p), rotations[p.y][p.x])


def is_link_active(link: PerspectiveLink, rotations: Grid) -> bool:
    sw = link.required_switch
    if sw is None:
        return True
    t = sw.tile
    if not (0 <= t.y < len(rotations) and 0 <= t.x < len(rotations[t.y])):
        return False
    return snap_rotation(rotations[t.y][t.x]) in sw.rotations


def active_links(level: Level, rotations: Grid) -> List[PerspectiveLink]:
    return [link for link in level.perspective_links if is_link_active(link, rotations)]


def connects(level: Level, rotations: Grid, p: Point, d: Direction) -> bool:
    """True when p opens towards d and the neighbour there opens back."""
    if d not in tile_openings(level, rotations, p):
        return False
    q = neighbor(level.cols, level.rows, p, d)
    return q is not None and d.opposite in tile_openings(level, rotations, q)


def _has_outward_connection(level: Level, rotations: Grid, links: Iterable[PerspectiveLink], p: Point) -> bool:
    if any(connects(level, rotations, p, d) for d in tile_openings(level, rotations, p)):
        return True
    return any(link.touches(p) for link in links)


def _reachable(level: Level, rotations: Grid, links: Sequence[PerspectiveLink]) -> Set[Point]:
    # Spring only lights up when its own pipe actually connects somewhere.
    if not _has_outward_connection(level, rotations, links, level.start):
        return set()

    seen = {level.start}
    queue = deque([level.start])
    while queue:
        cur = queue.popleft()
        for d in tile_openings(level, rotations, cur):
            if not connects(level, rotations, cur, d):
                continue
            q = cur.step(d)
            if q not in seen:
                seen.add(q)
                queue.append(q)
        for link in links:
            if not link.touches(cur):
                continue
            q = link.other(cur)
            if q not in seen:
                seen.add(q)
                queue.append(q)
    return seen


def reachable_from(level: Level, rotations: Grid) -> Set[Point]:
    """
    Cells lit from Spring: BFS through mutually open neighbours and active
    perspective links. Empty when Spring has no connection at all.
    """
    check_rotation_grid(level.cols, level.rows, rotations)
    return _reachable(level, rotations, active_links(level, rotations))


def is_solved(level: Level, rotations: Grid) -> bool:
    """
    Solved when all hold:
      1) Spring connects outward (grid neighbour or active link)
      2) Spring is in the reachable set
      3) Gate is in the reachable set
      4) Gate is entered from a reachable cell (grid neighbour or active link)
    """
    check_rotation_grid(level.cols, level.rows, rotations)
    links = active_links(level, rotations)

    if not _has_outward_connection(level, rotations, links, level.start):
        return False

    reachable = _reachable(level, rotations, links)
    if level.start not in reachable or level.goal not in reachable:
        return False

    goal = level.goal
    for d in tile_openings(level, rotations, goal):
        if connects(level, rotations, goal, d) and goal.step(d) in reachable:
            return True
    return any(link.touches(goal) and link.other(goal) in reachable for link in links)


def initially_solved_level_ids(levels: Iterable[Level]) -> List[int]:
    return [lv.id for lv in levels if is_solved(lv, lv.initial_rotations)]
