from typing import List, Sequence

from ..grid import Point
from ..level import PerspectiveLink, RequiredSwitch
from ..rng import SeededRandom

CELLS_PER_LINK = 5
SWITCH_ROTATION_SETS = (frozenset((0, 180)), frozenset((90, 270)))


def max_links(path_length: int, configured: int) -> int:
    return min(configured, max(0, path_length // CELLS_PER_LINK))


def place_links(
    path: Sequence[Point],
    pool: Sequence[Point],
    rng: SeededRandom,
    configured: int,
) -> List[PerspectiveLink]:
    """
    Link a cell from the first third of the path to one from the second half.
    Switch tiles are taken from the free pool in order; with an empty pool the
    link is unconditional.
    """
    n = len(path)
    links: List[PerspectiveLink] = []
    for i in range(max_links(n, configured)):
        # ranges can touch on short paths (n=5 allows a=1, b=2); anchors may be path neighbours
        a_idx = rng.random_int(1, max(1, n // 3))
        b_idx = rng.random_int(n // 2, n - 2)
        switch_tile = pool[i % len(pool)] if pool else None
        switch = None
        if switch_tile is not None:
            rotations = SWITCH_ROTATION_SETS[0] if rng.next() > 0.5 else SWITCH_ROTATION_SETS[1]
            switch = RequiredSwitch(tile=switch_tile, rotations=rotations)
        links.append(PerspectiveLink(a=path[a_idx], b=path[b_idx], required_switch=switch))
    return links
