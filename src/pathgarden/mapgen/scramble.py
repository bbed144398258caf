from typing import List, Sequence

from ..rng import SeededRandom
from ..tiles import normalize_rotation


def scramble_rotations(
    solved: Sequence[Sequence[int]],
    rng: SeededRandom,
    boost: int = 0,
) -> List[List[int]]:
    """
    Initial grid: every cell is turned away from its solved rotation by a
    random quarter offset (a zero draw becomes +90). With a boost, a second
    free offset is added on top, which may land back on the solution.
    """
    out: List[List[int]] = []
    for row in solved:
        new_row = []
        for rotation in row:
            offset = rng.random_int(0, 3) * 90
            base = normalize_rotation(rotation + (offset or 90))
            extra = rng.random_int(0, 3) * 90 if boost else 0
            new_row.append(normalize_rotation(base + extra))
        out.append(new_row)
    return out
