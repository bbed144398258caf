# src/pathgarden/engine/session.py
# Caller-side session: owns the mutable rotation grid, the engine stays pure.

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence

from ..config import GenerationConfig
from ..grid import Point, Rotations, clone_rotations, in_bounds
from ..level import Level
from ..mapgen.generator import generate_session
from ..tiles import rotate
from .connectivity import is_solved, reachable_from


@dataclass(frozen=True)
class BoardStatus:
    lit: FrozenSet[Point]
    solved: bool
    moves: int


class GameSession:
    def __init__(
        self,
        levels: Optional[Sequence[Level]] = None,
        *,
        config: Optional[GenerationConfig] = None,
        session_seed: Optional[int] = None,
    ) -> None:
        if levels is None:
            levels = generate_session(config, session_seed=session_seed)
        if not levels:
            raise ValueError("a session needs at least one level")
        self.levels: List[Level] = list(levels)
        self.index = 0
        self.rotations: Rotations = []
        self.moves = 0
        self.select_level(0)

    @property
    def level(self) -> Level:
        return self.levels[self.index]

    @property
    def is_final_level(self) -> bool:
        return self.index == len(self.levels) - 1

    # ---- Lifecycle ----
    def select_level(self, index: int) -> BoardStatus:
        if not 0 <= index < len(self.levels):
            raise IndexError(f"level index {index} out of range 0..{len(self.levels) - 1}")
        self.index = index
        return self.restart()

    def restart(self) -> BoardStatus:
        self.rotations = clone_rotations(self.level.initial_rotations)
        self.moves = 0
        return self.status()

    def advance(self) -> BoardStatus:
        return self.select_level(min(self.index + 1, len(self.levels) - 1))

    # ---- Play ----
    def rotate_tile(self, x: int, y: int) -> BoardStatus:
        """One tap: +90 on (x, y), then recompute lit tiles and win state."""
        lv = self.level
        if not in_bounds(lv.cols, lv.rows, Point(x, y)):
            raise IndexError(f"tile ({x},{y}) outside {lv.cols}x{lv.rows} board")
        self.rotations[y][x] = rotate(self.rotations[y][x])
        self.moves += 1
        return self.status()

    def status(self) -> BoardStatus:
        lit = frozenset(reachable_from(self.level, self.rotations))
        return BoardStatus(lit=lit, solved=is_solved(self.level, self.rotations), moves=self.moves)
