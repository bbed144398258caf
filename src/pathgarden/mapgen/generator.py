# src/pathgarden/mapgen/generator.py
# Level orchestrator: candidate build, validation, retry, fallback.

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence

from ..config import MAX_GENERATION_ATTEMPTS, GenerationConfig, resolve_session_seed
from ..engine.connectivity import is_solved
from ..grid import Point, Rotations
from ..level import Level, freeze_rows
from ..levels import (
    FINAL_LEVEL_ID, LEVEL_THEMES,
    config_for_level, name_for_level, vibe_for_level,
)
from ..rng import SeededRandom, attempt_seed, level_seed
from ..tiles import TileKind
from .bridges import place_links
from .encode import encode_path
from .path import count_turns, synthesize_path
from .placement import place_decorations
from .scramble import scramble_rotations
from .unsolved import ensure_unsolved

logger = logging.getLogger(__name__)

MIN_EXPECTED_MOVES = 6


class GenerationState(Enum):
    ATTEMPTING = "attempting"
    ACCEPTED = "accepted"
    FAILED = "failed"


@dataclass(frozen=True)
class Candidate:
    level: Level
    solved_rotations: Rotations
    path: Sequence[Point]


@dataclass(frozen=True)
class GenerationResult:
    level: Level
    state: GenerationState
    attempts: int
    solved_rotations: Rotations  # canonical solution, never stored on the Level

    @property
    def degraded(self) -> bool:
        return self.state is GenerationState.FAILED


def build_candidate(level_id: int, session_seed: int) -> Candidate:
    """
    One generation pass for (level_id, session_seed). Draw order:
      1) filler kinds, then filler rotations (row-major)
      2) path walks and selection
      3) decorations, links
      4) scramble
      5) theme, expected-move slack
    """
    seed = level_seed(session_seed, level_id)
    rng = SeededRandom(seed)
    cfg = config_for_level(level_id)
    cols, rows = cfg.cols, cfg.rows

    layout: List[List[TileKind]] = [
        [TileKind.CORNER if rng.next() > 0.5 else TileKind.STRAIGHT for _ in range(cols)]
        for _ in range(rows)
    ]
    solved: Rotations = [[rng.random_int(0, 3) * 90 for _ in range(cols)] for _ in range(rows)]

    path = synthesize_path(
        rng, cols, rows, cfg.directions, cfg.min_turns, cfg.target_length, level_id
    )
    encode_path(path, layout, solved)

    decor = place_decorations(cols, rows, path, rng, cfg.decor_density)
    links = place_links(path, decor.free_cells, rng, cfg.perspective_links)
    initial = scramble_rotations(solved, rng, cfg.scramble_boost)

    theme = LEVEL_THEMES[-1] if level_id == FINAL_LEVEL_ID else rng.choice(LEVEL_THEMES)
    expected = max(MIN_EXPECTED_MOVES, len(path) + count_turns(path) + rng.random_int(1, 6))

    level = Level(
        layout=freeze_rows(layout),
        initial_rotations=freeze_rows(initial),
        start=path[0],
        goal=path[-1],
        perspective_links=tuple(links),
        id=level_id,
        name=name_for_level(level_id),
        vibe=vibe_for_level(level_id),
        expected_moves=expected,
        theme=theme,
        flower_tile_keys=decor.flower_keys,
        obstacle_tile_keys=decor.obstacle_keys,
        seed=seed,
    )
    level = _with_unsolved_start(level)
    return Candidate(level=level, solved_rotations=solved, path=tuple(path))


def _with_unsolved_start(level: Level) -> Level:
    fixed = ensure_unsolved(level, level.initial_rotations)
    return replace(level, initial_rotations=freeze_rows(fixed))


def is_valid_candidate(candidate: Candidate) -> bool:
    lv = candidate.level
    return is_solved(lv, candidate.solved_rotations) and not is_solved(lv, lv.initial_rotations)


def generate_level(
    level_id: int,
    session_seed: int,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
) -> GenerationResult:
    """
    Retry with perturbed seeds until a candidate is solvable and not
    pre-solved. After max_attempts, fall back to the first candidate.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    state = GenerationState.ATTEMPTING
    first: Optional[Candidate] = None
    attempts = 0
    while state is GenerationState.ATTEMPTING:
        candidate = build_candidate(level_id, attempt_seed(session_seed, attempts))
        attempts += 1
        if first is None:
            first = candidate
        if is_valid_candidate(candidate):
            state = GenerationState.ACCEPTED
            logger.debug("level %d accepted after %d attempt(s), seed=%d",
                         level_id, attempts, candidate.level.seed)
            return GenerationResult(level=candidate.level, state=state, attempts=attempts,
                                    solved_rotations=candidate.solved_rotations)
        if attempts >= max_attempts:
            state = GenerationState.FAILED

    level = _with_unsolved_start(first.level)
    logger.warning(
        "level %d: no valid candidate in %d attempts (session seed %d); "
        "using degraded first candidate seed=%d",
        level_id, attempts, session_seed, level.seed,
    )
    return GenerationResult(level=level, state=state, attempts=attempts,
                            solved_rotations=first.solved_rotations)


def generate_session(config: Optional[GenerationConfig] = None, session_seed: Optional[int] = None) -> List[Level]:
    """All levels 1..config.level_count for one session seed."""
    config = config or GenerationConfig()
    if session_seed is None:
        session_seed = resolve_session_seed(config)
    logger.info("generating %d levels for session seed %d", config.level_count, session_seed)
    return [
        generate_level(level_id, session_seed, config.max_attempts).level
        for level_id in range(1, config.level_count + 1)
    ]
