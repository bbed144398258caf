# tests/test_path.py
import pytest

from pathgarden.grid import Point
from pathgarden.rng import SeededRandom
from pathgarden.mapgen.path import (
    PathDirection, PathOptions, build_path, count_turns, select_path, synthesize_path,
)

def on_entry_edge(p, cols, rows, direction):
    return {
        PathDirection.LEFT_TO_RIGHT: p.x == 0,
        PathDirection.RIGHT_TO_LEFT: p.x == cols - 1,
        PathDirection.TOP_TO_BOTTOM: p.y == 0,
        PathDirection.BOTTOM_TO_TOP: p.y == rows - 1,
    }[direction]

def on_exit_edge(p, cols, rows, direction):
    return {
        PathDirection.LEFT_TO_RIGHT: p.x == cols - 1,
        PathDirection.RIGHT_TO_LEFT: p.x == 0,
        PathDirection.TOP_TO_BOTTOM: p.y == rows - 1,
        PathDirection.BOTTOM_TO_TOP: p.y == 0,
    }[direction]

def test_walks_are_simple_and_edge_to_edge():
    for seed in range(1, 30):
        for direction in PathDirection:
            cols, rows = 6, 5
            path = build_path(cols, rows, SeededRandom(seed), direction)
            assert len(set(path)) == len(path), f"repeated cell for seed {seed} {direction}"
            for a, b in zip(path, path[1:]):
                assert abs(a.x - b.x) + abs(a.y - b.y) == 1
            assert on_entry_edge(path[0], cols, rows, direction)
            assert on_exit_edge(path[-1], cols, rows, direction)
            assert all(0 <= p.x < cols and 0 <= p.y < rows for p in path)

def test_exhausted_budget_completes_straight():
    rng = SeededRandom(3)
    path = build_path(5, 4, rng, PathDirection.LEFT_TO_RIGHT, PathOptions(max_steps_multiplier=0))
    row = path[0].y
    assert path == [Point(x, row) for x in range(5)]

def test_same_seed_same_walk():
    a = build_path(6, 6, SeededRandom(11), PathDirection.BOTTOM_TO_TOP)
    b = build_path(6, 6, SeededRandom(11), PathDirection.BOTTOM_TO_TOP)
    assert a == b

def test_axis_too_short_is_rejected():
    with pytest.raises(ValueError):
        build_path(1, 3, SeededRandom(1), PathDirection.LEFT_TO_RIGHT)

def test_count_turns():
    straight = [Point(0, 0), Point(1, 0), Point(2, 0)]
    zigzag = [Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 1), Point(2, 2)]
    assert count_turns(straight) == 0
    assert count_turns(zigzag) == 3
    assert count_turns(straight[:2]) == 0

def test_select_path_prefers_target_and_keeps_first_tie():
    straight = [Point(0, 0), Point(1, 0), Point(2, 0)]
    bent = [Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 1)]
    bent2 = [Point(0, 1), Point(1, 1), Point(1, 0), Point(2, 0)]
    assert select_path([straight, bent], min_turns=2, target_length=4) is bent
    assert select_path([bent, bent2], min_turns=2, target_length=4) is bent

def test_synthesize_uses_allowed_directions():
    rng = SeededRandom(2024)
    path = synthesize_path(rng, 4, 3, (PathDirection.TOP_TO_BOTTOM,), 2, 6, level_id=2)
    assert path[0].y == 0 and path[-1].y == 2
