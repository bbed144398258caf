# tests/test_session.py
import pytest

from pathgarden.config import GenerationConfig
from pathgarden.engine.session import GameSession
from pathgarden.grid import Point
from pathgarden.level import Level
from pathgarden.mapgen.generator import generate_level
from pathgarden.tiles import TileKind

ST = TileKind.STRAIGHT

def row_level(rotations, level_id):
    return Level(
        layout=((ST, ST, ST),),
        initial_rotations=(tuple(rotations),),
        start=Point(0, 0),
        goal=Point(2, 0),
        id=level_id,
    )

def make_session():
    return GameSession([row_level((90, 0, 90), 1), row_level((0, 90, 90), 2)])

def test_tap_rotates_counts_and_solves():
    s = make_session()
    st = s.status()
    assert not st.solved and st.lit == frozenset() and st.moves == 0

    st = s.rotate_tile(1, 0)
    assert s.rotations == [[90, 90, 90]]
    assert st.solved and st.moves == 1
    assert st.lit == {Point(0, 0), Point(1, 0), Point(2, 0)}
    # the level itself never changes
    assert s.level.initial_rotations == ((90, 0, 90),)

def test_four_taps_return_to_start():
    s = make_session()
    for _ in range(4):
        s.rotate_tile(2, 0)
    assert s.rotations == [[90, 0, 90]]
    assert s.moves == 4

def test_restart_and_level_switching():
    s = make_session()
    s.rotate_tile(1, 0)
    st = s.restart()
    assert st.moves == 0 and s.rotations == [[90, 0, 90]]

    s.advance()
    assert s.level.id == 2 and s.is_final_level
    s.advance()
    assert s.level.id == 2              # clamped
    s.select_level(0)
    assert s.level.id == 1
    with pytest.raises(IndexError):
        s.select_level(5)
    with pytest.raises(IndexError):
        s.rotate_tile(3, 0)

def test_generated_level_can_be_tapped_to_its_solution():
    cfg = GenerationConfig(seed_override=7, level_count=2)
    s = GameSession(config=cfg)
    solution = generate_level(1, 7).solved_rotations
    lv = s.level
    for y in range(lv.rows):
        for x in range(lv.cols):
            taps = ((solution[y][x] - s.rotations[y][x]) // 90) % 4
            for _ in range(taps):
                s.rotate_tile(x, y)
    st = s.status()
    assert st.solved
    assert lv.start in st.lit and lv.goal in st.lit
