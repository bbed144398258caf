# tests/test_connectivity.py
import pytest

from pathgarden.engine.connectivity import (
    initially_solved_level_ids, is_link_active, is_solved, reachable_from,
)
from pathgarden.grid import Point, RotationGridError
from pathgarden.level import Level, PerspectiveLink, RequiredSwitch
from pathgarden.tiles import TileKind

ST = TileKind.STRAIGHT

# Two-row board: the top row is the route (0,0) -> (2,0), the bottom row
# holds filler/switch tiles.
def make_level(top, bottom=(0, 0, 0), links=(), level_id=1):
    return Level(
        layout=((ST, ST, ST), (ST, ST, ST)),
        initial_rotations=(tuple(top), tuple(bottom)),
        start=Point(0, 0),
        goal=Point(2, 0),
        perspective_links=tuple(links),
        id=level_id,
    )

def grid(level):
    return [list(r) for r in level.initial_rotations]

def test_straight_row_lights_and_solves():
    lv = make_level((90, 90, 90))
    assert reachable_from(lv, grid(lv)) == {Point(0, 0), Point(1, 0), Point(2, 0)}
    assert is_solved(lv, grid(lv))

def test_spring_without_connection_stays_dark():
    lv = make_level((90, 0, 90))
    assert reachable_from(lv, grid(lv)) == set()
    assert not is_solved(lv, grid(lv))

def test_bottom_row_never_lights_through_mismatch():
    # (0,0) opens E/W; (0,1) below is N/S but (0,0) has no S opening
    lv = make_level((90, 90, 90), bottom=(0, 0, 0))
    assert Point(0, 1) not in reachable_from(lv, grid(lv))

def test_link_without_switch_is_always_active():
    link = PerspectiveLink(a=Point(0, 0), b=Point(2, 0))
    for rot in (0, 90, 180, 270):
        assert is_link_active(link, [[rot] * 3, [rot] * 3])

def test_switch_gates_link():
    link = PerspectiveLink(
        a=Point(0, 0), b=Point(2, 0),
        required_switch=RequiredSwitch(tile=Point(1, 1), rotations=frozenset((0, 180))),
    )
    rotations = [[90, 0, 90], [0, 90, 0]]
    assert is_link_active(link, rotations) is False
    rotations[1][1] = 180
    assert is_link_active(link, rotations) is True
    rotations[1][1] = 270
    assert is_link_active(link, rotations) is False
    rotations[1][1] = 360
    assert is_link_active(link, rotations) is True

def test_active_link_bridges_broken_row():
    link = PerspectiveLink(
        a=Point(0, 0), b=Point(2, 0),
        required_switch=RequiredSwitch(tile=Point(1, 1), rotations=frozenset((90, 270))),
    )
    lv = make_level((90, 0, 90), bottom=(0, 90, 0), links=[link])
    g = grid(lv)
    assert is_solved(lv, g)
    assert {Point(0, 0), Point(2, 0)} <= reachable_from(lv, g)

    g[1][1] = 0  # switch off
    assert not is_solved(lv, g)
    assert reachable_from(lv, g) == set()

def test_reachability_grows_when_a_boundary_starts_matching():
    lv = make_level((90, 90, 0))
    g1 = grid(lv)
    g2 = grid(lv)
    g2[0][2] = 90  # (1,0)-(2,0) now match
    r1, r2 = reachable_from(lv, g1), reachable_from(lv, g2)
    assert r1 <= r2
    assert Point(2, 0) in r2 and Point(2, 0) not in r1
    assert not is_solved(lv, g1) and is_solved(lv, g2)

def test_malformed_rotation_grid_fails_fast():
    lv = make_level((90, 90, 90))
    with pytest.raises(RotationGridError):
        reachable_from(lv, [[90, 90, 90]])
    with pytest.raises(RotationGridError):
        is_solved(lv, [[90, 90], [0, 0]])
    with pytest.raises(ValueError):
        is_solved(lv, [])

def test_initially_solved_level_ids():
    solved = make_level((90, 90, 90), level_id=1)
    open_ = make_level((90, 0, 90), level_id=2)
    assert initially_solved_level_ids([solved, open_]) == [1]
