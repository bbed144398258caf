from PIL import ImageColor

from pathgarden.grid import Point
from pathgarden.level import Level
from pathgarden.levels import LEVEL_THEMES
from pathgarden.mapgen.generator import generate_level
from pathgarden.render.board import render_board
from pathgarden.tiles import TileKind

ST = TileKind.STRAIGHT

def test_board_size_matches_grid():
    lv = generate_level(6, 31).level
    img = render_board(lv, tile_size=20)
    assert img.size == (lv.cols * 20, lv.rows * 20)
    assert img.mode == "RGBA"

def test_lit_tiles_use_active_fill():
    lv = Level(
        layout=((ST, ST, ST),),
        initial_rotations=((90, 0, 90),),
        start=Point(0, 0),
        goal=Point(2, 0),
    )
    theme = LEVEL_THEMES[0]
    tile = 48
    dark = render_board(lv, tile_size=tile)
    lit = render_board(lv, [[90, 90, 90]], tile_size=tile)
    spot = (tile + 4, 4)  # inside the middle tile, clear of its pipe
    assert dark.getpixel(spot) == ImageColor.getrgb(theme.tile_inactive[0]) + (255,)
    assert lit.getpixel(spot) == ImageColor.getrgb(theme.tile_active[0]) + (255,)
