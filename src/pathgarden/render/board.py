# src/pathgarden/render/board.py
# Flat top-down board preview with Pillow (tools only; the game renders elsewhere).

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..engine.connectivity import is_link_active, reachable_from, tile_openings
from ..grid import Point, iter_cells
from ..level import Level
from ..levels import LEVEL_THEMES, Theme

FLOWER_COLOR = "#f4a6c8"
OBSTACLE_COLOR = "#4a3c31"
SPRING_COLOR = "#3fa9f5"
GATE_COLOR = "#f5c542"
LINK_IDLE_COLOR = "#9a9a9a"


def _cell_box(p: Point, tile: int) -> Tuple[int, int, int, int]:
    x0, y0 = p.x * tile, p.y * tile
    return (x0, y0, x0 + tile - 1, y0 + tile - 1)


def _center(p: Point, tile: int) -> Tuple[int, int]:
    return (p.x * tile + tile // 2, p.y * tile + tile // 2)


def render_board(
    level: Level,
    rotations: Optional[Sequence[Sequence[int]]] = None,
    tile_size: int = 48,
) -> Image.Image:
    """Draw level under rotations (initial rotations by default) into an RGBA image."""
    grid = rotations if rotations is not None else level.initial_rotations
    theme: Theme = level.theme or LEVEL_THEMES[0]
    lit = reachable_from(level, grid)
    flowers = set(level.flower_tile_keys)
    obstacles = set(level.obstacle_tile_keys)
    switches = {link.required_switch.tile for link in level.perspective_links if link.required_switch}

    w, h = level.cols * tile_size, level.rows * tile_size
    img = Image.new("RGBA", (w, h), theme.ground_color)
    draw = ImageDraw.Draw(img)
    pipe_w = max(2, tile_size // 6)
    mark = max(2, tile_size // 8)

    for p in iter_cells(level.cols, level.rows):
        on = p in lit
        box = _cell_box(p, tile_size)
        fill = theme.tile_active[0] if on else theme.tile_inactive[0]
        outline = theme.stone_colors[2] if p not in switches else GATE_COLOR
        draw.rectangle(box, fill=fill, outline=outline, width=2 if p in switches else 1)

        cx, cy = _center(p, tile_size)
        if p.key in flowers:
            draw.ellipse((box[0] + 2, box[1] + 2, box[0] + 2 + mark, box[1] + 2 + mark), fill=FLOWER_COLOR)
        if p.key in obstacles:
            draw.rectangle((box[2] - 2 - mark, box[3] - 2 - mark, box[2] - 2, box[3] - 2), fill=OBSTACLE_COLOR)

        color = theme.pipe_glow if on else theme.pipe_active
        half = tile_size // 2
        for d in tile_openings(level, grid, p):
            dx, dy = d.delta
            draw.line((cx, cy, cx + dx * half, cy + dy * half), fill=color, width=pipe_w)

    for link in level.perspective_links:
        color = theme.pipe_glow if is_link_active(link, grid) else LINK_IDLE_COLOR
        draw.line((*_center(link.a, tile_size), *_center(link.b, tile_size)), fill=color, width=max(1, pipe_w // 2))

    for p, color in ((level.start, SPRING_COLOR), (level.goal, GATE_COLOR)):
        cx, cy = _center(p, tile_size)
        draw.ellipse((cx - mark, cy - mark, cx + mark, cy + mark), fill=color)

    return img
