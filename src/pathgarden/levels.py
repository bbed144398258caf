# Per-level generation table and display metadata.
# Level ids are 1-based; ids past the table reuse its last row.

from dataclasses import dataclass
from typing import Optional, Tuple

from .mapgen.path import PathDirection

L2R = PathDirection.LEFT_TO_RIGHT
R2L = PathDirection.RIGHT_TO_LEFT
T2B = PathDirection.TOP_TO_BOTTOM
B2T = PathDirection.BOTTOM_TO_TOP


@dataclass(frozen=True)
class LevelGenerationConfig:
    cols: int
    rows: int
    directions: Tuple[PathDirection, ...]
    min_turns: int
    target_length: int
    scramble_boost: int
    perspective_links: int
    decor_density: float


@dataclass(frozen=True)
class Theme:
    sky_colors: Tuple[str, str, str]
    stone_colors: Tuple[str, str, str]
    tile_active: Tuple[str, str, str]
    tile_inactive: Tuple[str, str, str]
    pipe_active: str
    pipe_glow: str
    ground_color: str
    star_opacity: float
    inactive_pipe_opacity: Optional[float] = None
    inactive_pipe_stroke_bonus: Optional[int] = None


LEVEL_GENERATION_CONFIGS: Tuple[LevelGenerationConfig, ...] = (
    LevelGenerationConfig(3, 3, (L2R,), 1, 4, 0, 0, 0.34),
    LevelGenerationConfig(4, 3, (T2B, R2L), 2, 6, 0, 0, 0.36),
    LevelGenerationConfig(4, 4, (R2L, B2T), 3, 7, 0, 1, 0.38),
    LevelGenerationConfig(5, 4, (B2T, L2R), 4, 8, 1, 1, 0.40),
    LevelGenerationConfig(5, 4, (T2B, L2R, R2L), 4, 9, 1, 1, 0.42),
    LevelGenerationConfig(5, 5, (R2L, T2B), 5, 10, 1, 1, 0.45),
    LevelGenerationConfig(6, 5, (L2R, B2T), 6, 12, 1, 2, 0.46),
    LevelGenerationConfig(6, 5, (T2B, R2L), 6, 13, 1, 2, 0.46),
    LevelGenerationConfig(6, 6, (B2T, L2R), 7, 14, 2, 2, 0.48),
    LevelGenerationConfig(6, 6, (R2L, T2B, L2R), 8, 15, 2, 2, 0.50),
    LevelGenerationConfig(6, 6, (L2R, B2T, T2B), 8, 16, 2, 2, 0.52),
    LevelGenerationConfig(6, 6, (T2B, R2L), 9, 17, 2, 3, 0.54),
    LevelGenerationConfig(6, 6, (B2T, L2R), 9, 18, 2, 3, 0.56),
    LevelGenerationConfig(6, 6, (R2L, T2B), 10, 19, 3, 3, 0.58),
)

LEVEL_NAMES = (
    "Garden Walk",
    "Sky Terrace",
    "Canopy Towers",
    "Moss Maze",
    "Moon Fern Route",
    "Stone Brook",
    "Glade Crossing",
    "Quiet Canals",
    "Bamboo Spiral",
    "Pond Weave",
    "Cloud Roots",
    "Night Petals",
    "Cedar Verge",
    "Golden Gate",
)

LEVEL_VIBES = (
    "Gentle intro to rotation and flow",
    "Floating garden paths",
    "Multi-layer route with bridge crossings",
    "Dense foliage and winding channels",
    "Calm moonlit route through soft turns",
    "Cross-stream puzzle with hidden shortcuts",
    "Balanced turns and fast directional shifts",
    "Quiet path with deceptive turns",
    "Layered grid with fast correction loops",
    "Steady pond route with long segments",
    "Cloud deck puzzle with bridge toggles",
    "Night garden with tight switch choices",
    "Long calm route with varied corners",
    "Victory lap through sunlit stone",
)

FINAL_LEVEL_ID = 14  # always gets the last (sunlit) theme

LEVEL_THEMES: Tuple[Theme, ...] = (
    Theme(
        sky_colors=("#7fb5b5", "#5a9a9a", "#4a8a8a"),
        stone_colors=("#6a7c62", "#5a6b52", "#4a5a42"),
        tile_active=("#8ab89a", "#6a9a7a", "#5a8a6a"),
        tile_inactive=("#7a8c6e", "#6a7c5e", "#5a6c4e"),
        pipe_active="#4a9e6e",
        pipe_glow="#00d2c8",
        ground_color="#C9E8CE",
        star_opacity=0.28,
    ),
    Theme(
        sky_colors=("#b8d4f0", "#7fb5c8", "#5a9aaa"),
        stone_colors=("#8a9c82", "#7a8c72", "#6a7c62"),
        tile_active=("#a0c8a0", "#80aa80", "#60906a"),
        tile_inactive=("#8a9c7e", "#7a8c6e", "#6a7c5e"),
        pipe_active="#3a8e5e",
        pipe_glow="#60d890",
        ground_color="#b8d8be",
        star_opacity=0.1,
        inactive_pipe_opacity=0.9,
        inactive_pipe_stroke_bonus=3,
    ),
    Theme(
        sky_colors=("#1a1a2e", "#16213e", "#0f3460"),
        stone_colors=("#3a4a5a", "#2a3a4a", "#1a2a3a"),
        tile_active=("#2a6a8a", "#1a5a7a", "#0a4a6a"),
        tile_inactive=("#2a3a4a", "#1a2a3a", "#0a1a2a"),
        pipe_active="#00d2c8",
        pipe_glow="#00ffff",
        ground_color="#1a3a5a",
        star_opacity=0.8,
    ),
    Theme(
        sky_colors=("#99c9a4", "#6ea88a", "#4f886f"),
        stone_colors=("#74896b", "#62765a", "#4e5f47"),
        tile_active=("#98d2b3", "#72b593", "#548d75"),
        tile_inactive=("#739273", "#617c61", "#4f654f"),
        pipe_active="#2c8f63",
        pipe_glow="#6adfac",
        ground_color="#bedfb8",
        star_opacity=0.14,
    ),
    Theme(
        sky_colors=("#ffd8a8", "#f7b267", "#e76f51"),
        stone_colors=("#7f6a58", "#6b5849", "#544437"),
        tile_active=("#e9b872", "#d39a55", "#b67e3f"),
        tile_inactive=("#9d846c", "#846e59", "#6a5948"),
        pipe_active="#7fb069",
        pipe_glow="#b7f58e",
        ground_color="#f4d5ad",
        star_opacity=0.2,
    ),
    Theme(
        sky_colors=("#d6e2ff", "#9fb3f6", "#6f87d9"),
        stone_colors=("#8290a8", "#6d7890", "#566078"),
        tile_active=("#b8c8ff", "#8ea4ef", "#6f88d6"),
        tile_inactive=("#8f97b2", "#787f98", "#606781"),
        pipe_active="#5073d6",
        pipe_glow="#8dadff",
        ground_color="#d5def6",
        star_opacity=0.38,
    ),
    Theme(
        sky_colors=("#F5E6C8", "#E8D4A3", "#D4AF37"),
        stone_colors=("#8B7355", "#6B5344", "#4A3C31"),
        tile_active=("#E8D4A3", "#D4B853", "#C9A227"),
        tile_inactive=("#B8A060", "#9A8B4A", "#7A6B3A"),
        pipe_active="#2E7D32",
        pipe_glow="#7FFF8F",
        ground_color="#F5E6C8",
        star_opacity=0.22,
    ),
)


def config_for_level(level_id: int) -> LevelGenerationConfig:
    if 1 <= level_id <= len(LEVEL_GENERATION_CONFIGS):
        return LEVEL_GENERATION_CONFIGS[level_id - 1]
    return LEVEL_GENERATION_CONFIGS[-1]


def name_for_level(level_id: int) -> str:
    if 1 <= level_id <= len(LEVEL_NAMES):
        return LEVEL_NAMES[level_id - 1]
    return f"Garden {level_id}"


def vibe_for_level(level_id: int) -> str:
    if 1 <= level_id <= len(LEVEL_VIBES):
        return LEVEL_VIBES[level_id - 1]
    return "Procedurally generated path challenge"
