#!/usr/bin/env python3
# Minimal interactive viewer for path garden sessions.
# - Click a tile: rotate it +90 (counts a move)
# - Left/Right: previous/next level
# - R: restart level
# - 60 Hz fixed loop

import argparse, logging
import pygame
from pathgarden.config import GenerationConfig, config_from_env, parse_seed_override, resolve_session_seed
from pathgarden.engine.session import GameSession
from pathgarden.render.board import render_board

def board_surface(session, tile):
    img = render_board(session.level, session.rotations, tile_size=tile)
    return pygame.image.fromstring(img.tobytes(), img.size, img.mode)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, default=None, help="Session seed override (number or text)")
    ap.add_argument("--tile", type=int, default=72, help="Tile size in pixels")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.seed is not None:
        seed = parse_seed_override(args.seed)
        cfg = GenerationConfig(seed_override=seed)
    else:
        cfg = config_from_env()
    session_seed = resolve_session_seed(cfg)
    session = GameSession(config=cfg, session_seed=session_seed)

    pygame.init()
    clock = pygame.time.Clock()

    def resize():
        lv = session.level
        return pygame.display.set_mode((lv.cols * args.tile, lv.rows * args.tile))

    screen = resize()
    status = session.status()
    surface = board_surface(session, args.tile)
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                x, y = ev.pos[0] // args.tile, ev.pos[1] // args.tile
                if 0 <= x < session.level.cols and 0 <= y < session.level.rows:
                    status = session.rotate_tile(x, y)
                    surface = board_surface(session, args.tile)
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    status = session.restart()
                    surface = board_surface(session, args.tile)
                elif ev.key in (pygame.K_RIGHT, pygame.K_LEFT):
                    step = 1 if ev.key == pygame.K_RIGHT else -1
                    status = session.select_level((session.index + step) % len(session.levels))
                    screen = resize()
                    surface = board_surface(session, args.tile)

        screen.blit(surface, (0, 0))
        lv = session.level
        pygame.display.set_caption(
            f"Path Garden {session_seed} - {lv.id}. {lv.name}  moves {status.moves}/{lv.expected_moves}"
            + ("  SOLVED" if status.solved else "")
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
