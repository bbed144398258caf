#!/usr/bin/env python3
# Render every level of a session to PNGs using Pillow.
# Writes NN_initial.png and, with --solved, NN_solved.png (canonical solution).

import argparse, logging, os
from pathgarden.config import GenerationConfig, config_from_env, parse_seed_override, resolve_session_seed
from pathgarden.mapgen.generator import generate_level
from pathgarden.render.board import render_board

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, default=None, help="Session seed override (number or text)")
    ap.add_argument("--count", type=int, default=14, help="Levels to render")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=48, help="Tile size in pixels")
    ap.add_argument("--solved", action="store_true", help="Also render the canonical solution")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.seed is not None:
        seed = parse_seed_override(args.seed)
        cfg = GenerationConfig(seed_override=seed, level_count=args.count)
    else:
        cfg = config_from_env(level_count=args.count)
    session_seed = resolve_session_seed(cfg)

    base = os.path.join(args.outdir, str(session_seed))
    os.makedirs(base, exist_ok=True)
    for level_id in range(1, cfg.level_count + 1):
        res = generate_level(level_id, session_seed, cfg.max_attempts)
        render_board(res.level, tile_size=args.tile).save(os.path.join(base, f"{level_id:02d}_initial.png"))
        if args.solved and not res.degraded:
            render_board(res.level, res.solved_rotations, tile_size=args.tile).save(os.path.join(base, f"{level_id:02d}_solved.png"))
    print(f"Wrote PNGs to {base}")

if __name__ == "__main__":
    main()
