#!/usr/bin/env python3
import argparse, json, logging, sys
from pathgarden.config import GenerationConfig, config_from_env, parse_seed_override, resolve_session_seed
from pathgarden.engine.connectivity import initially_solved_level_ids
from pathgarden.mapgen.generator import generate_level, generate_session

def level_to_dict(level):
    return {
        "id": level.id,
        "name": level.name,
        "vibe": level.vibe,
        "seed": level.seed,
        "cols": level.cols,
        "rows": level.rows,
        "expectedMoves": level.expected_moves,
        "layout": [[k.value for k in row] for row in level.layout],
        "initialRotations": [list(row) for row in level.initial_rotations],
        "start": {"x": level.start.x, "y": level.start.y},
        "goal": {"x": level.goal.x, "y": level.goal.y},
        "perspectiveLinks": [
            {
                "a": {"x": l.a.x, "y": l.a.y},
                "b": {"x": l.b.x, "y": l.b.y},
                "requiredSwitch": None if l.required_switch is None else {
                    "tile": {"x": l.required_switch.tile.x, "y": l.required_switch.tile.y},
                    "rotations": sorted(l.required_switch.rotations),
                },
            }
            for l in level.perspective_links
        ],
        "flowerTileKeys": list(level.flower_tile_keys),
        "obstacleTileKeys": list(level.obstacle_tile_keys),
    }

def _config(args):
    if args.seed is not None:
        return GenerationConfig(seed_override=args.seed, level_count=args.count)
    return config_from_env(level_count=args.count)

def _write(obj, out):
    text = json.dumps(obj, indent=2)
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Wrote {out}")
    else:
        print(text)

def cmd_emit(args):
    seed = resolve_session_seed(_config(args))
    res = generate_level(args.level, seed)
    doc = level_to_dict(res.level)
    doc["sessionSeed"] = seed
    doc["state"] = res.state.value
    doc["attempts"] = res.attempts
    _write(doc, args.out)

def cmd_session(args):
    seed = resolve_session_seed(_config(args))
    levels = generate_session(_config(args), session_seed=seed)
    _write({"sessionSeed": seed, "levels": [level_to_dict(lv) for lv in levels]}, args.out)

def cmd_check(args):
    cfg = _config(args)
    seed = resolve_session_seed(cfg)
    solved = initially_solved_level_ids(generate_session(cfg, session_seed=seed))
    if solved:
        print(f"session {seed}: levels start solved: {solved}")
        return 1
    print(f"session {seed}: all {cfg.level_count} levels start unsolved")
    return 0

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--seed', type=str, default=None, help="Seed override (number or text); else PATHGARDEN_SEED / clock")
    p.add_argument('--count', type=int, default=14, help="Levels per session")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--out', type=str, default=None)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('session')
    p2.add_argument('--out', type=str, default=None)
    p2.set_defaults(func=cmd_session)
    p3 = sub.add_parser('check')
    p3.set_defaults(func=cmd_check)
    args = p.parse_args()
    if args.seed is not None:
        args.seed = parse_seed_override(args.seed)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    sys.exit(args.func(args) or 0)

if __name__ == '__main__':
    main()
