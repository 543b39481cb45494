# ripplesnake/main.py
import argparse

from ripplesnake.config import AppConfig
from ripplesnake.log import setup_logging

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="ripplesnake")
    p.add_argument("mode", choices=["play", "headless"])
    p.add_argument("--grid-w", type=int, default=20)
    p.add_argument("--grid-h", type=int, default=15)
    p.add_argument("--cell-px", type=int, default=32)
    p.add_argument("--tick-ms", type=int, default=120)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--edge", choices=["wall", "wrap"], default="wall")
    p.add_argument("--after-reset", choices=["running", "paused"], default="running")
    p.add_argument("--reset-delay-ms", type=int, default=1000)
    p.add_argument("--start-paused", action="store_true")
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--no-glow", action="store_true")
    p.add_argument("--seconds", type=float, default=30.0, help="headless run length (virtual time)")
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        render_cell=args.cell_px,
        tick_ms=args.tick_ms,
        fps=args.fps,
        seed=args.seed,
        edge_policy=args.edge,
        post_reset_phase=args.after_reset,
        reset_delay_ms=args.reset_delay_ms,
        start_paused=args.start_paused,
        render_grid_lines=args.grid_lines,
        render_glow=not args.no_glow,
    )

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    cfg = build_config(args)
    if args.mode == "play":
        from ripplesnake.runners.run_snake import main as play
        play(cfg)
    elif args.mode == "headless":
        from ripplesnake.runners.run_headless import main as headless
        headless(cfg, seconds=args.seconds)

if __name__ == "__main__":
    main()
