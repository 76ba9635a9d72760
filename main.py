from __future__ import annotations

import argparse
import logging

from tictactoe.ai.config import BOARD_SIZES, MAX_LEVEL, MIN_LEVEL, default_memory_path
from tictactoe.app.controller import PlayController, PlayConfig


def run_play(size: int, lvl: int, memory: str, seed: int | None, clear: bool) -> None:
    cfg = PlayConfig(board_size=size, lvl=lvl, memory_path=memory, seed=seed, clear_screen=clear)
    ctrl = PlayController(config=cfg)
    ctrl.run()


def main():
    ap = argparse.ArgumentParser(description="Tic-tac-toe against a learning robo")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = ap.add_subparsers(dest="mode", required=True)

    ap_play = sub.add_parser("play")
    ap_play.add_argument("--size", type=int, default=3, choices=BOARD_SIZES)
    ap_play.add_argument(
        "--lvl",
        type=int,
        default=MIN_LEVEL,
        choices=range(MIN_LEVEL, MAX_LEVEL + 1),
        help="Starting robo level (1-5)",
    )
    ap_play.add_argument(
        "--memory",
        default=default_memory_path(),
        help="Pattern memory file (default: $TICTACTOE_MEMORY or ~/.tictactoe/ttt-ai-memory.json)",
    )
    ap_play.add_argument(
        "--in-memory",
        action="store_true",
        help="Do not persist learned patterns",
    )
    ap_play.add_argument("--seed", type=int, default=None)
    ap_play.add_argument(
        "--clear",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Clear the screen between frames (default: True)",
    )

    args = ap.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "play":
        run_play(args.size, args.lvl, "" if args.in_memory else args.memory, args.seed, args.clear)


if __name__ == "__main__":
    main()
