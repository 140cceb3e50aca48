from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import ConfigError, RolloutConfig
from .driver import play_game
from .game_basics import (
    check_win,
    deserialize_board,
    mark_name,
    parse_mark,
    player_to_move,
    render_board,
)
from .selector import choose


def _add_rollout_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--rounds", type=int, default=None, help="Rollouts per computer move (default: 30000)")
    p.add_argument("--win-points", type=int, default=None, help="Score for a rollout won (default: 1)")
    p.add_argument("--loss-points", type=int, default=None, help="Score for a rollout lost (default: -10)")
    p.add_argument("--draw-points", type=int, default=None, help="Score for a cat's game (default: 0)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mcttt", description="Tic-tac-toe by the Monte Carlo method")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the rollout random generator")

    p_play = sub.add_parser("play", help="Play a game on the console")
    p_play.add_argument(
        "--human",
        choices=["x", "o", "none"],
        default="x",
        help="Side the human plays; none for computer vs computer (default: x)",
    )
    _add_rollout_args(p_play)

    p_sug = sub.add_parser("suggest", help="Score every move of a board and pick one")
    p_sug.add_argument("--board", required=True, help="Board string, e.g., 110220000 (0=empty,1=X,2=O)")
    p_sug.add_argument(
        "--player",
        choices=["x", "o"],
        default=None,
        help="Side to evaluate for (default: inferred from piece counts)",
    )
    _add_rollout_args(p_sug)

    return p


def _rollout_config(ns: argparse.Namespace) -> RolloutConfig:
    return RolloutConfig.from_env(
        rounds=ns.rounds,
        win_points=ns.win_points,
        loss_points=ns.loss_points,
        draw_points=ns.draw_points,
    )


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("mcttt"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd in ("play", "suggest"):
        try:
            cfg = _rollout_config(ns)
        except ConfigError as e:
            logging.error("%s", e)
            return 2
        logging.debug("rollout config=%s seed=%s", cfg.as_dict(), ns.seed)

    if ns.cmd == "play":
        human: Optional[int] = parse_mark(ns.human)
        try:
            play_game(human_player=human, config=cfg, rng=ns.seed)
        except (EOFError, KeyboardInterrupt):
            print()
            logging.info("Game abandoned")
        return 0

    if ns.cmd == "suggest":
        try:
            board = deserialize_board(ns.board)
        except ValueError as e:
            logging.error("%s", e)
            return 2
        player = parse_mark(ns.player) if ns.player else player_to_move(board)
        print(render_board(board))
        winner = check_win(board)
        if winner:
            logging.info("No move: %s has already won", mark_name(winner))
            return 0
        result = choose(board, player, config=cfg, rng=ns.seed)
        if result is None:
            logging.info("No move: the board is full")
            return 0
        print(f"player={mark_name(player)} move={result.move}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
