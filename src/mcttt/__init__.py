"""mcttt package.

Tic-tac-toe played by pure Monte Carlo rollouts: a board model, a random
rollout engine, a move selector, and a small console game.

Convenience imports are exposed for common workflows.
"""

from .config import DEFAULT_CONFIG, ConfigError, RolloutConfig
from .game_basics import EMPTY, O, X, InvalidMoveError, check_win, is_full, legal_moves
from .rollout import NO_MOVES, ScoreVector, evaluate
from .selector import NO_MOVE, SelectionResult, choose, select_move

__all__ = [
    "EMPTY",
    "X",
    "O",
    "InvalidMoveError",
    "check_win",
    "is_full",
    "legal_moves",
    "RolloutConfig",
    "ConfigError",
    "DEFAULT_CONFIG",
    "ScoreVector",
    "NO_MOVES",
    "evaluate",
    "NO_MOVE",
    "SelectionResult",
    "choose",
    "select_move",
]
