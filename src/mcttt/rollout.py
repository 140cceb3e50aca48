"""
Random rollout engine: estimate move quality from random playouts.
Teaching notes:
- Each rollout copies the board, plays uniformly random legal moves for both
  sides until someone wins or the board fills, and credits the outcome to the
  very first cell it played.
- Losses are penalized far harder than wins are rewarded, which is what makes
  the player block before it tries to win.
- Uniform draws for a whole block of rollouts come from one vectorized
  ``Generator.random`` call; each rollout consumes at most nine of them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, RolloutConfig
from .game_basics import EMPTY, check_win, legal_moves, other_player

logger = logging.getLogger(__name__)

NO_MOVES = None

_CHUNK = 4096


def as_generator(rng=None) -> np.random.Generator:
    """Accept ``None``, an integer seed or a ready ``Generator``."""
    return np.random.default_rng(rng)


@dataclass(frozen=True)
class ScoreVector:
    """Per-cell rollout totals; ``None`` marks a cell that was occupied."""

    scores: Tuple[Optional[int], ...]

    def __post_init__(self) -> None:
        if len(self.scores) != 9:
            raise ValueError(f"expected 9 scores, got {len(self.scores)}")

    def __getitem__(self, index: int) -> Optional[int]:
        return self.scores[index]

    def eligible(self) -> List[int]:
        return [i for i, s in enumerate(self.scores) if s is not None]

    def best_score(self) -> Optional[int]:
        values = [s for s in self.scores if s is not None]
        return max(values) if values else None

    def best_moves(self) -> List[int]:
        top = self.best_score()
        if top is None:
            return []
        return [i for i, s in enumerate(self.scores) if s is not None and s == top]

    def as_list(self) -> List[Optional[int]]:
        return list(self.scores)

    def format(self) -> str:
        cells = " ".join("--" if s is None else str(s) for s in self.scores)
        return f"[scores: {cells}]"


def random_move(board: List[int], rng=None) -> Optional[int]:
    moves = legal_moves(board)
    if not moves:
        return None
    return int(as_generator(rng).choice(moves))


def rollout(
    board: List[int],
    player: int,
    rng=None,
    draws: Optional[Sequence[float]] = None,
) -> Tuple[int, int]:
    """Play one random game from ``board`` with ``player`` placing first.

    Returns ``(first_move, winner)``; ``winner`` is EMPTY for a cat's game and
    ``first_move`` is -1 when the board was already decided.
    """
    if draws is None:
        draws = as_generator(rng).random(9).tolist()
    scratch = board[:]
    mover = player
    first_move = -1
    ply = 0
    winner = check_win(scratch)
    while winner == EMPTY:
        moves = legal_moves(scratch)
        if not moves:
            break
        pos = moves[int(draws[ply] * len(moves))]
        assert scratch[pos] == EMPTY
        scratch[pos] = mover
        if first_move == -1:
            first_move = pos
        mover = other_player(mover)
        ply += 1
        winner = check_win(scratch)
    return first_move, winner


def score_outcome(winner: int, player: int, config: RolloutConfig = DEFAULT_CONFIG) -> int:
    if winner == EMPTY:
        return config.draw_points
    if winner == player:
        return config.win_points
    return config.loss_points


def evaluate(
    board: List[int],
    player: int,
    config: RolloutConfig = DEFAULT_CONFIG,
    rng=None,
    rounds: Optional[int] = None,
) -> Optional[ScoreVector]:
    """Run ``rounds`` rollouts and total their outcomes per first move.

    Returns NO_MOVES when the board has no empty cell.
    """
    if rounds is None:
        rounds = config.rounds
    if rounds < 1:
        raise ValueError(f"rounds must be at least 1, got {rounds}")
    totals: List[Optional[int]] = [0 if v == EMPTY else None for v in board]
    if all(t is None for t in totals):
        return NO_MOVES

    gen = as_generator(rng)
    logger.debug("Running %d rollouts for %s", rounds, player)
    done = 0
    while done < rounds:
        n = min(_CHUNK, rounds - done)
        for row in gen.random((n, 9)).tolist():
            first_move, winner = rollout(board, player, draws=row)
            if first_move < 0:
                continue
            totals[first_move] += score_outcome(winner, player, config)
        done += n
    return ScoreVector(tuple(totals))
