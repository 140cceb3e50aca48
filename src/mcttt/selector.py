"""
Move selection from rollout scores.
Tie-break policy:
- Take the highest total among eligible cells.
- Every cell sharing that total is a candidate; pick one uniformly at random.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import DEFAULT_CONFIG, RolloutConfig
from .game_basics import EMPTY
from .rollout import NO_MOVES, ScoreVector, as_generator, evaluate

logger = logging.getLogger(__name__)

NO_MOVE = None


@dataclass(frozen=True)
class SelectionResult:
    move: int
    scores: ScoreVector
    candidates: List[int]


def choose(
    board: List[int],
    player: int,
    config: RolloutConfig = DEFAULT_CONFIG,
    rng=None,
    rounds: Optional[int] = None,
) -> Optional[SelectionResult]:
    gen = as_generator(rng)
    scores = evaluate(board, player, config=config, rng=gen, rounds=rounds)
    if scores is NO_MOVES:
        return None
    candidates = scores.best_moves()
    assert candidates
    move = int(gen.choice(candidates))
    assert board[move] == EMPTY

    logger.info(scores.format())
    logger.info("[best AI move(s): %s]", " ".join(str(c) for c in candidates))
    return SelectionResult(move=move, scores=scores, candidates=candidates)


def select_move(
    board: List[int],
    player: int,
    config: RolloutConfig = DEFAULT_CONFIG,
    rng=None,
    rounds: Optional[int] = None,
) -> Optional[int]:
    """Return the chosen cell for ``player``, or NO_MOVE on a full board."""
    result = choose(board, player, config=config, rng=rng, rounds=rounds)
    if result is None:
        return NO_MOVE
    return result.move
