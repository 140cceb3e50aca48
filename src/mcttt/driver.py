"""
Console game loop: a human (or nobody) against the Monte Carlo player.

X always moves first. The human types a cell index; anything that does not
start with an integer naming an empty cell is rejected and re-prompted.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from .config import DEFAULT_CONFIG, RolloutConfig
from .game_basics import (
    EMPTY,
    X,
    apply_move,
    check_win,
    is_full,
    mark_name,
    new_board,
    other_player,
    render_board,
)
from .rollout import as_generator
from .selector import NO_MOVE, select_move

logger = logging.getLogger(__name__)

PROMPT = "Enter a move (0-8): "
INVALID = "Invalid move!"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_move(line: str, board: List[int]) -> Optional[int]:
    m = _LEADING_INT.match(line)
    if m is None:
        return None
    move = int(m.group(1))
    if move < 0 or move > 8 or board[move] != EMPTY:
        return None
    return move


def read_human_move(
    board: List[int],
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    while True:
        move = parse_move(input_fn(PROMPT), board)
        if move is not None:
            return move
        output(INVALID)


def result_message(winner: int) -> str:
    if winner == EMPTY:
        return "Cat's game."
    return f"{mark_name(winner)} wins!"


def play_game(
    human_player: Optional[int] = X,
    config: RolloutConfig = DEFAULT_CONFIG,
    rng=None,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
    rounds: Optional[int] = None,
) -> int:
    """Play one game to the end and return the winner (EMPTY for a draw).

    ``human_player=None`` lets the computer play both sides.
    """
    gen = as_generator(rng)
    board = new_board()
    current = X

    winner = check_win(board)
    while winner == EMPTY and not is_full(board):
        output(render_board(board))
        if current == human_player:
            move = read_human_move(board, input_fn=input_fn, output=output)
        else:
            move = select_move(board, current, config=config, rng=gen, rounds=rounds)
            assert move is not NO_MOVE
            output(f"Computer plays: {move}")
        apply_move(board, move, current)
        logger.debug("%s -> %d", mark_name(current), move)
        current = other_player(current)
        winner = check_win(board)

    output(render_board(board))
    output(result_message(winner))
    return winner
