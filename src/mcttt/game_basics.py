"""
Game basics: board representation, serialization, rules and win checks.
Teaching notes:
- State is a list of 9 cells: 0=empty, 1=X, 2=O. X always starts.
- Cells are indexed 0-8 in row-major order.
- Nothing here knows anything about strategy; win detection and legal-move
  enumeration are the only rules the Monte Carlo player ever sees.
"""
from __future__ import annotations

from typing import List, Optional

EMPTY = 0
X = 1
O = 2

WIN_PATTERNS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]

_MARK_NAMES = {EMPTY: ".", X: "X", O: "O"}


class InvalidMoveError(ValueError):
    """Raised when a placement targets an occupied or out-of-range cell."""


def new_board() -> List[int]:
    return [EMPTY] * 9


def copy_board(board: List[int]) -> List[int]:
    return board[:]


def serialize_board(board: List[int]) -> str:
    return ''.join(str(cell) for cell in board)


def deserialize_board(board_str: str) -> List[int]:
    raw = board_str.strip()
    if len(raw) != 9 or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return [int(cell) for cell in raw]


def check_win(board: List[int]) -> int:
    for a, b, c in WIN_PATTERNS:
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return v
    return EMPTY


def is_full(board: List[int]) -> bool:
    return EMPTY not in board


def legal_moves(board: List[int]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def other_player(mark: int) -> int:
    return O if mark == X else X


def player_to_move(board: List[int]) -> int:
    x, o = board.count(X), board.count(O)
    return X if x == o else O


def apply_move(board: List[int], index: int, mark: int) -> None:
    """Place ``mark`` at ``index`` in place, enforcing legality."""
    if not 0 <= index < 9:
        raise InvalidMoveError(f"Cell {index} is off the board")
    if board[index] != EMPTY:
        raise InvalidMoveError(f"Cell {index} is already taken by {mark_name(board[index])}")
    board[index] = mark


def mark_name(mark: int) -> str:
    return _MARK_NAMES[mark]


def parse_mark(name: str) -> Optional[int]:
    """Map ``x``/``o``/``none`` (any case) to a mark; ``none`` gives ``None``."""
    key = name.strip().lower()
    if key == "x":
        return X
    if key == "o":
        return O
    if key == "none":
        return None
    raise ValueError(f"Unknown player {name!r}; expected x, o or none")


def render_board(board: List[int]) -> str:
    lines = ["-----"]
    for row in range(3):
        cells = board[row * 3:row * 3 + 3]
        marks = " ".join(mark_name(v) for v in cells)
        hints = " ".join(str(row * 3 + k) for k in range(3))
        lines.append(f"{marks}    {hints}")
    lines.append("-----")
    return "\n".join(lines)
