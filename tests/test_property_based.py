from typing import List

import pytest
try:
    from hypothesis import given, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

from mcttt.game_basics import EMPTY, WIN_PATTERNS, check_win, is_full, legal_moves
from mcttt.selector import NO_MOVE, select_move

boards = st.lists(st.integers(min_value=0, max_value=2), min_size=9, max_size=9)


@given(boards)
def test_inspection_never_mutates(board: List[int]):
    before = board[:]
    check_win(board)
    is_full(board)
    legal_moves(board)
    assert board == before


@given(boards)
def test_check_win_agrees_with_line_scan(board: List[int]):
    w = check_win(board)
    if w == EMPTY:
        for a, b, c in WIN_PATTERNS:
            assert not (board[a] != 0 and board[a] == board[b] == board[c])
    else:
        assert any(all(board[i] == w for i in pat) for pat in WIN_PATTERNS)


@given(boards, st.integers(min_value=0, max_value=2 ** 32 - 1), st.sampled_from([1, 2]))
def test_select_move_returns_empty_cell_or_no_move(board: List[int], seed: int, player: int):
    before = board[:]
    move = select_move(board, player, rng=seed, rounds=20)
    if is_full(board):
        assert move is NO_MOVE
    else:
        assert move is not None
        assert board[move] == EMPTY
    assert board == before
