import pytest

from mcttt.game_basics import X, new_board
from mcttt.rollout import evaluate
from mcttt.selector import select_move

pytest.importorskip("pytest_benchmark")


def test_benchmark_evaluate_empty_board(benchmark):
    def _evaluate():
        return evaluate(new_board(), X, rng=0, rounds=2000)

    sv = benchmark(_evaluate)
    assert sv.eligible() == list(range(9))


def test_benchmark_select_move_midgame(benchmark):
    board = [1, 0, 0, 0, 2, 0, 0, 0, 0]

    move = benchmark(lambda: select_move(board, X, rng=0, rounds=2000))
    assert board[move] == 0
