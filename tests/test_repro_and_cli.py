import os
import subprocess
import sys
from pathlib import Path

import pytest

from mcttt.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "mcttt.cli"]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in [str(SRC), env.get("PYTHONPATH", "")] if p)
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, input=stdin, env=env)


def test_suggest_same_seed_same_output(capsys):
    args = ["--seed", "5", "suggest", "--board", "100020000", "--rounds", "2000"]
    assert main(args) == 0
    first = capsys.readouterr().out
    assert main(args) == 0
    second = capsys.readouterr().out
    assert first == second
    assert "player=X move=" in first


def test_cli_suggest_finds_win(tmp_path: Path):
    r = _run_cli(["--seed", "1", "suggest", "--board", "110220000", "--rounds", "3000"], cwd=tmp_path)
    assert r.returncode == 0
    assert "player=X move=2" in r.stdout
    assert "[scores:" in r.stderr
    assert "[best AI move(s): 2]" in r.stderr


def test_cli_suggest_explicit_player_blocks(tmp_path: Path):
    r = _run_cli(
        ["--seed", "4", "suggest", "--board", "110200000", "--player", "o", "--rounds", "20000"],
        cwd=tmp_path,
    )
    assert r.returncode == 0
    assert "player=O move=2" in r.stdout


@pytest.mark.parametrize("board", ["121212212", "111220200"])
def test_cli_suggest_no_move(tmp_path: Path, board: str):
    r = _run_cli(["suggest", "--board", board, "--rounds", "10"], cwd=tmp_path)
    assert r.returncode == 0
    assert "No move" in r.stderr
    assert "move=" not in r.stdout


@pytest.mark.parametrize("bad", ["abc", "0123456789", "12345678x"])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    r = _run_cli(["suggest", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_rejects_bad_config(tmp_path: Path):
    r = _run_cli(["play", "--rounds", "0"], cwd=tmp_path)
    assert r.returncode == 2
    r = _run_cli(["suggest", "--board", "000000000", "--loss-points", "5"], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_play_computer_vs_computer(tmp_path: Path):
    r = _run_cli(["--seed", "2", "play", "--human", "none", "--rounds", "200"], cwd=tmp_path)
    assert r.returncode == 0
    assert "Computer plays:" in r.stdout
    assert ("wins!" in r.stdout) or ("Cat's game." in r.stdout)


def test_cli_play_human_eof_exits_cleanly(tmp_path: Path):
    r = _run_cli(["play", "--human", "x", "--rounds", "50"], cwd=tmp_path, stdin="4\n")
    assert r.returncode == 0
    assert "Enter a move (0-8): " in r.stdout
    assert "Game abandoned" in r.stderr


def test_cli_info(tmp_path: Path):
    r = _run_cli(["--info"], cwd=tmp_path)
    assert r.returncode == 0
    assert "numpy=" in r.stdout
