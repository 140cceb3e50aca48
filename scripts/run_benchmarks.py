#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from mcttt.config import RolloutConfig
from mcttt.game_basics import new_board, X
from mcttt.rollout import evaluate


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    seeds: int = 5
    rounds: List[int] = field(default_factory=lambda: [1000, 5000, 30000])


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Time rollout evaluation of the empty board")
    p.add_argument("--seeds", type=int, default=Config.seeds)
    p.add_argument("--rounds", type=str, default="1000,5000,30000", help="Comma-separated round counts")
    ns = p.parse_args(argv)
    cfg = Config(seeds=ns.seeds, rounds=[int(x) for x in ns.rounds.split(",") if x.strip()])
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    board = new_board()
    for rounds in cfg.rounds:
        times: List[float] = []
        centre_share = 0
        for s in range(cfg.seeds):
            rng = np.random.default_rng(s)
            t0 = time.perf_counter()
            sv = evaluate(board, X, config=RolloutConfig(rounds=rounds), rng=rng)
            times.append(time.perf_counter() - t0)
            if sv.best_moves() == [4]:
                centre_share += 1
        m, h = ci95(times)
        logging.info(
            "rounds=%d mean=%.4fs ± %.4fs (95%% CI) rollouts/s=%.0f centre_best=%d/%d",
            rounds,
            m,
            h,
            rounds / m if m > 0 else float("nan"),
            centre_share,
            cfg.seeds,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
