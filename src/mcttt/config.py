"""Rollout scoring weights and simulation budget.

Environment-first: ``MCTTT_*`` variables override the defaults, explicit
keyword overrides win over both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_WIN_POINTS = 1
DEFAULT_LOSS_POINTS = -10  # -1 plays poorly, -5 is fine, -10 is better
DEFAULT_DRAW_POINTS = 0  # not well tuned
DEFAULT_ROUNDS = 30000  # lower == dumber

_ENV_VARS = {
    "win_points": "MCTTT_WIN_POINTS",
    "loss_points": "MCTTT_LOSS_POINTS",
    "draw_points": "MCTTT_DRAW_POINTS",
    "rounds": "MCTTT_ROUNDS",
}


class ConfigError(ValueError):
    """Raised for malformed or inconsistent rollout settings."""


@dataclass(frozen=True)
class RolloutConfig:
    win_points: int = DEFAULT_WIN_POINTS
    loss_points: int = DEFAULT_LOSS_POINTS
    draw_points: int = DEFAULT_DRAW_POINTS
    rounds: int = DEFAULT_ROUNDS

    def validate(self) -> "RolloutConfig":
        if self.rounds < 1:
            raise ConfigError(f"rounds must be at least 1, got {self.rounds}")
        if self.loss_points >= self.win_points:
            raise ConfigError(
                f"loss_points ({self.loss_points}) must be below win_points ({self.win_points})"
            )
        return self

    def with_overrides(self, **overrides: Optional[int]) -> "RolloutConfig":
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()

    @classmethod
    def from_env(cls, **overrides: Optional[int]) -> "RolloutConfig":
        values = {}
        for field_name, var in _ENV_VARS.items():
            raw = os.getenv(var)
            if raw is None or not raw.strip():
                continue
            try:
                values[field_name] = int(raw)
            except ValueError:
                raise ConfigError(f"{var} must be an integer, got {raw!r}") from None
        return cls(**values).with_overrides(**overrides)

    def as_dict(self) -> dict:
        return {
            "win_points": self.win_points,
            "loss_points": self.loss_points,
            "draw_points": self.draw_points,
            "rounds": self.rounds,
        }


DEFAULT_CONFIG = RolloutConfig().validate()
