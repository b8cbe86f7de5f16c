from __future__ import annotations

from dataclasses import dataclass

from daily_binomial.exceptions import InvalidParameterError

BDAYS_PER_YEAR = 252
STEP_YEARS = 1.0 / BDAYS_PER_YEAR  # one business day as a year fraction


@dataclass(frozen=True, slots=True)
class LatticeConfig:
    max_steps: int = 20_000
    probability_tol: float = 0.0

    def __post_init__(self) -> None:
        if self.max_steps <= 0:
            raise InvalidParameterError("max_steps must be > 0")
        if not (0.0 <= self.probability_tol < 1.0):
            raise InvalidParameterError("probability_tol must be in [0, 1)")
