from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from math import exp, sqrt

import numpy as np

from daily_binomial.config import STEP_YEARS
from daily_binomial.exceptions import InvalidParameterError, NumericalInconsistencyError
from daily_binomial.typing import FloatArray


def volatility_match(sigma: float, dt: float) -> tuple[float, float]:
    """Cox-Ross-Rubinstein up/down factors for one step of length `dt` years.

    ``u = exp(sigma * sqrt(dt))`` and ``d = 1 / u``, so ``u * d == 1`` and the
    lattice recombines.
    """
    if not (sigma >= 0.0):
        raise InvalidParameterError("sigma must be >= 0")
    if not (dt > 0.0):
        raise InvalidParameterError("dt must be > 0")

    u = exp(sigma * sqrt(dt))
    d = 1.0 / u
    return u, d


def risk_neutral_probabilities(
    rates: Sequence[float] | FloatArray,
    u: float,
    d: float,
    dt: float = STEP_YEARS,
    *,
    tol: float = 0.0,
) -> FloatArray:
    """Per-step up probabilities ``q_i = (exp(r_i * dt) - d) / (u - d)``.

    Values are never clamped: any ``q_i`` outside ``[-tol, 1 + tol]`` raises
    :class:`NumericalInconsistencyError`.
    """
    if not (dt > 0.0):
        raise InvalidParameterError("dt must be > 0")
    if not (u > d):
        raise NumericalInconsistencyError(
            f"Degenerate lattice: need u > d, got u={u:.6g}, d={d:.6g}."
        )

    r = np.asarray(rates, dtype=float)
    q = (np.exp(r * dt) - d) / (u - d)

    bad = np.flatnonzero(~((q >= -tol) & (q <= 1.0 + tol)))
    if bad.size:
        i = int(bad[0])
        raise NumericalInconsistencyError(
            f"Risk-neutral probability out of bounds at step {i + 1}: "
            f"q={q[i]:.6g} (rate={r[i]:.6g}, u={u:.6g}, d={d:.6g}). "
            "Check the curve against the volatility."
        )
    return q


@dataclass(frozen=True, slots=True)
class DailyBinomialModel:
    S0: float  # spot price
    u: float  # up factor
    d: float  # down factor
    dt: float  # step length in years
    rates: tuple[float, ...]  # per-step forward rate, net of dividend yield (cc)

    def __post_init__(self) -> None:
        if not (self.S0 > 0.0):
            raise InvalidParameterError("S0 must be positive")
        if not (self.dt > 0.0):
            raise InvalidParameterError("dt must be positive")
        if not (0.0 < self.d <= self.u):
            raise InvalidParameterError("Need 0 < d <= u")
        if not all(math.isfinite(r) for r in self.rates):
            raise NumericalInconsistencyError("forward rates must be finite")

    @classmethod
    def from_crr(
        cls,
        *,
        S0: float,
        sigma: float,
        rates: Sequence[float],
        dt: float = STEP_YEARS,
    ) -> DailyBinomialModel:
        u, d = volatility_match(sigma, dt)
        return cls(S0=S0, u=u, d=d, dt=dt, rates=tuple(float(r) for r in rates))

    @property
    def n_steps(self) -> int:
        return len(self.rates)

    def p_star(self, tol: float = 0.0) -> FloatArray:
        if self.n_steps == 0:
            return np.empty(0, dtype=float)
        return risk_neutral_probabilities(self.rates, self.u, self.d, self.dt, tol=tol)

    @property
    def disc_steps(self) -> FloatArray:
        return np.exp(-np.asarray(self.rates, dtype=float) * self.dt)
