from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from math import exp
from typing import Literal, overload

import numpy as np

from ..config import STEP_YEARS, LatticeConfig
from ..exceptions import InvalidParameterError, NumericalInconsistencyError
from ..market.calendars import BusinessCalendar
from ..models.binomial_crr import DailyBinomialModel
from ..models.forward_rates import check_curve, daily_forward_rates, resolve_calendar
from ..types import AmericanCall
from ..typing import BoolArray, FloatArray

logger = logging.getLogger(__name__)

# ----------------------------
# Tree structures
# ----------------------------


@dataclass(frozen=True, slots=True)
class Node:
    price: float
    payoff: float


@dataclass(frozen=True, slots=True, eq=False)
class BinomialTree:
    """Fully valued daily lattice for an :class:`AmericanCall`.

    Steps run from 0 (pricing date) to `days_to_maturity`; step ``t`` holds
    ``t + 1`` nodes ordered from the highest price (rank 1) to the lowest
    (rank ``t + 1``). ``forward_rates[t]`` and ``probabilities[t]`` govern the
    move from step ``t`` to ``t + 1``.
    """

    contract: AmericanCall
    days_to_maturity: int
    u: float
    d: float
    dt: float
    forward_rates: tuple[float, ...]
    probabilities: tuple[float, ...]
    nodes: tuple[tuple[Node, ...], ...]
    _prices: tuple[FloatArray, ...]
    _payoffs: tuple[FloatArray, ...]
    _exercise: tuple[BoolArray, ...]

    def _check_step(self, step: int) -> None:
        if not (0 <= step <= self.days_to_maturity):
            raise IndexError(
                f"step must be in [0, {self.days_to_maturity}], got {step}"
            )

    def node(self, step: int, rank: int) -> Node:
        """Node at `step` with 1-based `rank` (1 = top)."""
        self._check_step(step)
        if not (1 <= rank <= step + 1):
            raise IndexError(f"rank must be in [1, {step + 1}], got {rank}")
        return self.nodes[step][rank - 1]

    @property
    def root(self) -> Node:
        return self.nodes[0][0]

    @property
    def present_value(self) -> float:
        return self.root.payoff

    def prices(self, step: int) -> FloatArray:
        self._check_step(step)
        return self._prices[step]

    def payoffs(self, step: int) -> FloatArray:
        self._check_step(step)
        return self._payoffs[step]

    def early_exercise(self, step: int) -> BoolArray:
        """Nodes where exercising now is optimal.

        Before maturity: intrinsic value strictly above continuation value.
        At maturity: the option finishes in the money.
        """
        self._check_step(step)
        return self._exercise[step]


def _frozen(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


# ----------------------------
# Lattice passes
# ----------------------------


def build_price_lattice(
    spot: float, u: float, d: float, n_steps: int
) -> list[FloatArray]:
    """Forward pass: underlying prices per step, top rank first.

    ``S[t][0] = S[t-1][0] * u`` and ``S[t][i] = S[t-1][i-1] * d`` for ``i > 0``,
    which reproduces ``spot * u**(t-i) * d**i``.
    """
    if n_steps < 0:
        raise InvalidParameterError("n_steps must be >= 0")

    levels: list[FloatArray] = [np.array([float(spot)])]
    for _ in range(n_steps):
        prev = levels[-1]
        level = np.empty(prev.size + 1, dtype=float)
        level[0] = prev[0] * u
        level[1:] = prev * d
        levels.append(level)
    return levels


def backward_induction(
    prices: Sequence[FloatArray],
    strike: float,
    rates: Sequence[float],
    probabilities: Sequence[float],
    dt: float = STEP_YEARS,
) -> tuple[list[FloatArray], list[BoolArray]]:
    """Backward pass for an American call.

    Terminal values are ``max(S - K, 0)``. At step ``t`` the up child keeps the
    same rank and the down child is one rank lower; the node value is
    ``max(exp(-r_t dt) * (q_t V_up + (1 - q_t) V_down), max(S - K, 0))``.

    Returns
    -------
    (payoffs, exercise)
        Per-step option values and early-exercise masks.
    """
    n = len(prices) - 1
    if n < 0:
        raise InvalidParameterError("price lattice is empty")
    if len(rates) != n or len(probabilities) != n:
        raise InvalidParameterError(
            f"need {n} rates and probabilities, got {len(rates)} and "
            f"{len(probabilities)}"
        )

    payoffs: list[FloatArray] = [np.empty(0)] * (n + 1)
    exercise: list[BoolArray] = [np.empty(0, dtype=bool)] * (n + 1)

    payoffs[n] = np.maximum(prices[n] - strike, 0.0)
    exercise[n] = payoffs[n] > 0.0

    for t in range(n - 1, -1, -1):
        nxt = payoffs[t + 1]
        q = probabilities[t]
        disc = exp(-rates[t] * dt)
        cont = disc * (q * nxt[:-1] + (1.0 - q) * nxt[1:])
        intrinsic = np.maximum(prices[t] - strike, 0.0)
        payoffs[t] = np.maximum(cont, intrinsic)
        exercise[t] = intrinsic > cont

    return payoffs, exercise


# ----------------------------
# Pricing engine
# ----------------------------


def build_american_call_tree(
    contract: AmericanCall,
    *,
    calendar: BusinessCalendar | None = None,
    config: LatticeConfig | None = None,
) -> BinomialTree:
    """Build and value the daily binomial lattice for `contract`.

    Parameters
    ----------
    contract : AmericanCall
        Contract and market inputs.
    calendar : BusinessCalendar, optional
        Business-day calendar for step alignment. Defaults to the calendar
        bound to the curve's 252-business-day convention.
    config : LatticeConfig, optional
        Size guard and probability tolerance.

    Raises
    ------
    InvalidParameterError
        Bad inputs or a lattice larger than ``config.max_steps``.
    UnsupportedConventionError
        Curve not quoted as 252-business-day exponential, or anchored at a date
        other than the pricing date.
    NumericalInconsistencyError
        Some risk-neutral probability falls outside ``[0, 1]``.
    """
    cfg = config or LatticeConfig()
    curve = contract.curve
    check_curve(curve, contract.pricing_date)
    cal = resolve_calendar(curve, calendar)

    days = cal.business_days(contract.pricing_date, contract.maturity)
    if days > cfg.max_steps:
        raise InvalidParameterError(
            f"{days} business days to maturity exceeds max_steps={cfg.max_steps}"
        )

    rates = daily_forward_rates(
        curve,
        contract.dividend_yield,
        contract.pricing_date,
        contract.maturity,
        cal,
        dt=STEP_YEARS,
    )
    if len(rates) != days:
        raise NumericalInconsistencyError(
            f"calendar counts {days} business days but stepping produced {len(rates)}"
        )

    model = DailyBinomialModel.from_crr(
        S0=contract.spot, sigma=contract.volatility, rates=rates, dt=STEP_YEARS
    )
    probs = model.p_star(cfg.probability_tol)
    logger.debug(
        "daily tree: spot=%g strike=%g sigma=%g days=%d u=%.12g d=%.12g",
        contract.spot,
        contract.strike,
        contract.volatility,
        days,
        model.u,
        model.d,
    )
    if probs.size:
        logger.debug("risk-neutral probabilities in [%.6g, %.6g]", probs.min(), probs.max())

    prices = build_price_lattice(model.S0, model.u, model.d, model.n_steps)
    payoffs, exercise = backward_induction(
        prices, contract.strike, model.rates, probs, model.dt
    )

    nodes = tuple(
        tuple(Node(float(s), float(v)) for s, v in zip(s_t, v_t, strict=True))
        for s_t, v_t in zip(prices, payoffs, strict=True)
    )
    tree = BinomialTree(
        contract=contract,
        days_to_maturity=days,
        u=model.u,
        d=model.d,
        dt=model.dt,
        forward_rates=model.rates,
        probabilities=tuple(float(q) for q in probs),
        nodes=nodes,
        _prices=tuple(_frozen(a) for a in prices),
        _payoffs=tuple(_frozen(a) for a in payoffs),
        _exercise=tuple(_frozen(a) for a in exercise),
    )
    logger.debug("daily tree present value %.12g", tree.present_value)
    return tree


@overload
def american_call_price(
    contract: AmericanCall,
    *,
    calendar: BusinessCalendar | None = None,
    config: LatticeConfig | None = None,
    return_tree: Literal[False] = False,
) -> float: ...


@overload
def american_call_price(
    contract: AmericanCall,
    *,
    calendar: BusinessCalendar | None = None,
    config: LatticeConfig | None = None,
    return_tree: Literal[True],
) -> BinomialTree: ...


def american_call_price(
    contract: AmericanCall,
    *,
    calendar: BusinessCalendar | None = None,
    config: LatticeConfig | None = None,
    return_tree: bool = False,
) -> float | BinomialTree:
    """Present value of `contract` on the daily lattice (root node payoff)."""
    tree = build_american_call_tree(contract, calendar=calendar, config=config)
    if return_tree:
        return tree
    return tree.present_value
