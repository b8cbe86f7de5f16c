from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

from daily_binomial.exceptions import InvalidParameterError

if TYPE_CHECKING:
    from daily_binomial.market.curves import YieldCurve


class DayCountConvention(str, Enum):
    """Day count and compounding convention a curve is quoted under.

    Attributes
    ----------
    BDAYS252_EXPONENTIAL : str
        Business days over 252 with annual exponential compounding,
        ``DF = (1 + r) ** (-bd / 252)``. The only convention the daily lattice
        accepts.
    ACTUAL365_CONTINUOUS : str
        Calendar days over 365 with continuous compounding,
        ``DF = exp(-r * days / 365)``.
    """

    BDAYS252_EXPONENTIAL = "bdays252_exponential"
    ACTUAL365_CONTINUOUS = "actual365_continuous"


@dataclass(frozen=True, slots=True)
class AmericanCall:
    """American call on an underlying paying a continuous dividend yield.

    Parameters
    ----------
    curve : YieldCurve
        Risk-free term structure. Its reference date must equal
        `pricing_date` and it must be quoted under
        :attr:`DayCountConvention.BDAYS252_EXPONENTIAL`; both are checked when
        the tree is built, not here.
    dividend_yield : float
        Continuously-compounded dividend yield, typically denoted :math:`q`
        (annualized).
    spot : float
        Spot price of the underlying on `pricing_date`.
    strike : float
        Strike price, typically denoted :math:`K`.
    volatility : float
        Annualized volatility of the underlying, typically denoted
        :math:`\\sigma`.
    pricing_date : datetime.date
        Valuation date; the root of the lattice.
    maturity : datetime.date
        Last exercise date; the final step of the lattice.

    Raises
    ------
    InvalidParameterError
        If a numeric field is non-finite, ``spot <= 0``, ``strike < 0``,
        ``volatility < 0``, or ``maturity < pricing_date``.
    """

    curve: YieldCurve
    dividend_yield: float
    spot: float
    strike: float
    volatility: float
    pricing_date: date
    maturity: date

    def __post_init__(self) -> None:
        for name in ("dividend_yield", "spot", "strike", "volatility"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidParameterError(f"{name} must be finite")
        if self.spot <= 0.0:
            raise InvalidParameterError("spot must be > 0")
        if self.strike < 0.0:
            raise InvalidParameterError("strike must be >= 0")
        if self.volatility < 0.0:
            raise InvalidParameterError("volatility must be >= 0")
        if self.maturity < self.pricing_date:
            raise InvalidParameterError("maturity must be on or after pricing_date")
