from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

import numpy as np

from daily_binomial.config import BDAYS_PER_YEAR
from daily_binomial.exceptions import InvalidParameterError
from daily_binomial.market.calendars import BusinessCalendar
from daily_binomial.types import DayCountConvention


class YieldCurve(Protocol):
    @property
    def reference_date(self) -> date: ...
    @property
    def day_count(self) -> DayCountConvention: ...
    @property
    def calendar(self) -> BusinessCalendar | None: ...
    def discount_factor(self, d: date) -> float: ...


def _check_not_before(reference_date: date, d: date) -> None:
    if d < reference_date:
        raise InvalidParameterError(
            f"date {d} is before the curve reference date {reference_date}"
        )


@dataclass(frozen=True, slots=True)
class FlatCurve:
    """Curve with a single annual rate.

    - BDAYS252_EXPONENTIAL: ``DF(d) = (1 + rate) ** (-bd / 252)``, ``bd`` the
      business days from the reference date to ``d``.
    - ACTUAL365_CONTINUOUS: ``DF(d) = exp(-rate * days / 365)``.
    """

    reference_date: date
    rate: float
    calendar: BusinessCalendar | None = None
    day_count: DayCountConvention = DayCountConvention.BDAYS252_EXPONENTIAL

    def __post_init__(self) -> None:
        if not math.isfinite(self.rate) or self.rate <= -1.0:
            raise InvalidParameterError("rate must be finite and > -1")
        if (
            self.day_count == DayCountConvention.BDAYS252_EXPONENTIAL
            and self.calendar is None
        ):
            raise InvalidParameterError("a business-day curve needs a calendar")

    def discount_factor(self, d: date) -> float:
        _check_not_before(self.reference_date, d)
        if self.day_count == DayCountConvention.ACTUAL365_CONTINUOUS:
            days = (d - self.reference_date).days
            return math.exp(-self.rate * days / 365.0)

        assert self.calendar is not None
        bd = self.calendar.business_days(self.reference_date, d)
        return (1.0 + self.rate) ** (-bd / BDAYS_PER_YEAR)


@dataclass(frozen=True, slots=True)
class ZeroCurve:
    """Zero-rate curve on business-day vertices (252-day exponential).

    Parameters
    ----------
    name : str
        Label only.
    calendar : BusinessCalendar
        Calendar used to count business days from `reference_date`.
    reference_date : datetime.date
        Anchor date; ``discount_factor(reference_date) == 1.0``.
    vertices : sequence of int
        Strictly increasing, positive business-day tenors.
    rates : sequence of float
        Annual exponential zero rates, one per vertex.

    Notes
    -----
    Interpolation is deliberately simple: the first rate applies flat before
    the first vertex, log discount factors are linear in business days between
    vertices (flat forward), and the last forward is extended past the final
    vertex.
    """

    name: str
    calendar: BusinessCalendar
    reference_date: date
    vertices: Sequence[int]
    rates: Sequence[float]
    _x: np.ndarray = field(init=False, repr=False, compare=False)
    _log_df: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        x = np.asarray(self.vertices, dtype=float)
        r = np.asarray(self.rates, dtype=float)
        if x.ndim != 1 or x.size == 0:
            raise InvalidParameterError("vertices must be a non-empty 1D sequence")
        if r.shape != x.shape:
            raise InvalidParameterError("rates must have one entry per vertex")
        if x[0] <= 0 or np.any(np.diff(x) <= 0):
            raise InvalidParameterError(
                "vertices must be positive and strictly increasing"
            )
        if not np.all(np.isfinite(r)) or np.any(r <= -1.0):
            raise InvalidParameterError("rates must be finite and > -1")

        object.__setattr__(self, "vertices", tuple(int(v) for v in self.vertices))
        object.__setattr__(self, "rates", tuple(float(v) for v in self.rates))
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_log_df", -x / BDAYS_PER_YEAR * np.log1p(r))

    @property
    def day_count(self) -> DayCountConvention:
        return DayCountConvention.BDAYS252_EXPONENTIAL

    def _log_discount(self, bd: int) -> float:
        x, y = self._x, self._log_df
        if bd <= x[0]:
            return -bd / BDAYS_PER_YEAR * math.log1p(self.rates[0])
        if bd <= x[-1]:
            return float(np.interp(bd, x, y))
        if x.size == 1:
            slope = y[0] / x[0]
        else:
            slope = (y[-1] - y[-2]) / (x[-1] - x[-2])
        return float(y[-1] + slope * (bd - x[-1]))

    def discount_factor(self, d: date) -> float:
        _check_not_before(self.reference_date, d)
        bd = self.calendar.business_days(self.reference_date, d)
        return math.exp(self._log_discount(bd))

    def zero_rate(self, d: date) -> float:
        """Annual exponential zero rate implied for ``d`` (after the anchor)."""
        bd = self.calendar.business_days(self.reference_date, d)
        if bd <= 0:
            raise InvalidParameterError("zero_rate needs a date after reference_date")
        return math.expm1(-self._log_discount(bd) * BDAYS_PER_YEAR / bd)
