from __future__ import annotations

import logging
import math
from datetime import date

from daily_binomial.config import STEP_YEARS
from daily_binomial.exceptions import (
    InvalidParameterError,
    NumericalInconsistencyError,
    UnsupportedConventionError,
)
from daily_binomial.market.calendars import BusinessCalendar
from daily_binomial.market.curves import YieldCurve
from daily_binomial.types import DayCountConvention

logger = logging.getLogger(__name__)


def check_curve(curve: YieldCurve, pricing_date: date) -> None:
    """Raise unless `curve` can drive a business-day lattice from `pricing_date`."""
    if curve.day_count != DayCountConvention.BDAYS252_EXPONENTIAL:
        raise UnsupportedConventionError(
            f"curve day count must be {DayCountConvention.BDAYS252_EXPONENTIAL.value}, "
            f"got {getattr(curve.day_count, 'value', curve.day_count)}"
        )
    if curve.reference_date != pricing_date:
        raise UnsupportedConventionError(
            f"curve reference date {curve.reference_date} does not match "
            f"pricing date {pricing_date}"
        )


def resolve_calendar(
    curve: YieldCurve, calendar: BusinessCalendar | None
) -> BusinessCalendar:
    """Explicit `calendar` if given, else the one bound to the curve's day count."""
    cal = calendar if calendar is not None else curve.calendar
    if cal is None:
        raise UnsupportedConventionError(
            "no business-day calendar: pass one explicitly or use a curve that has one"
        )
    return cal


def daily_forward_rates(
    curve: YieldCurve,
    dividend_yield: float,
    pricing_date: date,
    maturity: date,
    calendar: BusinessCalendar | None = None,
    *,
    dt: float = STEP_YEARS,
) -> tuple[float, ...]:
    """One continuously-compounded forward rate per business day, net of carry.

    Walks ``d0 -> d1`` one business day at a time from `pricing_date` while
    ``d1 <= maturity`` and emits ``-ln(DF(d1) / DF(d0)) / dt - dividend_yield``.

    Returns
    -------
    tuple of float
        Length equals the number of business days in ``(pricing_date, maturity]``.

    Raises
    ------
    InvalidParameterError
        If ``maturity < pricing_date``, ``dt <= 0``, or `pricing_date` is not a
        business day.
    UnsupportedConventionError
        If the curve is not a 252-business-day exponential curve anchored at
        `pricing_date`, or no calendar is available.
    NumericalInconsistencyError
        If a discount factor ratio is not strictly positive and finite.
    """
    if maturity < pricing_date:
        raise InvalidParameterError("maturity must be on or after pricing_date")
    if not (dt > 0.0):
        raise InvalidParameterError("dt must be > 0")
    check_curve(curve, pricing_date)
    cal = resolve_calendar(curve, calendar)
    if not cal.is_business_day(pricing_date):
        raise InvalidParameterError(f"pricing date {pricing_date} is not a business day")

    rates: list[float] = []
    d0 = pricing_date
    df0 = curve.discount_factor(d0)
    d1 = cal.advance(d0, 1)
    while d1 <= maturity:
        df1 = curve.discount_factor(d1)
        ratio = df1 / df0
        if not (ratio > 0.0 and math.isfinite(ratio)):
            raise NumericalInconsistencyError(
                f"invalid discount factor ratio {ratio!r} between {d0} and {d1}"
            )
        rates.append(-math.log(ratio) / dt - dividend_yield)
        d0, df0 = d1, df1
        d1 = cal.advance(d0, 1)

    logger.debug(
        "extracted %d daily forward rates from %s to %s", len(rates), pricing_date, maturity
    )
    return tuple(rates)
