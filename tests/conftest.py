"""Pytest helpers for the daily_binomial library."""

from __future__ import annotations

from datetime import date

import pytest

from daily_binomial import (
    AmericanCall,
    BusinessDayCalendar,
    FlatCurve,
    ZeroCurve,
)

# Brazilian settlement holidays on weekdays, 2019-2021.
BR_HOLIDAYS = [
    date(2019, 3, 4),
    date(2019, 3, 5),
    date(2019, 4, 19),
    date(2019, 5, 1),
    date(2019, 6, 20),
    date(2019, 11, 15),
    date(2019, 12, 25),
    date(2020, 1, 1),
    date(2020, 2, 24),
    date(2020, 2, 25),
    date(2020, 4, 10),
    date(2020, 4, 21),
    date(2020, 5, 1),
    date(2020, 6, 11),
    date(2020, 9, 7),
    date(2020, 10, 12),
    date(2020, 11, 2),
    date(2020, 12, 25),
    date(2021, 1, 1),
    date(2021, 2, 15),
    date(2021, 2, 16),
    date(2021, 4, 2),
    date(2021, 4, 21),
    date(2021, 6, 3),
]

DI_VERTICES = [
    1, 22, 44, 63, 86, 108, 129, 152, 172, 193, 215, 233, 255, 275, 316, 381,
    444, 505, 567, 632, 695, 757, 819, 884, 946, 1009, 1070, 1134, 1195, 1319,
    1449, 1571, 1702, 1824, 1952, 2203, 2452, 2702, 2955,
]  # fmt: skip

DI_RATES = [
    0.064, 0.06415013117991042, 0.06417973562801271, 0.06435017514839836,
    0.06445015923797404, 0.06459993834431654, 0.06484999204034181,
    0.06480997675886191, 0.06506999165262828, 0.06519999136895538,
    0.0654599725012075, 0.06575998157842933, 0.06580000619449722,
    0.0665099646050511, 0.06750002305865621, 0.06959999412826634,
    0.07140001991101319, 0.07330002695898763, 0.07490002252270211,
    0.0764499878843945, 0.07779999563726014, 0.07915001506388308,
    0.08020000734028843, 0.08129998530743787, 0.08239998748126108,
    0.08335000809507619, 0.08419999789502874, 0.08424999969811629,
    0.08539998951248663, 0.0865000058002896, 0.08749999511076754,
    0.08815999505768035, 0.08889000821092165, 0.08950001399465336,
    0.09060000539862599, 0.09169999004106222, 0.09219999087854959,
    0.09270000052984508, 0.09301999267274486,
]  # fmt: skip

DI_REFERENCE = date(2019, 3, 29)


@pytest.fixture
def weekday_calendar() -> BusinessDayCalendar:
    return BusinessDayCalendar()


@pytest.fixture
def br_calendar() -> BusinessDayCalendar:
    return BusinessDayCalendar(BR_HOLIDAYS)


@pytest.fixture
def di_curve(br_calendar) -> ZeroCurve:
    """Zero curve built on DI-futures vertices, anchored 2019-03-29."""
    return ZeroCurve(
        name="PRE DI-Futuro",
        calendar=br_calendar,
        reference_date=DI_REFERENCE,
        vertices=DI_VERTICES,
        rates=DI_RATES,
    )


@pytest.fixture
def flat_curve(weekday_calendar):
    """Factory fixture for flat 252-business-day curves."""

    def _make(*, rate: float = 0.10, reference_date: date = date(2024, 1, 2)):
        return FlatCurve(
            reference_date=reference_date, rate=rate, calendar=weekday_calendar
        )

    return _make


@pytest.fixture
def make_call(flat_curve):
    """Factory fixture for AmericanCall contracts on a flat curve by default."""

    def _make(
        *,
        curve=None,
        dividend_yield: float = 0.0,
        spot: float = 100.0,
        strike: float = 100.0,
        volatility: float = 0.3,
        pricing_date: date = date(2024, 1, 2),
        maturity: date = date(2024, 3, 29),
    ) -> AmericanCall:
        if curve is None:
            curve = flat_curve(reference_date=pricing_date)
        return AmericanCall(
            curve=curve,
            dividend_yield=dividend_yield,
            spot=spot,
            strike=strike,
            volatility=volatility,
            pricing_date=pricing_date,
            maturity=maturity,
        )

    return _make
