from __future__ import annotations

from datetime import date

import pytest

from daily_binomial import BusinessDayCalendar, ExchangeCalendar, InvalidParameterError


def test_advance_skips_weekend(weekday_calendar):
    assert weekday_calendar.advance(date(2019, 3, 29), 1) == date(2019, 4, 1)
    assert weekday_calendar.advance(date(2019, 4, 1), -1) == date(2019, 3, 29)


def test_advance_skips_holiday(br_calendar):
    # Good Friday 2019
    assert not br_calendar.is_business_day(date(2019, 4, 19))
    assert br_calendar.advance(date(2019, 4, 18), 1) == date(2019, 4, 22)


def test_business_days_counts_half_open_interval(weekday_calendar):
    fri, sat, mon = date(2019, 3, 29), date(2019, 3, 30), date(2019, 4, 1)
    assert weekday_calendar.business_days(fri, fri) == 0
    assert weekday_calendar.business_days(fri, sat) == 0
    assert weekday_calendar.business_days(fri, mon) == 1
    assert weekday_calendar.business_days(mon, fri) == -1


def test_business_days_matches_stepping(br_calendar):
    d0, end = date(2019, 3, 29), date(2019, 12, 31)
    steps = 0
    d = br_calendar.advance(d0, 1)
    while d <= end:
        steps += 1
        d = br_calendar.advance(d, 1)
    assert steps == br_calendar.business_days(d0, end)


def test_holidays_are_sorted_and_unique():
    cal = BusinessDayCalendar([date(2020, 1, 1), date(2019, 12, 25), date(2020, 1, 1)])
    assert cal.holidays == (date(2019, 12, 25), date(2020, 1, 1))
    assert cal.weekmask == "1111100"


@pytest.mark.parametrize("weekmask", ["111110", "0000000", "11111x0"])
def test_bad_weekmask_rejected(weekmask):
    with pytest.raises(InvalidParameterError):
        BusinessDayCalendar(weekmask=weekmask)


def test_exchange_calendar_skips_exchange_holiday():
    xnys = ExchangeCalendar("XNYS")
    assert not xnys.is_business_day(date(2024, 7, 4))
    assert xnys.advance(date(2024, 7, 3), 1) == date(2024, 7, 5)
    assert xnys.advance(date(2024, 7, 5), -1) == date(2024, 7, 3)
    assert xnys.business_days(date(2024, 7, 3), date(2024, 7, 5)) == 1
    assert xnys.business_days(date(2024, 7, 5), date(2024, 7, 3)) == -1
    assert xnys.business_days(date(2024, 7, 5), date(2024, 7, 5)) == 0


def test_exchange_calendar_counts_match_stepping():
    xnys = ExchangeCalendar("XNYS")
    d0, end = date(2024, 6, 28), date(2024, 9, 30)
    steps = 0
    d = xnys.advance(d0, 1)
    while d <= end:
        steps += 1
        d = xnys.advance(d, 1)
    assert steps == xnys.business_days(d0, end)
