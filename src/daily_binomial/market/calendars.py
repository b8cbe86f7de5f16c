from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Protocol

import exchange_calendars as xcals
import numpy as np
import pandas as pd

from daily_binomial.exceptions import InvalidParameterError


class BusinessCalendar(Protocol):
    def advance(self, d: date, n: int) -> date: ...
    def business_days(self, d0: date, d1: date) -> int: ...
    def is_business_day(self, d: date) -> bool: ...


_ONE_DAY = timedelta(days=1)


class BusinessDayCalendar:
    """Weekmask + holiday calendar backed by numpy's ``busday`` routines.

    Parameters
    ----------
    holidays : iterable of datetime.date, optional
        Non-business dates on top of the weekmask.
    weekmask : str, default "1111100"
        Seven characters, Monday first; ``"1"`` marks a business weekday.

    Notes
    -----
    :meth:`business_days` counts the half-open interval ``(d0, d1]``. Starting
    from a business day ``d0``, it equals the number of times
    ``advance(., 1)`` can be applied before passing ``d1``.
    """

    __slots__ = ("_cal", "_holidays", "_weekmask")

    def __init__(
        self, holidays: Iterable[date] = (), *, weekmask: str = "1111100"
    ) -> None:
        if len(weekmask) != 7 or set(weekmask) - {"0", "1"} or "1" not in weekmask:
            raise InvalidParameterError(
                "weekmask must be 7 characters of '0'/'1' with at least one '1'"
            )
        self._holidays = tuple(sorted(set(holidays)))
        self._weekmask = weekmask
        self._cal = np.busdaycalendar(
            weekmask=weekmask,
            holidays=np.array(self._holidays, dtype="datetime64[D]"),
        )

    @property
    def holidays(self) -> tuple[date, ...]:
        return self._holidays

    @property
    def weekmask(self) -> str:
        return self._weekmask

    def __repr__(self) -> str:
        return (
            f"BusinessDayCalendar(holidays=<{len(self._holidays)} dates>, "
            f"weekmask={self._weekmask!r})"
        )

    def is_business_day(self, d: date) -> bool:
        return bool(np.is_busday(np.datetime64(d, "D"), busdaycal=self._cal))

    def advance(self, d: date, n: int) -> date:
        """Return the business day `n` steps after `d` (before, if ``n < 0``)."""
        roll = "following" if n >= 0 else "preceding"
        return np.busday_offset(
            np.datetime64(d, "D"), int(n), roll=roll, busdaycal=self._cal
        ).item()

    def business_days(self, d0: date, d1: date) -> int:
        """Number of business days in ``(d0, d1]``; negative when ``d1 < d0``."""
        return int(
            np.busday_count(
                np.datetime64(d0 + _ONE_DAY, "D"),
                np.datetime64(d1 + _ONE_DAY, "D"),
                busdaycal=self._cal,
            )
        )


class ExchangeCalendar:
    """Trading-session calendar from ``exchange_calendars`` (e.g. ``"BVMF"``).

    Sessions outside the calendar's bounds raise the library's own errors.
    """

    __slots__ = ("_cal", "_name")

    def __init__(
        self, name: str = "BVMF", *, start: date | None = None, end: date | None = None
    ) -> None:
        kwargs: dict[str, pd.Timestamp] = {}
        if start is not None:
            kwargs["start"] = pd.Timestamp(start)
        if end is not None:
            kwargs["end"] = pd.Timestamp(end)
        self._name = name
        self._cal = xcals.get_calendar(name, **kwargs)

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"ExchangeCalendar({self._name!r})"

    def is_business_day(self, d: date) -> bool:
        return bool(self._cal.is_session(pd.Timestamp(d)))

    def advance(self, d: date, n: int) -> date:
        direction = "next" if n >= 0 else "previous"
        session = self._cal.date_to_session(pd.Timestamp(d), direction=direction)
        return self._cal.session_offset(session, int(n)).date()

    def business_days(self, d0: date, d1: date) -> int:
        if d1 < d0:
            return -self.business_days(d1, d0)
        if d1 == d0:
            return 0
        sessions = self._cal.sessions_in_range(
            pd.Timestamp(d0 + _ONE_DAY), pd.Timestamp(d1)
        )
        return len(sessions)
