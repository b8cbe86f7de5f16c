from .calendars import BusinessCalendar, BusinessDayCalendar, ExchangeCalendar
from .curves import FlatCurve, YieldCurve, ZeroCurve

__all__ = [
    "BusinessCalendar",
    "BusinessDayCalendar",
    "ExchangeCalendar",
    "YieldCurve",
    "FlatCurve",
    "ZeroCurve",
]
