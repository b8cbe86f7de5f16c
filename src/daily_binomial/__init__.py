"""
daily_binomial

American call pricing on a binomial lattice with one step per business day,
each step driven by its own forward rate read off a yield curve.

    from daily_binomial import AmericanCall, build_american_call_tree
"""

from .config import BDAYS_PER_YEAR, STEP_YEARS, LatticeConfig
from .exceptions import (
    DailyBinomialError,
    InvalidParameterError,
    NumericalInconsistencyError,
    UnsupportedConventionError,
)
from .market.calendars import (
    BusinessCalendar,
    BusinessDayCalendar,
    ExchangeCalendar,
)
from .market.curves import FlatCurve, YieldCurve, ZeroCurve
from .models.binomial_crr import risk_neutral_probabilities, volatility_match
from .models.forward_rates import daily_forward_rates
from .pricers.tree import (
    BinomialTree,
    Node,
    american_call_price,
    build_american_call_tree,
)
from .types import AmericanCall, DayCountConvention

__all__ = [
    # Types
    "AmericanCall",
    "DayCountConvention",
    "Node",
    "BinomialTree",
    # Market
    "BusinessCalendar",
    "BusinessDayCalendar",
    "ExchangeCalendar",
    "YieldCurve",
    "FlatCurve",
    "ZeroCurve",
    # Config
    "BDAYS_PER_YEAR",
    "STEP_YEARS",
    "LatticeConfig",
    # Errors
    "DailyBinomialError",
    "InvalidParameterError",
    "UnsupportedConventionError",
    "NumericalInconsistencyError",
    # Building blocks
    "volatility_match",
    "daily_forward_rates",
    "risk_neutral_probabilities",
    # Pricers
    "build_american_call_tree",
    "american_call_price",
]
