from .binomial_crr import (
    DailyBinomialModel,
    risk_neutral_probabilities,
    volatility_match,
)
from .forward_rates import daily_forward_rates

__all__ = [
    "DailyBinomialModel",
    "volatility_match",
    "risk_neutral_probabilities",
    "daily_forward_rates",
]
