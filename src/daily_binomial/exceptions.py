class DailyBinomialError(Exception):
    """Base class for failures raised while building a daily binomial tree."""


class InvalidParameterError(DailyBinomialError, ValueError):
    """Raised when a numeric or date input is outside its valid domain.

    Examples are a negative volatility, a non-positive step size or a maturity
    that falls before the pricing date.
    """


class UnsupportedConventionError(DailyBinomialError, ValueError):
    """Raised when the yield curve cannot drive a business-day lattice.

    The lattice requires a curve quoted under the 252-business-day exponential
    day count whose reference date equals the pricing date.
    """


class NumericalInconsistencyError(DailyBinomialError, ArithmeticError):
    """Raised when calibrated quantities contradict each other.

    Typically a risk-neutral probability outside ``[0, 1]``: the curve-implied
    forward rate for some step is too extreme relative to the volatility-implied
    up/down factors.
    """
