class FractionError(Exception):
    """Base class for errors raised while building a Fraction."""


class DivisionByZero(FractionError, ZeroDivisionError):
    pass


class InvalidFormat(FractionError, ValueError):
    """Text is not of the form 'A/B' with integer A and B."""


class InvalidValue(FractionError, ValueError):
    """Float is NaN or infinite."""
