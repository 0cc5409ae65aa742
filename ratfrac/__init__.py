from .errors import FractionError, DivisionByZero, InvalidFormat, InvalidValue
from .fractions import Fraction
