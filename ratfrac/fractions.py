import math

from .errors import DivisionByZero, InvalidFormat, InvalidValue
from .utils import reduce_pair, parse_int, decimal_to_pair


class Fraction:
    """
    Rational number n/d in lowest terms.

    Invariants: denominator > 0, gcd(|numerator|, denominator) == 1,
    the sign is carried by the numerator.

    Instances are treated as values: every operation returns a new Fraction,
    except add_in_place (and +=), which overwrites the receiver.
    Do not mutate a fraction used as a dict key or set element.

    Construction:
        Fraction(n, d)            -- integer pair
        Fraction.from_int(n)      -- n/1
        Fraction.from_string(s)   -- 'A/B'
        Fraction.from_float(v)    -- via shortest decimal representation of v
    """

    separator = '/'

    def __init__(self, numerator, denominator=1):
        if denominator == 0:
            raise DivisionByZero("Denominator can't be zero")
        self.numerator, self.denominator = reduce_pair(numerator, denominator)

    @classmethod
    def from_int(cls, n):
        return cls(n, 1)

    @classmethod
    def from_string(cls, text):
        """Parse 'A/B'; surrounding spaces of A and B are allowed."""
        parts = text.split(cls.separator)
        if len(parts) != 2:
            raise InvalidFormat("Invalid fraction format: {!r}".format(text))
        n, d = (parse_int(p) for p in parts)
        if n is None or d is None:
            raise InvalidFormat("Invalid fraction format: {!r}".format(text))
        return cls(n, d)

    @classmethod
    def from_float(cls, value):
        """
        Convert finite float to fraction.

        Denominator is 10**k for k digits after the point in repr(value),
        numerator is floor(value * 10**k) in floating point,
        e.g., 0.4 -> 2/5, 0.57 -> 14/25 (0.57 * 100 == 56.99...).
        Whole values give value/1.
        """
        try:
            value = float(value)
        except (OverflowError, ValueError, TypeError) as exc:
            raise InvalidValue("Invalid value for fraction: {!r}".format(value)) from exc
        if math.isnan(value) or math.isinf(value):
            raise InvalidValue("Invalid value for fraction: {}".format(value))
        try:
            pair = decimal_to_pair(value)
        except OverflowError as exc:  # 10**k beyond float range, e.g., 5e-324
            raise InvalidValue("Invalid value for fraction: {}".format(value)) from exc
        return cls(*pair)

    @classmethod
    def convert(cls, x):
        """Coerce an operand: Fraction, int, float or 'A/B' string."""
        if isinstance(x, cls):
            return x
        elif isinstance(x, int):
            return cls.from_int(x)
        elif isinstance(x, float):
            return cls.from_float(x)
        elif isinstance(x, str):
            return cls.from_string(x)
        else:
            raise TypeError("Can't convert {} to Fraction".format(type(x).__name__))

    # arithmetic

    def add(self, other):
        """Sum as a new fraction; operands are not changed."""
        other = self.convert(other)
        return type(self)(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def add_int(self, n):
        return self.add(self.from_int(n))

    def add_in_place(self, value):
        """
        Add value and store the sum in self.

        Returns the sum as a separate Fraction, equal to the new self.
        Not thread-safe: concurrent callers must serialize access.
        """
        result = self.add(value)
        self.numerator = result.numerator
        self.denominator = result.denominator
        return result

    def _coerce(self, other):
        try:
            return self.convert(other)
        except TypeError:
            return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __iadd__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        self.add_in_place(other)
        return self

    def __neg__(self):
        return type(self)(-self.numerator, self.denominator)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self.numerator * other.numerator, self.denominator * other.denominator)

    __rmul__ = __mul__

    # comparison: denominators are positive, so cross-multiplication keeps the order

    def equals(self, other):
        if other is None:
            return False
        return (self.numerator, self.denominator) == (other.numerator, other.denominator)

    def less_than(self, other):
        return self.numerator * other.denominator < other.numerator * self.denominator

    def greater_than(self, other):
        return self.numerator * other.denominator > other.numerator * self.denominator

    def less_or_equal(self, other):
        return self.less_than(other) or self.equals(other)

    def greater_or_equal(self, other):
        return self.greater_than(other) or self.equals(other)

    def __eq__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.less_than(other)

    def __gt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.greater_than(other)

    def __le__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.less_or_equal(other)

    def __ge__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.greater_or_equal(other)

    def __hash__(self):
        return hash((self.numerator, self.denominator))

    # classification

    @property
    def is_improper(self):
        return abs(self.numerator) >= self.denominator

    @property
    def is_proper(self):
        return abs(self.numerator) < self.denominator

    @property
    def is_apparent(self):
        """Value is a whole number."""
        return self.numerator % self.denominator == 0

    @property
    def is_unitary(self):
        return abs(self.numerator) == 1

    # conversion

    def __float__(self):
        return self.numerator / self.denominator

    def __int__(self):
        return self.numerator // self.denominator

    def to_string(self):
        return '{}{}{}'.format(self.numerator, self.separator, self.denominator)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return 'Fraction({}, {})'.format(self.numerator, self.denominator)
