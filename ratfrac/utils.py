# coding: utf-8

from decimal import Decimal
import logging
import math
import re


_INT_RE = re.compile(r'\s*[+-]?\d+\s*\Z')


def reduce_pair(n, d):
    """
    Canonical form of n/d.

    Divide by gcd, then move the sign to the numerator, so that d > 0
    and gcd(|n|, d) == 1.  Zero becomes 0/1.
    The caller must check that d != 0.
    """
    g = math.gcd(n, d)  # math.gcd is always non-negative
    n, d = n // g, d // g
    if d < 0:
        n, d = -n, -d
    return n, d


def parse_int(text):
    """Parse a full integer literal, return None if text is not one."""
    if not _INT_RE.match(text):
        return None
    return int(text)


def decimal_to_pair(value):
    """
    Convert finite float to (n, d) with d a power of ten.

    d = 10**k, where k is the number of fractional digits in the shortest
    round-trip representation of value, i.e., repr(value), and
    n = floor(value * d) computed in floating point.
    Whole values give (value, 1).
    The pair is not reduced.
    """
    if value == 0:
        return 0, 1

    sign = -1 if value < 0 else 1
    value = abs(value)

    if value.is_integer():
        return sign * math.floor(value), 1

    text = repr(value)
    exp = Decimal(text).as_tuple().exponent  # also handles '1e-05'
    d = 10**(-exp)
    # float product, may lose one unit: 1.005 * 1000 -> 1004.99...
    n = math.floor(value * d)
    logging.debug('decimal %s -> %d/%d', text, sign * n, d)
    return sign * n, d
