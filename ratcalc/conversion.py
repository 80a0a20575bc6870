"""
Conversion between exact rationals and fixed-precision decimals.

This is the only place where exactness is given up. Rationals are turned into
decimals by rounding the quotient half-even to ``precision`` significant
digits; decimals are turned back into rationals by truncating toward negative
infinity to ``places`` fractional digits, so the result's denominator always
divides ``10**places``.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_EVEN, Context, Decimal

from ratcalc.rational import Rational

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 100


def decimal_context(precision: int = DEFAULT_PRECISION) -> Context:
    """Return a fresh context; the thread's global decimal context is never touched."""
    if precision < 1:
        raise ValueError(f"Precision must be positive, got {precision}")
    return Context(prec=precision, rounding=ROUND_HALF_EVEN)


def to_decimal(value: Rational, precision: int = DEFAULT_PRECISION) -> Decimal:
    ctx = decimal_context(precision)
    return ctx.divide(Decimal(value.numerator), Decimal(value.denominator))


def to_rational(value: Decimal, places: int = DEFAULT_PRECISION) -> Rational:
    """Truncate ``value`` to ``places`` fractional digits as ``floor(d * 10**P) / 10**P``."""
    if not value.is_finite():
        raise ValueError(f"Cannot convert non-finite decimal {value} to a rational")
    scale = 10 ** places
    result = Rational(math.floor(Rational(value) * scale), scale)
    logger.debug(f"Converted decimal {value} to rational {result}")
    return result
