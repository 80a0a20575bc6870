"""
Rendering results as text.

Integers print exactly. Anything else prints as the quotient rounded to a
fixed number of significant digits, which is lossy for non-terminating
expansions such as 1/3.
"""

from __future__ import annotations

from ratcalc.conversion import DEFAULT_PRECISION, to_decimal
from ratcalc.rational import Rational, is_integer


def format_rational(value: Rational, precision: int = DEFAULT_PRECISION) -> str:
    if is_integer(value):
        return str(value.numerator)
    return str(to_decimal(value, precision))


def format_fraction(value: Rational) -> str:
    """Exact "numerator/denominator" form, or the bare integer."""
    if is_integer(value):
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"
