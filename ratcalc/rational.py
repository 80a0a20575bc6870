"""
Exact rational arithmetic.

Values are plain ``fractions.Fraction`` instances, which are immutable and
always kept in lowest terms with a positive denominator. The helpers here add
the calculator's own error type for division by zero and the digit-by-digit
construction used for numeric literals.
"""

from __future__ import annotations

import operator
from fractions import Fraction

from ratcalc.errors import DivisionByZero

Rational = Fraction  # rational type alias

ZERO = Rational(0)
ONE = Rational(1)
TENTH = Rational(1, 10)

add = operator.add
subtract = operator.sub
multiply = operator.mul
negate = operator.neg


def divide(lhs: Rational, rhs: Rational) -> Rational:
    if rhs.numerator == 0:
        raise DivisionByZero()
    return lhs / rhs


def from_digits(integer_digits: str, fraction_digits: str = '') -> Rational:
    """
    Build the exact value of a decimal literal from its digit strings.

    The integer part is accumulated as ``n * 10 + d``; each fractional digit
    adds ``d * (1/10)**k``. "12.34" is therefore 12 + 3/10 + 4/100.
    """
    if not integer_digits or not integer_digits.isdigit():
        raise ValueError(f"Invalid integer digits: {integer_digits!r}")
    if fraction_digits and not fraction_digits.isdigit():
        raise ValueError(f"Invalid fraction digits: {fraction_digits!r}")

    value = ZERO
    for ch in integer_digits:
        value = value * 10 + int(ch)
    digit = ONE
    for ch in fraction_digits:
        digit *= TENTH
        value += digit * int(ch)
    return value


def is_integer(value: Rational) -> bool:
    return value.denominator == 1
