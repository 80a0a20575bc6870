"""
Built-in functions and the immutable table that maps names to them.

sqrt crosses the decimal boundary: the argument is converted once to a
``precision``-digit decimal (half-even), its square root is taken in the same
context (correctly rounded, half-even), and the result is truncated back to
a rational with ``precision`` fractional digits. floor and scale are exact.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Sequence

from ratcalc.conversion import DEFAULT_PRECISION, decimal_context, to_decimal, to_rational
from ratcalc.errors import ArityError, DomainError, UnknownFunctionError
from ratcalc.rational import ZERO, Rational, is_integer

logger = logging.getLogger(__name__)


def rational_sqrt(x: Rational, precision: int = DEFAULT_PRECISION) -> Rational:
    if x < 0:
        raise DomainError('sqrt', f"negative argument {x}")
    if x == 0:
        return ZERO
    ctx = decimal_context(precision)
    root = ctx.sqrt(to_decimal(x, precision))
    return to_rational(root, precision)


def rational_floor(x: Rational) -> Rational:
    return Rational(math.floor(x))


def rational_scale(n: Rational, x: Rational) -> Rational:
    """Truncate ``x`` to ``n`` decimal digits: floor(x * 10**n) / 10**n."""
    if not is_integer(n):
        raise DomainError('scale', f"digit count must be an integer, got {n}")
    factor = Rational(10) ** n.numerator
    return rational_floor(x * factor) / factor


@dataclass(frozen=True)
class Builtin:
    name: str
    arity: int
    func: Callable[..., Rational]
    doc: str = ''

    def __call__(self, args: Sequence[Rational]) -> Rational:
        if len(args) != self.arity:
            raise ArityError(self.name, self.arity, len(args))
        return self.func(*args)


class FunctionTable:
    """Read-only mapping from function name to Builtin."""

    def __init__(self, builtins: Sequence[Builtin]):
        table: Dict[str, Builtin] = {}
        for builtin in builtins:
            if builtin.name in table:
                raise ValueError(f"Duplicate function name: {builtin.name}")
            table[builtin.name] = builtin
        self._table: Mapping[str, Builtin] = MappingProxyType(table)

    def lookup(self, name: str) -> Builtin:
        try:
            return self._table[name]
        except KeyError:
            raise UnknownFunctionError(name) from None

    def names(self) -> List[str]:
        return sorted(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[Builtin]:
        return iter(self._table[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._table)


def build_function_table(precision: int = DEFAULT_PRECISION) -> FunctionTable:
    logger.debug(f"Building function table with precision {precision}")
    return FunctionTable([
        Builtin('sqrt', 1, partial(rational_sqrt, precision=precision),
                f"square root, truncated to {precision} decimal places"),
        Builtin('floor', 1, rational_floor, "largest integer not greater than x"),
        Builtin('scale', 2, rational_scale, "scale(n, x): x truncated to n decimal digits"),
    ])


DEFAULT_FUNCTIONS = build_function_table()
