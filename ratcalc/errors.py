"""
Exception hierarchy for the calculator.

Every failure in the lexer, parser, or evaluator is raised as a subclass of
CalculatorError and aborts the current evaluation. Nothing in the core
catches these; the driver decides how to report them.
"""

from __future__ import annotations

from typing import Any


def _kind_name(kind: Any) -> str:
    return getattr(kind, 'name', str(kind))


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class InputStreamError(CalculatorError):
    """Raised when the underlying character stream can no longer be read."""
    pass


class LexError(CalculatorError):
    """Raised for a character that cannot start any token."""

    def __init__(self, char: str, pos: int):
        self.char = char
        self.pos = pos
        super().__init__(f"Unknown character at pos {pos}: {char!r}")


class ParseError(CalculatorError):
    """Raised for grammar violations."""
    pass


class ExpectedToken(ParseError):
    """A specific token kind was required but something else was found."""

    def __init__(self, expected: Any, got: Any, pos: int = -1):
        self.expected = expected
        self.got = got
        self.pos = pos
        super().__init__(f"Expected {_kind_name(expected)} at pos {pos}; got {_kind_name(got)}")


class ExpectedPrimary(ParseError):
    """The token found cannot start a number, group, or function call."""

    def __init__(self, got: Any, pos: int = -1):
        self.got = got
        self.pos = pos
        super().__init__(f"Expected number, '(' or function call at pos {pos}; got {_kind_name(got)}")


class EvalError(CalculatorError):
    """Raised for errors during evaluation."""
    pass


class DivisionByZero(EvalError, ZeroDivisionError):
    """Raised when a divisor's numerator is zero."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class ArityError(EvalError):
    def __init__(self, name: str, expected: int, got: int):
        self.name = name
        self.expected = expected
        self.got = got
        plural = '' if expected == 1 else 's'
        super().__init__(f"Function '{name}' takes {expected} argument{plural}; got {got}")


class UnknownFunctionError(EvalError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function: {name}")


class DomainError(EvalError):
    """Raised when a built-in function is given an argument outside its domain."""

    def __init__(self, name: str, detail: str):
        self.name = name
        self.detail = detail
        super().__init__(f"Domain error in function '{name}': {detail}")
