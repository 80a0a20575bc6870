"""Exact rational arithmetic expression evaluator."""

from ratcalc.calculator import Calculator, evaluate, evaluate_all
from ratcalc.errors import (
    ArityError,
    CalculatorError,
    DivisionByZero,
    DomainError,
    EvalError,
    ExpectedPrimary,
    ExpectedToken,
    InputStreamError,
    LexError,
    ParseError,
    UnknownFunctionError,
)
from ratcalc.formatting import format_fraction, format_rational
from ratcalc.lexer import CharStream, Lexer
from ratcalc.parser import Parser, parse
from ratcalc.rational import Rational
from ratcalc.tokens import Token, TokenKind

__all__ = [
    "ArityError",
    "Calculator",
    "CalculatorError",
    "CharStream",
    "DivisionByZero",
    "DomainError",
    "EvalError",
    "ExpectedPrimary",
    "ExpectedToken",
    "InputStreamError",
    "LexError",
    "Lexer",
    "ParseError",
    "Parser",
    "Rational",
    "Token",
    "TokenKind",
    "UnknownFunctionError",
    "evaluate",
    "evaluate_all",
    "format_fraction",
    "format_rational",
    "parse",
]
