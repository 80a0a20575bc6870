"""
Entry points that run the whole lexer -> parser -> evaluator pipeline.

``evaluate`` reads only as far as the expression needs, so a caller holding a
Lexer (or CharStream) can keep evaluating expressions from the same input.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from ratcalc.config import Settings
from ratcalc.conversion import DEFAULT_PRECISION
from ratcalc.evaluator import Evaluator
from ratcalc.formatting import format_rational
from ratcalc.functions import DEFAULT_FUNCTIONS, FunctionTable, build_function_table
from ratcalc.lexer import Lexer, Source
from ratcalc.parser import Parser
from ratcalc.rational import Rational
from ratcalc.tokens import TokenKind

logger = logging.getLogger(__name__)


def _as_lexer(source) -> Lexer:
    return source if isinstance(source, Lexer) else Lexer(source)


def evaluate(source, functions: Optional[FunctionTable] = None) -> Rational:
    """Evaluate one expression from a str, text stream, CharStream, or Lexer."""
    tree = Parser(_as_lexer(source)).parse()
    return Evaluator(functions).eval(tree)


def evaluate_all(source, functions: Optional[FunctionTable] = None) -> Iterator[Rational]:
    """Yield the value of each expression in ``source`` until end of input."""
    lexer = _as_lexer(source)
    evaluator = Evaluator(functions)
    while not lexer.match(TokenKind.EOF):
        value = evaluator.eval(Parser(lexer).parse())
        logger.debug(f"{lexer.clear_history().strip()!r} = {value}")
        yield value


class Calculator:
    """Bundles a precision and the function table built for it."""

    def __init__(self, settings: Optional[Settings] = None):
        self.precision = settings.precision if settings is not None else DEFAULT_PRECISION
        if self.precision == DEFAULT_PRECISION:
            self.functions = DEFAULT_FUNCTIONS
        else:
            self.functions = build_function_table(self.precision)
        self.evaluator = Evaluator(self.functions)

    def evaluate(self, source: Source) -> Rational:
        return evaluate(source, self.functions)

    def evaluate_all(self, source: Source) -> Iterator[Rational]:
        return evaluate_all(source, self.functions)

    def evaluate_line(self, line: str) -> Rational:
        """Evaluate a line that must hold exactly one expression."""
        tree = Parser(Lexer(line)).parse_complete()
        result = self.evaluator.eval(tree)
        logger.debug(f"{tree} = {result}")
        return result

    def format(self, value: Rational) -> str:
        return format_rational(value, self.precision)
