"""
Recursive descent parser producing an expression tree.

Grammar (lowest to highest precedence):

    expr           : additive
    additive       : multiplicative (('+'|'-') multiplicative)*
    multiplicative : unary (('*'|'/') unary)*
    unary          : ('+'|'-')? primary
    primary        : NUMBER | '(' expr ')' | IDENT '(' (expr (',' expr)*)? ')'

Binary levels are left-associative. Every decision looks at the next
significant token, so newlines between tokens are ignored.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from ratcalc.errors import ExpectedPrimary
from ratcalc.lexer import Lexer
from ratcalc.nodes import BinaryOp, BinaryOperator, FuncCall, Node, Number, UnaryOp, UnaryOperator
from ratcalc.tokens import TokenKind

logger = logging.getLogger(__name__)

ADDITIVE_OPS: Dict[TokenKind, BinaryOperator] = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUB,
}

MULTIPLICATIVE_OPS: Dict[TokenKind, BinaryOperator] = {
    TokenKind.STAR: BinaryOperator.MUL,
    TokenKind.SLASH: BinaryOperator.DIV,
}

PREFIX_OPS: Dict[TokenKind, UnaryOperator] = {
    TokenKind.PLUS: UnaryOperator.IDENTITY,
    TokenKind.MINUS: UnaryOperator.NEGATE,
}


class Parser:
    """Builds one expression tree from a lexer, consuming no more than it needs."""

    def __init__(self, lexer: Lexer):
        self.lexer = lexer

    def parse(self) -> Node:
        """Parse one expression; tokens after it are left in the lexer."""
        node = self.parse_expr()
        logger.debug(f"Parsed expression {node}")
        return node

    def parse_complete(self) -> Node:
        """Parse one expression and require the input to end right after it."""
        node = self.parse()
        self.lexer.expect(TokenKind.EOF)
        return node

    def parse_expr(self) -> Node:
        return self.parse_additive()

    def _parse_binary_level(self, operand: Callable[[], Node], ops: Dict[TokenKind, BinaryOperator]) -> Node:
        left = operand()
        while True:
            op = ops.get(self.lexer.peek_significant().kind)
            if op is None:
                return left
            self.lexer.get()
            right = operand()
            left = BinaryOp(op, left, right)

    def parse_additive(self) -> Node:
        return self._parse_binary_level(self.parse_multiplicative, ADDITIVE_OPS)

    def parse_multiplicative(self) -> Node:
        return self._parse_binary_level(self.parse_unary, MULTIPLICATIVE_OPS)

    def parse_unary(self) -> Node:
        op = PREFIX_OPS.get(self.lexer.peek_significant().kind)
        if op is None:
            return self.parse_primary()
        self.lexer.get()
        return UnaryOp(op, self.parse_primary())

    def parse_primary(self) -> Node:
        tok = self.lexer.get()
        if tok.kind is TokenKind.NUMBER:
            return Number(tok.value)
        if tok.kind is TokenKind.LPAREN:
            node = self.parse_expr()
            self.lexer.expect(TokenKind.RPAREN)
            return node
        if tok.kind is TokenKind.IDENT:
            self.lexer.expect(TokenKind.LPAREN)
            return FuncCall(tok.value, tuple(self._parse_argument_list()))
        raise ExpectedPrimary(tok.kind, tok.pos)

    def _parse_argument_list(self) -> List[Node]:
        """Parse `(expr (, expr)*)? ')'`. Assumes '(' was already consumed."""
        args: List[Node] = []
        if not self.lexer.match(TokenKind.RPAREN):
            args.append(self.parse_expr())
            while self.lexer.match(TokenKind.COMMA):
                self.lexer.get()
                args.append(self.parse_expr())
        self.lexer.expect(TokenKind.RPAREN)
        return args


def parse(source) -> Node:
    """Parse one expression from a str, text stream, CharStream, or Lexer."""
    lexer = source if isinstance(source, Lexer) else Lexer(source)
    return Parser(lexer).parse()
