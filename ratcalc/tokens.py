from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from ratcalc.rational import Rational


class TokenKind(Enum):
    """All lexical token types produced by the lexer."""

    NUMBER = auto()  # integer or decimal literal
    IDENT = auto()  # function name
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COMMA = auto()  # ,
    NEWLINE = auto()  # \n, \r or \r\n
    EOF = auto()  # end of input


SINGLE_CHAR_TOKENS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.STAR,
    '/': TokenKind.SLASH,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    ',': TokenKind.COMMA,
}


@dataclass(frozen=True)
class Token:
    """Represents a token with kind, value, and character position."""
    kind: TokenKind
    value: Optional[Union[Rational, str]] = None
    pos: int = 0

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, pos={self.pos})"
