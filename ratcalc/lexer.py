"""
Pull-based lexer over a character stream.

The lexer never tokenizes ahead: each call scans exactly one token from the
stream, except for a single pending token kept by peek(). peek() fills the
slot if it is empty, next_token() and get() drain it, and nothing else
touches it. Newlines are real tokens; the "significant" accessors (get,
match, expect, peek_significant) discard them.
"""

from __future__ import annotations

import io
import logging
from typing import List, Optional, TextIO, Union

from ratcalc.errors import ExpectedToken, InputStreamError, LexError
from ratcalc.rational import from_digits
from ratcalc.tokens import SINGLE_CHAR_TOKENS, Token, TokenKind

logger = logging.getLogger(__name__)


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_ident_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class CharStream:
    """Single-character reader with pushback over a str or readable text stream."""

    def __init__(self, source: Union[str, TextIO]):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self._pushback: List[str] = []
        self.pos = 0

    def read(self) -> str:
        """Return the next character, or '' at end of input."""
        if self._pushback:
            ch = self._pushback.pop()
        else:
            try:
                ch = self._stream.read(1)
            except (OSError, ValueError) as e:
                raise InputStreamError(f"Invalid input stream: {e}") from e
        if ch:
            self.pos += 1
        return ch

    def unread(self, ch: str) -> None:
        if not ch:
            return
        self._pushback.append(ch)
        self.pos -= 1


Source = Union[str, TextIO, CharStream]


class Lexer:
    """Tokenizer for calculator expressions with one token of lookahead."""

    def __init__(self, source: Source):
        self._chars = source if isinstance(source, CharStream) else CharStream(source)
        self._pending: Optional[Token] = None
        self._history: List[str] = []

    def _getch(self) -> str:
        ch = self._chars.read()
        if ch:
            self._history.append(ch)
        return ch

    def _putback(self, ch: str) -> None:
        if not ch:
            return
        self._chars.unread(ch)
        self._history.pop()

    def _scan(self) -> Token:
        ch = self._getch()
        while ch and ch.isspace() and ch not in '\r\n':
            ch = self._getch()

        start = self._chars.pos - 1
        if ch == '':
            return Token(TokenKind.EOF, None, self._chars.pos)

        if ch == '\n':
            return Token(TokenKind.NEWLINE, None, start)
        if ch == '\r':
            nxt = self._getch()
            if nxt != '\n':
                self._putback(nxt)
            return Token(TokenKind.NEWLINE, None, start)

        if _is_digit(ch):
            return self._read_number(ch, start)
        if _is_letter(ch):
            return self._read_ident(ch, start)

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            return Token(kind, None, start)

        self._putback(ch)
        logger.debug(f"Unknown character {ch!r} at pos {start}")
        raise LexError(ch, start)

    def _read_number(self, first: str, start: int) -> Token:
        integer_digits = [first]
        ch = self._getch()
        while _is_digit(ch):
            integer_digits.append(ch)
            ch = self._getch()
        fraction_digits: List[str] = []
        if ch == '.':
            ch = self._getch()
            while _is_digit(ch):
                fraction_digits.append(ch)
                ch = self._getch()
        self._putback(ch)
        value = from_digits(''.join(integer_digits), ''.join(fraction_digits))
        return Token(TokenKind.NUMBER, value, start)

    def _read_ident(self, first: str, start: int) -> Token:
        chars = [first]
        ch = self._getch()
        while _is_ident_char(ch):
            chars.append(ch)
            ch = self._getch()
        self._putback(ch)
        return Token(TokenKind.IDENT, ''.join(chars), start)

    def next_token(self) -> Token:
        """Consume and return the next raw token (newlines included)."""
        if self._pending is not None:
            tok = self._pending
            self._pending = None
            return tok
        return self._scan()

    def peek(self) -> Token:
        """Return the next raw token without consuming it. Newlines are NOT skipped."""
        if self._pending is None:
            self._pending = self._scan()
        return self._pending

    def check(self, kind: TokenKind) -> bool:
        return self.peek().kind is kind

    def peek_significant(self) -> Token:
        """Discard newline tokens and return the next significant token without consuming it."""
        while self.peek().kind is TokenKind.NEWLINE:
            self._pending = None
        return self.peek()

    def match(self, kind: TokenKind) -> bool:
        """Return whether the next significant token is of ``kind``."""
        return self.peek_significant().kind is kind

    def get(self) -> Token:
        """Consume and return the next significant token."""
        self.peek_significant()
        return self.next_token()

    def expect(self, kind: TokenKind) -> Token:
        tok = self.get()
        if tok.kind is not kind:
            raise ExpectedToken(kind, tok.kind, tok.pos)
        return tok

    def tokenize(self) -> List[Token]:
        """Return every remaining raw token, ending with EOF."""
        tokens: List[Token] = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.kind is TokenKind.EOF:
                return tokens

    def clear_history(self) -> str:
        """Return the raw text consumed since the last call and forget it."""
        text = ''.join(self._history)
        self._history.clear()
        return text
