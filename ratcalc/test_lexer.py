import io
from fractions import Fraction

import pytest

from ratcalc.errors import ExpectedToken, InputStreamError, LexError
from ratcalc.lexer import CharStream, Lexer
from ratcalc.tokens import TokenKind


def lex_kinds(text):
    return [t.kind for t in Lexer(text).tokenize()]


def test_lex_simple_expression():
    toks = Lexer("12 + 3.5*(x1, 4) / 2").tokenize()
    assert [t.kind for t in toks] == [
        TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER, TokenKind.STAR,
        TokenKind.LPAREN, TokenKind.IDENT, TokenKind.COMMA, TokenKind.NUMBER,
        TokenKind.RPAREN, TokenKind.SLASH, TokenKind.NUMBER, TokenKind.EOF,
    ]
    assert toks[0].value == 12
    assert toks[2].value == Fraction(7, 2)
    assert toks[5].value == "x1"


def test_lex_decimal_literal_is_exact():
    tok = Lexer("0.1").next_token()
    assert tok.value == Fraction(1, 10)
    assert isinstance(tok.value, Fraction)


def test_lex_trailing_dot_is_consumed():
    toks = Lexer("12.+1").tokenize()
    assert [t.kind for t in toks] == [TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER, TokenKind.EOF]
    assert toks[0].value == 12


def test_lex_newlines_are_tokens_and_crlf_collapses():
    assert lex_kinds("1\r\n2\r3\n") == [
        TokenKind.NUMBER, TokenKind.NEWLINE, TokenKind.NUMBER, TokenKind.NEWLINE,
        TokenKind.NUMBER, TokenKind.NEWLINE, TokenKind.EOF,
    ]


def test_lex_whitespace_skipped():
    assert lex_kinds(" \t 1 \t ") == [TokenKind.NUMBER, TokenKind.EOF]


def test_lex_token_positions():
    toks = Lexer("1 + ab").tokenize()
    assert [t.pos for t in toks] == [0, 2, 4, 6]


def test_lex_invalid_character_raises():
    lexer = Lexer("1 @ 2")
    assert lexer.next_token().kind is TokenKind.NUMBER
    with pytest.raises(LexError) as e:
        lexer.next_token()
    assert e.value.char == "@"
    assert e.value.pos == 2


def test_lex_identifiers_are_ascii_only():
    lexer = Lexer("x²(1)")
    tok = lexer.next_token()
    assert tok.kind is TokenKind.IDENT and tok.value == "x"
    with pytest.raises(LexError) as e:
        lexer.next_token()
    assert e.value.char == "²"
    assert e.value.pos == 1
    with pytest.raises(LexError):
        Lexer("été").next_token()


def test_lex_invalid_character_is_pushed_back():
    stream = CharStream("$")
    with pytest.raises(LexError):
        Lexer(stream).next_token()
    assert stream.read() == "$"


def test_lex_eof_is_repeatable():
    lexer = Lexer("")
    assert lexer.next_token().kind is TokenKind.EOF
    assert lexer.next_token().kind is TokenKind.EOF


def test_peek_does_not_consume():
    lexer = Lexer("1 2")
    assert lexer.peek().value == 1
    assert lexer.peek().value == 1
    assert lexer.next_token().value == 1
    assert lexer.next_token().value == 2


def test_check_does_not_skip_newlines():
    lexer = Lexer("\n+")
    assert lexer.check(TokenKind.NEWLINE)
    assert not lexer.check(TokenKind.PLUS)


def test_match_and_get_skip_newlines():
    lexer = Lexer("\n\n+\n1")
    assert lexer.match(TokenKind.PLUS)
    assert lexer.get().kind is TokenKind.PLUS
    assert lexer.get().value == 1
    assert lexer.get().kind is TokenKind.EOF


def test_expect_reports_expected_and_got():
    lexer = Lexer("1")
    with pytest.raises(ExpectedToken) as e:
        lexer.expect(TokenKind.RPAREN)
    assert e.value.expected is TokenKind.RPAREN
    assert e.value.got is TokenKind.NUMBER


def test_lexer_reads_lazily_from_stream():
    stream = io.StringIO("1+2")
    lexer = Lexer(stream)
    lexer.next_token()
    # the number's terminator '+' was read and pushed back, nothing more
    assert stream.tell() == 2


def test_clear_history_returns_consumed_text():
    lexer = Lexer("12 + 3\n4")
    lexer.next_token()
    lexer.next_token()
    assert lexer.clear_history() == "12 +"
    lexer.next_token()
    lexer.next_token()
    assert lexer.clear_history() == " 3\n"


def test_closed_stream_raises_input_stream_error():
    stream = io.StringIO("1")
    stream.close()
    with pytest.raises(InputStreamError):
        Lexer(stream).next_token()


def test_char_stream_pushback():
    stream = CharStream("ab")
    assert stream.read() == "a"
    stream.unread("a")
    assert stream.pos == 0
    assert stream.read() == "a"
    assert stream.read() == "b"
    assert stream.read() == ""
    assert stream.pos == 2
