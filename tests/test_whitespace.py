"""Whitespace skipping in literal and hardened modes."""

from winter.tokens import Token, TokenType

from .conftest import assert_types


class TestLiteralMode:
    def test_single_space(self, lex):
        assert_types(lex("a b"), [TokenType.IDENT, TokenType.IDENT])

    def test_each_whitespace_char(self, lex):
        for ws in " \t\n\r":
            tokens = lex(f"a{ws}b")
            assert_types(tokens, [TokenType.IDENT, TokenType.IDENT])

    def test_leading_space(self, lex):
        assert lex(" a") == [Token(TokenType.IDENT, "a")]

    def test_double_space_yields_illegal(self, lex):
        tokens = lex("a  b")
        assert_types(tokens, [TokenType.IDENT, TokenType.ILLEGAL, TokenType.IDENT])

    def test_triple_space_yields_two_illegals(self, lex):
        tokens = lex("a   b")
        assert_types(
            tokens,
            [TokenType.IDENT, TokenType.ILLEGAL, TokenType.ILLEGAL, TokenType.IDENT],
        )

    def test_crlf_yields_illegal(self, lex):
        tokens = lex("a;\r\nb")
        assert_types(
            tokens,
            [TokenType.IDENT, TokenType.SEMICOLON, TokenType.ILLEGAL, TokenType.IDENT],
        )

    def test_trailing_double_newline(self, lex):
        tokens = lex("a\n\n")
        assert_types(tokens, [TokenType.IDENT, TokenType.ILLEGAL])

    def test_whitespace_only(self, lex):
        assert lex(" ") == []


class TestHardenedMode:
    def test_runs_skipped(self, lex_hardened):
        tokens = lex_hardened("a   b")
        assert tokens == [Token(TokenType.IDENT, "a"), Token(TokenType.IDENT, "b")]

    def test_mixed_runs(self, lex_hardened):
        tokens = lex_hardened("while x do\r\n\tx = x - 1;\n\nend\n")
        assert_types(
            tokens,
            [
                TokenType.WHILE,
                TokenType.IDENT,
                TokenType.DO,
                TokenType.IDENT,
                TokenType.EQUAL,
                TokenType.IDENT,
                TokenType.MINUS,
                TokenType.INT,
                TokenType.SEMICOLON,
                TokenType.END,
            ],
        )

    def test_illegal_is_consumed(self, lex_hardened):
        tokens = lex_hardened("123_456")
        assert tokens == [
            Token(TokenType.INT, 123),
            Token(TokenType.ILLEGAL),
            Token(TokenType.INT, 456),
        ]

    def test_whitespace_only(self, lex_hardened):
        assert lex_hardened(" \t\r\n ") == []
