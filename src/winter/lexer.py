"""W lexer — converts source text into a lazy stream of tokens."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import islice

from winter.errors import IntegerOverflowError, StalledScanError
from winter.tokens import (
    INT_MAX,
    SYMBOLS,
    WHITESPACE,
    Token,
    TokenType,
    is_digit_char,
    is_ident_char,
    lookup_keyword,
)

# Held in the current-character register once input is exhausted.
# An empty string is never a character of the source.
EOF_CHAR = ""


class Lexer:
    """Tokenize W source text, one token per pull.

    The lexer is its own iterator: iterating yields tokens until end of
    input and then stays exhausted. It cannot be rewound; build a new
    Lexer to scan the same text again.

    By default the scanner keeps its literal behaviour: a single whitespace
    character is skipped before each token, and an unrecognised character is
    reported as ILLEGAL without being consumed. With ``hardened=True`` whole
    whitespace runs are skipped and ILLEGAL consumes its character.
    """

    def __init__(self, source: str, *, hardened: bool = False) -> None:
        self._source = source
        self._hardened = hardened
        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR
        self.token_start = 0
        self.advance()

    @property
    def source(self) -> str:
        return self._source

    @property
    def hardened(self) -> bool:
        return self._hardened

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        tok = self.next_token()
        if tok.type is TokenType.EOF:
            raise StopIteration
        return tok

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def advance(self) -> None:
        """Move to the next character, holding EOF_CHAR past the end."""
        if self.read_position >= len(self._source):
            self.ch = EOF_CHAR
        else:
            self.ch = self._source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def skip_one_whitespace(self) -> None:
        """Consume at most one whitespace character."""
        if self.ch in WHITESPACE:
            self.advance()

    def _skip_whitespace(self) -> None:
        if self._hardened:
            while self.ch in WHITESPACE:
                self.advance()
        else:
            self.skip_one_whitespace()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return exactly one token (EOF once input is exhausted)."""
        self._skip_whitespace()
        self.token_start = self.position
        ch = self.ch

        tt = SYMBOLS.get(ch)
        if tt is not None:
            self.advance()
            return Token(tt)

        if ch == EOF_CHAR:
            self.advance()
            return Token(TokenType.EOF)

        if is_ident_char(ch):
            spelling = self._read_run(is_ident_char)
            keyword = lookup_keyword(spelling)
            if keyword is not None:
                return Token(keyword)
            return Token(TokenType.IDENT, spelling)

        if is_digit_char(ch):
            return self._lex_number()

        if self._hardened:
            self.advance()
        return Token(TokenType.ILLEGAL)

    def _read_run(self, pred: Callable[[str], bool]) -> str:
        """Consume the maximal run of characters satisfying pred."""
        start = self.position
        while self.ch != EOF_CHAR and pred(self.ch):
            self.advance()
        return self._source[start : self.position]

    def _lex_number(self) -> Token:
        start = self.position
        digits = self._read_run(is_digit_char)
        value = int(digits)
        if value > INT_MAX:
            raise IntegerOverflowError(
                f"integer literal {digits} does not fit in 64 bits",
                start,
                self._source,
                len(digits),
            )
        return Token(TokenType.INT, value)


def tokenize(source: str, *, hardened: bool = False, limit: int | None = None) -> list[Token]:
    """Convenience function: collect the token stream into a list.

    In literal mode an unrecognised character that is not whitespace is
    reported forever; pass ``limit`` to cap the number of tokens collected.
    """
    lexer = Lexer(source, hardened=hardened)
    if limit is None:
        return list(lexer)
    return list(islice(lexer, limit))


def scan(source: str, *, hardened: bool = False) -> Iterator[tuple[int, Token]]:
    """Yield (offset, token) pairs, draining the whole source.

    Raises StalledScanError when an illegal character is reported twice at
    the same offset, since no further pull can get past it.
    """
    lexer = Lexer(source, hardened=hardened)
    stuck_at: int | None = None
    for tok in lexer:
        if tok.type is TokenType.ILLEGAL:
            if lexer.token_start == stuck_at:
                raise StalledScanError(
                    f"scanner cannot advance past illegal character {lexer.ch!r}",
                    lexer.token_start,
                    source,
                )
            stuck_at = lexer.token_start
        else:
            stuck_at = None
        yield lexer.token_start, tok
