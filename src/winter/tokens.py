"""Token types, the keyword table, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Literals
    IDENT = auto()  # alphabetic run, value is the spelling
    INT = auto()  # decimal digit run, value is the parsed integer
    TRUE = auto()
    FALSE = auto()

    # Operators (single-character)
    PLUS = auto()  # +
    MINUS = auto()  # -
    TIMES = auto()  # *
    SLASH = auto()  # /
    GT = auto()  # >
    LT = auto()  # <
    EQUAL = auto()  # =
    NOT = auto()  # !

    # Delimiters (single-character)
    SEMICOLON = auto()  # ;
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Control flow
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    DO = auto()
    END = auto()
    ABORT = auto()

    ILLEGAL = auto()
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token; only IDENT and INT carry a value."""

    type: TokenType
    value: str | int | None = None


# Single-character operators and delimiters
SYMBOLS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.SLASH,
    ">": TokenType.GT,
    "<": TokenType.LT,
    "=": TokenType.EQUAL,
    "!": TokenType.NOT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
}

KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
    "end": TokenType.END,
    "abort": TokenType.ABORT,
}

WHITESPACE = frozenset(" \t\n\r")

# Largest value an INT token may hold (unsigned 64-bit)
INT_MAX = 2**64 - 1


def lookup_keyword(spelling: str) -> TokenType | None:
    """Return the keyword token type for an exact spelling, or None."""
    return KEYWORDS.get(spelling)


def is_ident_char(ch: str) -> bool:
    """Return True if ch can appear in an identifier (letters only)."""
    return ch.isalpha()


def is_digit_char(ch: str) -> bool:
    """Return True if ch is a decimal digit."""
    return ch.isdecimal()
