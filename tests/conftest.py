"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from winter.lexer import tokenize
from winter.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source in literal mode (EOF excluded)."""

    def _lex(source: str, limit: int | None = None) -> list[Token]:
        return tokenize(source, limit=limit)

    return _lex


@pytest.fixture
def lex_hardened():
    """Return a helper that tokenizes source in hardened mode (EOF excluded)."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source, hardened=True)

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str | int | None]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
