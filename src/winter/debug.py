"""Debug rendering of tokens, one per line."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import TextIO

from winter.tokens import Token, TokenType


def format_token(tok: Token) -> str:
    """Render a token as ``NAME`` or ``NAME(payload)``.

    Identifier spellings are quoted, e.g. ``IDENT("A")``; integers are bare,
    e.g. ``INT(5)``.
    """
    if tok.type is TokenType.IDENT:
        return f"IDENT({json.dumps(tok.value, ensure_ascii=False)})"
    if tok.type is TokenType.INT:
        return f"INT({tok.value})"
    return tok.type.name


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stdout) -> int:
    """Write each token to *file* and return how many were written."""
    count = 0
    for tok in tokens:
        file.write(format_token(tok))
        file.write("\n")
        count += 1
    return count
