"""Winter: lexer for the W language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from winter.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, *, hardened: bool = False, limit: int | None = None) -> list[Token]:
    """Scan W source and return its tokens (EOF excluded)."""
    from winter.lexer import tokenize as _tokenize

    return _tokenize(source, hardened=hardened, limit=limit)
