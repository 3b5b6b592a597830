"""Minimal LSP server for W — lexical diagnostics only."""

from __future__ import annotations

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from winter import __version__
from winter.errors import LexError, line_col
from winter.lexer import scan
from winter.tokens import TokenType

logger = logging.getLogger(__name__)

server = LanguageServer("winter-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _range(source: str, offset: int, length: int = 1) -> Range:
    line, col = line_col(source, offset)
    return Range(
        start=Position(line=line - 1, character=col - 1),
        end=Position(line=line - 1, character=col - 1 + length),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish a diagnostic per lexical problem."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        # Hardened scanning consumes each illegal character, so every one is
        # reported once and whitespace runs are not flagged.
        for offset, tok in scan(source, hardened=True):
            if tok.type is TokenType.ILLEGAL:
                diagnostics.append(
                    Diagnostic(
                        range=_range(source, offset),
                        message=f"illegal character {source[offset]!r}",
                        severity=DiagnosticSeverity.Error,
                        source="winter",
                    )
                )
    except LexError as exc:
        diagnostics.append(
            Diagnostic(
                range=_range(source, exc.offset, exc.length),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="winter",
            )
        )

    logger.debug("%s: %d diagnostics", uri, len(diagnostics))
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
