"""Minimal LSP server for calc sources: lexing diagnostics only."""

from __future__ import annotations

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

from calclex import __version__
from calclex.lexer import scan

server = LanguageServer("calclex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    result = scan(doc.source)
    diagnostics: list[Diagnostic] = []

    if result.error is not None:
        # LexError positions are 1-based code points; the client counts in its
        # negotiated encoding (UTF-16 by default)
        line = result.error.position.line - 1
        col = result.error.position.column - 1
        lines = doc.source.split("\n")
        diagnostics.append(
            Diagnostic(
                range=doc.position_codec.range_to_client_units(
                    lines,
                    Range(
                        start=Position(line=line, character=col),
                        end=Position(line=line, character=col + 1),
                    ),
                ),
                message=result.error.message,
                severity=DiagnosticSeverity.Error,
                source="calclex",
            )
        )

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
