"""
A minimal pygls-based Language Server for Fig.

Features:
- Text synchronization and document store
- Diagnostics: lexer/parser errors and commands with no builtin
- Hover: builtin signature for the command under the cursor
- Completion: every builtin symbol

The buffer is never evaluated; each document gets a static index.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)
from pygls.server import LanguageServer

from fig import __version__
from fig_lsp.indexer import BUILTIN_SIGNATURES, ERROR, DocumentIndex, build_index


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class FigLanguageServer(LanguageServer):
    CMD_NAME = "fig-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}


ls = FigLanguageServer()


def _update(uri: str, text: str) -> DocumentState:
    state = DocumentState(text=text, index=build_index(text))
    ls.documents[uri] = state
    ls.publish_diagnostics(uri, diagnostics_for(state.index))
    return state


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    _update(params.text_document.uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_mk_range(problem.line, problem.col),
            message=problem.message,
            severity=DiagnosticSeverity.Error if problem.severity == ERROR else DiagnosticSeverity.Warning,
            code=problem.kind or None,
            source=FigLanguageServer.CMD_NAME,
        )
        for problem in idx.problems
    ]


# --- Hover ---
def hover_text(idx: DocumentIndex, line: int, col: int) -> Optional[str]:
    ref = idx.command_at(line, col)
    if ref is None:
        return None
    return BUILTIN_SIGNATURES.get(ref.symbol, f"{ref.symbol}  (no builtin)")


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    contents = hover_text(state.index, params.position.line, params.position.character)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(resolve_provider=False))
def on_completion(params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=symbol, kind=CompletionItemKind.Function, detail=signature)
        for symbol, signature in BUILTIN_SIGNATURES.items()
    ]
    return CompletionList(is_incomplete=False, items=items)


def main():
    ls.start_io()


if __name__ == "__main__":
    main()
