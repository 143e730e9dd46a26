"""Minimal LSP server for blockstr — range formatting only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_RANGE_FORMATTING,
    DocumentRangeFormattingParams,
    Range,
    TextDocumentSyncKind,
    TextEdit,
)
from pygls.lsp.server import LanguageServer

from blockstr import __version__
from blockstr.reindent import reindent

server = LanguageServer(
    "blockstr-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _range_edits(ls: LanguageServer, uri: str, rng: Range) -> list[TextEdit]:
    """Reindent the selected text and return the replacing edit, if any."""
    doc = ls.workspace.get_text_document(uri)
    # Offsets follow the position encoding negotiated with the client
    start = doc.offset_at_position(rng.start)
    end = doc.offset_at_position(rng.end)

    selected = doc.source[start:end]
    result = reindent(selected)
    if result == selected:
        return []
    return [TextEdit(range=rng, new_text=result)]


@server.feature(TEXT_DOCUMENT_RANGE_FORMATTING)
def range_formatting(
    ls: LanguageServer, params: DocumentRangeFormattingParams
) -> list[TextEdit]:
    return _range_edits(ls, params.text_document.uri, params.range)


def main() -> None:
    server.start_io()
