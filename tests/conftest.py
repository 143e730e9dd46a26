"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from lsprotocol.types import TextDocumentItem, TextDocumentSyncKind
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and a document loader."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    def put(source: str, uri: str = "file:///test.py") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="python", version=0, text=source)
        )

    return ls, put


@pytest.fixture
def write_input(tmp_path: Path):
    """Return a helper that writes text to a file in tmp_path, byte for byte."""

    def _write(text: str, name: str = "literal.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
