"""Tests for the LSP server: document formatting edits."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DocumentFormattingParams,
    FormattingOptions,
    TextDocumentIdentifier,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from sqlindent.lsp import LANGUAGE_IDS, _format_document

URI = "file:///test.sql"


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    def put(source: str, language_id: str = "sql") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=URI, language_id=language_id, version=0, text=source)
        )

    return ls, put


def request(tab_size: int = 2, insert_spaces: bool = True) -> DocumentFormattingParams:
    return DocumentFormattingParams(
        text_document=TextDocumentIdentifier(uri=URI),
        options=FormattingOptions(tab_size=tab_size, insert_spaces=insert_spaces),
    )


# ---------------------------------------------------------------------------
# Whole-document edits
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_single_edit_replaces_document(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT a FROM b")
        edits = _format_document(ls, request())

        assert len(edits) == 1
        edit = edits[0]
        assert edit.new_text == "SELECT\n  a\nFROM\n  b"
        assert edit.range.start.line == 0
        assert edit.range.start.character == 0
        # No trailing newline: the range ends after the last character
        assert edit.range.end.line == 0
        assert edit.range.end.character == len("SELECT a FROM b")

    def test_trailing_newline_kept(self, lsp_env) -> None:
        ls, put = lsp_env
        put("select a\nfrom b\n")
        edits = _format_document(ls, request())

        assert len(edits) == 1
        assert edits[0].new_text == "select\n  a\nfrom\n  b\n"
        assert edits[0].range.end.line == 2
        assert edits[0].range.end.character == 0

    def test_already_formatted_gives_no_edits(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT\n  a\nFROM\n  b\n")
        assert _format_document(ls, request()) == []

    def test_crlf_line_breaks(self, lsp_env) -> None:
        ls, put = lsp_env
        put("select a\r\nfrom b\r\n")
        edits = _format_document(ls, request())
        assert edits[0].range.end.line == 2
        assert edits[0].range.end.character == 0

    @pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028"])
    def test_other_separators_do_not_end_lines(self, lsp_env, separator) -> None:
        ls, put = lsp_env
        source = f"SELECT a{separator}FROM b"
        put(source)
        edits = _format_document(ls, request())
        assert edits[0].range.end.line == 0
        assert edits[0].range.end.character == len(source)


# ---------------------------------------------------------------------------
# Formatting options
# ---------------------------------------------------------------------------


class TestOptions:
    def test_tab_size(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT a")
        edits = _format_document(ls, request(tab_size=4))
        assert edits[0].new_text == "SELECT\n    a"

    def test_tabs(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT a")
        edits = _format_document(ls, request(insert_spaces=False))
        assert edits[0].new_text == "SELECT\n\ta"


# ---------------------------------------------------------------------------
# Dialect from languageId
# ---------------------------------------------------------------------------


class TestLanguageId:
    def test_snowflake_paths(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT a:b", language_id="snowflake")
        edits = _format_document(ls, request())
        assert edits[0].new_text == "SELECT\n  a:b"

    def test_unknown_language_id_uses_standard_sql(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT a:b", language_id="plaintext")
        edits = _format_document(ls, request())
        assert edits[0].new_text == "SELECT\n  a :b"

    def test_language_id_is_case_insensitive(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT a:b", language_id="Snowflake")
        edits = _format_document(ls, request())
        assert edits[0].new_text == "SELECT\n  a:b"

    def test_known_ids(self) -> None:
        assert {"sql", "plsql", "snowflake"} <= set(LANGUAGE_IDS)
