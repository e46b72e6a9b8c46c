"""Minimal LSP server for sqlindent: whole-document formatting."""

from __future__ import annotations

import re

from lsprotocol.types import (
    TEXT_DOCUMENT_FORMATTING,
    DocumentFormattingParams,
    FormattingOptions,
    Position,
    Range,
    TextEdit,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from sqlindent import __version__
from sqlindent.dialects import Language, get_dialect
from sqlindent.formatter import Formatter

server = LanguageServer(
    "sqlindent-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)

# Only these end a line in LSP positions
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Editor language ids -> dialect
LANGUAGE_IDS: dict[str, Language] = {
    "sql": Language.SQL,
    "db2": Language.DB2,
    "n1ql": Language.N1QL,
    "plsql": Language.PLSQL,
    "pl/sql": Language.PLSQL,
    "oracle": Language.PLSQL,
    "snowflake": Language.SNOWFLAKE,
    "snowflake-sql": Language.SNOWFLAKE,
}


def _indent_for(options: FormattingOptions) -> str:
    if options.insert_spaces:
        return " " * options.tab_size
    return "\t"


def _format_document(ls: LanguageServer, params: DocumentFormattingParams) -> list[TextEdit]:
    """Format a whole document; returns no edits when nothing changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    source = doc.source
    language = LANGUAGE_IDS.get((doc.language_id or "").lower(), Language.SQL)

    formatter = Formatter(get_dialect(language), indent=_indent_for(params.options))
    formatted = formatter.format(source)
    if source.endswith("\n"):
        formatted += "\n"
    if formatted == source:
        return []

    lines = _LINE_BREAK.split(source)
    end = Position(line=len(lines) - 1, character=len(lines[-1]))
    return [TextEdit(range=Range(start=Position(line=0, character=0), end=end), new_text=formatted)]


@server.feature(TEXT_DOCUMENT_FORMATTING)
def formatting(ls: LanguageServer, params: DocumentFormattingParams) -> list[TextEdit]:
    return _format_document(ls, params)


def main() -> None:
    server.start_io()
