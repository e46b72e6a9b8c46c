"""Tests for the --debug token dump."""

from __future__ import annotations

import io

from sqlindent.debug import dump_tokens
from sqlindent.dialects import get_dialect
from sqlindent.lexer import tokenize


def dump(source: str) -> list[str]:
    buf = io.StringIO()
    dump_tokens(tokenize(source, get_dialect()), file=buf)
    return buf.getvalue().splitlines()


class TestDumpTokens:
    def test_one_line_per_token(self) -> None:
        out = dump("SELECT a")
        assert len(out) == 3
        assert out[0].split() == ["0", "RESERVED_TOP_LEVEL", "'SELECT'"]
        assert out[2].split() == ["2", "WORD", "'a'"]

    def test_whitespace_is_summarized(self) -> None:
        out = dump("a \n\n b")
        assert "<4 chars, 2 newlines>" in out[1]

    def test_placeholder_key_shown(self) -> None:
        out = dump(":name")
        assert out[0].split() == ["0", "PLACEHOLDER", "':name'", "key='name'"]

    def test_empty_token_list(self) -> None:
        assert dump("") == []

    def test_defaults_to_stderr(self, capsys) -> None:
        dump_tokens(tokenize("x", get_dialect()))
        assert "WORD" in capsys.readouterr().err
