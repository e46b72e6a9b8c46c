"""SQL pretty-printer for several dialects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlindent.dialects import Language
from sqlindent.errors import UnsupportedDialectError

__version__ = "0.1.0"

__all__ = ["Language", "UnsupportedDialectError", "format"]


def format(
    query: str,
    language: Language | str | None = None,
    indent: str = "  ",
    params: Mapping[Any, Any] | Sequence[Any] | None = None,
) -> str:
    """Reformat SQL source text into an indented, readable layout.

    ``language`` selects the dialect (standard SQL when omitted), ``indent`` is
    repeated once per indentation depth, and ``params`` supplies values for
    placeholders: a sequence for positional ``?`` placeholders, or a mapping
    for named and numbered ones.
    """
    from sqlindent.dialects import get_dialect
    from sqlindent.formatter import Formatter

    config = get_dialect(language)
    return Formatter(config, indent=indent, params=params).format(query)
