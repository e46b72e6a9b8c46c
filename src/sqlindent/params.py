"""Placeholder substitution."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlindent.tokens import Token

_MISSING = object()


class Params:
    """Substitution values for placeholder tokens.

    ``values`` is None (no substitution), a mapping keyed by placeholder name,
    or a sequence consumed left to right by positional placeholders. The
    position of the next positional value is passed in and returned by
    :meth:`resolve`, so one ``Params`` can serve any number of format calls.
    """

    def __init__(self, values: Mapping[Any, Any] | Sequence[Any] | None = None) -> None:
        if values is not None and (
            isinstance(values, (str, bytes)) or not isinstance(values, (Mapping, Sequence))
        ):
            raise TypeError(
                "params must be a mapping or a sequence of values, "
                f"not {type(values).__name__}"
            )
        self._values = values

    @property
    def values(self) -> Mapping[Any, Any] | Sequence[Any] | None:
        return self._values

    def resolve(self, token: Token, cursor: int = 0) -> tuple[str, int]:
        """Return the replacement text for ``token`` and the next cursor.

        Without values, or when the key or position has no value, the
        placeholder text is returned unchanged.
        """
        if self._values is None:
            return token.value, cursor
        if token.key:
            value = self._lookup(token.key)
        else:
            value = self._lookup(cursor)
            cursor += 1
        if value is _MISSING:
            return token.value, cursor
        return str(value), cursor

    def _lookup(self, key: str | int) -> Any:
        values = self._values
        if isinstance(values, Mapping):
            if key in values:
                return values[key]
            # ?1 may be keyed by 1 or "1"
            alternate: str | int | None = None
            if isinstance(key, int):
                alternate = str(key)
            elif key.isdigit():
                alternate = int(key)
            if alternate is not None and alternate in values:
                return values[alternate]
            return _MISSING

        assert values is not None
        if isinstance(key, str):
            if not key.isdigit():
                return _MISSING
            key = int(key)
        if 0 <= key < len(values):
            return values[key]
        return _MISSING
