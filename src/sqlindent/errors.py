"""Error types."""

from __future__ import annotations


class UnsupportedDialectError(ValueError):
    """Raised when a language name selects no known dialect."""

    def __init__(self, language: object, known: tuple[str, ...] = ()) -> None:
        self.language = language
        self.known = known
        self.message = f"Unsupported SQL dialect: {language}"
        super().__init__(self.message)

    def format(self) -> str:
        result = f"error: {self.message}"
        if self.known:
            result += f"\n  expected one of: {', '.join(self.known)}"
        return result
