from __future__ import annotations


class TwSizesError(Exception):
    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


__all__ = ["TwSizesError"]
