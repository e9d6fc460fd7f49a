"""Exception hierarchy for the code meta transform."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .hast import Position


class CodePropsError(Exception):
    """Base exception for code meta processing failures."""


class ConfigurationError(CodePropsError, ValueError):
    """Raised when the transform receives invalid options."""


class MetaSyntaxError(CodePropsError):
    """Raised when a code meta string is not valid JSX attribute syntax."""

    def __init__(
        self,
        message: str,
        *,
        meta: str,
        column: int | None = None,
        position: Position | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.meta = meta
        self.column = column
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        start = self.position.start
        return f"{start.line}:{start.column}: {self.message}"


class StyleSyntaxError(CodePropsError):
    """Raised when an inline ``style`` property cannot be decoded."""


__all__ = [
    "CodePropsError",
    "ConfigurationError",
    "MetaSyntaxError",
    "StyleSyntaxError",
]
