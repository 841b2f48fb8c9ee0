"""Exception types raised by lptex."""

from __future__ import annotations


class LptexError(Exception):
    """Base class for lptex failures."""


class DimensionMismatch(LptexError, ValueError):
    """Matrix or row sizes disagree with the objective vector length."""

    def __init__(
        self,
        message: str,
        *,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.expected is None and self.actual is None:
            return f"DimensionMismatch: {self.message}"
        return (
            f"DimensionMismatch(expected={self.expected}, actual={self.actual}): "
            f"{self.message}"
        )


class LPParseError(LptexError, ValueError):
    """LP text input could not be parsed."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        self.message = message
        self.position = position
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.position is None:
            return f"LPParseError: {self.message}"
        return f"LPParseError(token={self.position}): {self.message}"
