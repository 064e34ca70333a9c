"""Error type raised by the graphics library."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Codes attached to library errors."""

    NO_ERROR = 0
    FILE_ERROR = 1
    BAD_ARGUMENT = 2


class MinGLError(Exception):
    """An error carrying a message and an error code."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NO_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"Exception : {self.message}\nCode      : {int(self.code)}"