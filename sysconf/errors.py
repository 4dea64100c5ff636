"""Fatal error codes and the exception that carries them."""

from __future__ import annotations

import enum
from typing import NoReturn

_FATAL_PREFIX = "**** Fatal translation error: "


class AbortCode(enum.IntEnum):
    """Standard fatal error codes."""

    INVALID_COMMAND_LINE_ARGS = -1
    RUNTIME_ERROR = -2
    UNIMPLEMENTED_FEATURE = -3

    def message(self) -> str:
        """Return the human readable description of this code."""
        return _MESSAGES[self]


_MESSAGES = {
    AbortCode.INVALID_COMMAND_LINE_ARGS: "Invalid command line arguments",
    AbortCode.RUNTIME_ERROR: "Runtime error",
    AbortCode.UNIMPLEMENTED_FEATURE: "Unimplemented feature",
}


class TranslationAbort(Exception):
    """A fatal error; the program should report it and exit."""

    def __init__(self, code: AbortCode | int, detail: str | None = None) -> None:
        self.code = AbortCode(code)
        self.detail = detail
        super().__init__(f"{_FATAL_PREFIX}{self.code.message()}")

    @property
    def exit_status(self) -> int:
        """The process exit status, as the operating system reports it."""
        return self.code.value & 0xFF


def abort_translation(code: AbortCode | int, detail: str | None = None) -> NoReturn:
    """Raise a TranslationAbort for ``code`` with an optional detail text."""
    raise TranslationAbort(code, detail)