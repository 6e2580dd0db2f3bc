"""Error types used by applications and the default exit handling."""

from __future__ import annotations

import json
import sys
from typing import Callable, TextIO


class MultiError(Exception):
    """An error that wraps several errors."""

    def __init__(self, *errors: BaseException) -> None:
        super().__init__(*errors)
        self._errors = list(errors)

    def __str__(self) -> str:
        return "\n".join(str(err) for err in self._errors)

    def errors(self) -> list[BaseException]:
        """Return a copy of the wrapped errors."""
        return list(self._errors)


class ExitError(Exception):
    """An error carrying a message and a process exit code."""

    def __init__(self, message: object, exit_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return str(self.message)


class RequiredFlagsError(Exception):
    """Raised when flags marked as required were not given."""

    def __init__(self, missing_flags: list[str]) -> None:
        super().__init__(missing_flags)
        self._missing = list(missing_flags)

    def __str__(self) -> str:
        if len(self._missing) == 1:
            return f"Required flag {json.dumps(self._missing[0], ensure_ascii=False)} not set"
        joined = ", ".join(self._missing)
        return f"Required flags {json.dumps(joined, ensure_ascii=False)} not set"

    def missing_flags(self) -> list[str]:
        """Return the names of the missing flags."""
        return list(self._missing)


def exit_error(message: object, exit_code: int) -> ExitError:
    """Wrap a message and exit code into an error."""
    return ExitError(message, exit_code)


def _exit_code_of(err: BaseException) -> int | None:
    code = getattr(err, "exit_code", None)
    if isinstance(code, int) and not isinstance(code, bool):
        return code
    return None


def _handle_multi_error(multi: MultiError, writer: TextIO) -> int:
    code = 1
    for err in multi.errors():
        if isinstance(err, MultiError):
            code = _handle_multi_error(err, writer)
        elif err is not None:
            print(err, file=writer)
            found = _exit_code_of(err)
            if found is not None:
                code = found
    return code


def handle_exit_coder(
    err: BaseException | None,
    exiter: Callable[[int], object] | None = None,
    err_writer: TextIO | None = None,
) -> None:
    """Print an error carrying an exit code and call the exiter with that code.

    A MultiError has each of its errors printed; the exiter is called with
    the last exit code found, or 1 if none carries one.
    """
    if err is None:
        return
    exit_with = exiter if exiter is not None else sys.exit
    writer = err_writer if err_writer is not None else sys.stderr

    code = _exit_code_of(err)
    if code is not None:
        text = str(err)
        if text:
            print(text, file=writer)
        exit_with(code)
        return

    if isinstance(err, MultiError):
        exit_with(_handle_multi_error(err, writer))