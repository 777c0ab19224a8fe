import sys
from typing import Optional

from ..exception import EXIT_CODE_GENERAL_ERROR


__all__ = [
    'fatal_on_error',
    'print_error',
    'print_info',
    'print_warning'
]


# Diagnostics all go to stderr, stdout is reserved for listings.


def print_info(message: str) -> None:
    """Prints an informational message to stderr."""

    print(f'INFO: {message}', file=sys.stderr)


def print_error(message: str) -> None:
    """Prints an error message to stderr. Should be used for fatal errors."""

    print(f'ERROR: {message}', file=sys.stderr)


def print_warning(message: str) -> None:
    """Prints a warning message to stderr. Should be used for nonfatal errors."""

    print(f'WARNING: {message}', file=sys.stderr)


def fatal_on_error(error: Optional[BaseException]) -> None:
    """Does nothing if `error` is `None`. Otherwise prints the error and terminates the process with
        `EXIT_CODE_GENERAL_ERROR`."""

    if error is not None:
        print_error(str(error))
        sys.exit(EXIT_CODE_GENERAL_ERROR)
