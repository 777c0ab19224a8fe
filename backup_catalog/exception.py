__all__ = [
    'CommandArgumentError',
    'CommandError',
    'CommandRuntimeError',
    'EXIT_CODE_GENERAL_ERROR',
    'EXIT_CODE_INVALID_ARGUMENTS',
    'EXIT_CODE_LOGIC_ERROR',
    'EXIT_CODE_SUCCESS'
]


class CommandError(Exception):
    """A command could not complete. Caught by `script_main()`, which prints `message` and picks the exit code.
        Raise one of the subclasses rather than this class."""

    def __init__(self, message: str) -> None:
        """
            :param message: Printed to stderr as is, so should make sense to someone looking at a backup listing.
        """

        super().__init__(message)
        self.message = message


class CommandArgumentError(CommandError):
    """The command line could not be parsed (e.g. unknown command or malformed user data)."""

    def __init__(self, message: str, usage: str) -> None:
        """
            :param message: What was wrong with the arguments.
            :param usage: Usage line of the command, printed before `message`.
        """

        super().__init__(message)
        self.usage = usage


class CommandRuntimeError(CommandError):
    """The arguments were fine but the backup storage or metadata got in the way (e.g. missing storage directory,
        unreadable sentinel)."""


# Process exit codes.
EXIT_CODE_SUCCESS = 0
EXIT_CODE_INVALID_ARGUMENTS = 1
EXIT_CODE_GENERAL_ERROR = 2
EXIT_CODE_LOGIC_ERROR = -1
