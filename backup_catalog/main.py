import argparse
import sys
from typing import Mapping, NoReturn, Sequence

from .commands import BackupListCommand, BackupMarkCommand, BackupUserDataCommand, Command, RestorePointListCommand
from .exception import CommandArgumentError, CommandError, EXIT_CODE_GENERAL_ERROR, EXIT_CODE_INVALID_ARGUMENTS, \
    EXIT_CODE_LOGIC_ERROR, EXIT_CODE_SUCCESS
from .utility import print_error


__all__ = [
    'api_entrypoint',
    'script_entrypoint',
    'script_main'
]


def script_entrypoint() -> NoReturn:
    """Console script entrypoint. Runs the command given in `sys.argv` and exits with its exit code."""

    exit_code = script_main(sys.argv)
    sys.exit(exit_code)


def script_main(arguments: Sequence[str], /) -> int:
    """Runs a command line and maps its outcome to an exit code, printing any error to stderr.

        Note that listing commands terminate the process themselves (with `EXIT_CODE_GENERAL_ERROR`) if the backups
        cannot be listed.

        :param arguments: Full command line, including the program name.
        :return: One of the `EXIT_CODE_*` constants.
    """

    # Drop the program name.
    arguments = arguments[1:]

    try:
        api_entrypoint(arguments)
        return EXIT_CODE_SUCCESS
    except CommandArgumentError as e:
        print(e.usage, file=sys.stderr)
        print(e.message, file=sys.stderr)
        return EXIT_CODE_INVALID_ARGUMENTS
    except CommandError as e:
        print_error(str(e))
        return EXIT_CODE_GENERAL_ERROR
    except Exception as e:
        print_error(f'Unhandled exception: {repr(e)}')
        return EXIT_CODE_LOGIC_ERROR


def api_entrypoint(arguments: Sequence[str], /) -> None:
    """Parses a command line and runs the selected command. For use from Python code.

        :param arguments: Command line without the program name.
        :except CommandArgumentError: If the command line arguments are invalid.
        :except CommandError: If the command fails.
    """

    arg_parser = get_argument_parser()

    parsed_arguments = arg_parser.parse_args(arguments)

    command_class = COMMAND_CLASS_MAP[parsed_arguments.command]
    command_instance = command_class(parsed_arguments)
    command_instance.run()


def get_argument_parser() -> argparse.ArgumentParser:
    """Builds the parser for the backup catalog command line, one subcommand per entry of `COMMAND_CLASSES`."""

    arg_parser = ArgumentParser('backup_catalog', description='Backup metadata listing and editing tool.')
    arg_subparser = arg_parser.add_subparsers(title='commands', required=True, dest='command')

    for cls in COMMAND_CLASSES:
        cls.add_arg_subparser(arg_subparser)

    return arg_parser


class ArgumentParser(argparse.ArgumentParser):
    """Parser which reports bad arguments as `CommandArgumentError` rather than exiting, so `script_main()` chooses the
        exit code."""

    def error(self, message: str) -> NoReturn:
        full_message = f'{self.prog}: error: {message}'
        raise CommandArgumentError(full_message, self.format_usage())


COMMAND_CLASSES: Sequence[type[Command]] = (
    BackupListCommand,
    BackupMarkCommand,
    BackupUserDataCommand,
    RestorePointListCommand
)


COMMAND_CLASS_MAP: Mapping[str, type[Command]] = {
    cls.COMMAND_STRING: cls for cls in COMMAND_CLASSES
}
"""Maps from a command's command line string to its class."""
