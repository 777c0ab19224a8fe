import argparse
import json
from pathlib import Path
from typing import Any

from ..exception import CommandRuntimeError
from ..meta import BackupMetadataModifyError
from .command import add_engine_argument, add_storage_argument, Command, get_engine_interactor, open_backup_folder


__all__ = [
    'BackupUserDataCommand',
    'parse_user_data'
]


def parse_user_data(argument: str, /) -> Any:
    """Parses user data from the command line. Used as an argparse argument type.

        :except argparse.ArgumentTypeError: If the argument is not valid JSON.
    """

    try:
        return json.loads(argument)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f'User data must be valid JSON: {e}') from e


class BackupUserDataCommand(Command):
    """The program command which replaces the user data of a backup."""

    COMMAND_STRING = 'backup-user-data'

    def __init__(self, arguments, /) -> None:
        """
            :param arguments: The parsed command line arguments object acquired from argparse.
        """

        super().__init__(arguments)
        self.storage_path: Path = arguments.storage_dir
        self.backup_name: str = arguments.backup_name
        self.engine: str = arguments.engine
        self.user_data: Any = arguments.user_data

    def run(self) -> None:
        backup_folder = open_backup_folder(self.storage_path)
        interactor = get_engine_interactor(self.engine)
        try:
            interactor.set_user_data(self.backup_name, backup_folder, self.user_data)
        except BackupMetadataModifyError as e:
            raise CommandRuntimeError(str(e)) from e

        print(f'Updated user data of backup {self.backup_name}')

    @staticmethod
    def add_arg_subparser(subparser, /) -> None:
        parser = subparser.add_parser(
            BackupUserDataCommand.COMMAND_STRING, description='Replaces the user data of a backup.',
            help='Replaces the user data of a backup.')
        add_storage_argument(parser)
        parser.add_argument('backup_name', action='store', help='Name of the backup to modify.')
        parser.add_argument('user_data', action='store', type=parse_user_data, help='New user data, as JSON.')
        add_engine_argument(parser)
