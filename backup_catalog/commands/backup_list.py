from pathlib import Path

from ..listing import default_handle_backup_list
from .command import add_engine_argument, add_storage_argument, Command, get_engine_interactor, open_backup_folder


__all__ = [
    'BackupListCommand'
]


class BackupListCommand(Command):
    """The program command which prints the available backups."""

    COMMAND_STRING = 'backup-list'

    def __init__(self, arguments, /) -> None:
        """
            :param arguments: The parsed command line arguments object acquired from argparse.
        """

        super().__init__(arguments)
        self.storage_path: Path = arguments.storage_dir
        self.engine: str = arguments.engine
        self.pretty: bool = arguments.pretty
        self.json: bool = arguments.json

    def run(self) -> None:
        """Executes the backup list command. Terminates the process if the backups can't be listed.

            :except CommandError: If the storage directory is invalid.
        """

        backup_folder = open_backup_folder(self.storage_path)
        default_handle_backup_list(backup_folder, get_engine_interactor(self.engine), self.pretty, self.json)

    @staticmethod
    def add_arg_subparser(subparser, /) -> None:
        """Adds the command line argument subparser for the backup list command."""

        parser = subparser.add_parser(
            BackupListCommand.COMMAND_STRING, description='Prints available backups.', help='Prints available backups.')
        add_storage_argument(parser)
        add_engine_argument(parser)
        parser.add_argument('--pretty', action='store_true', help='Prints more readable output.')
        parser.add_argument('--json', action='store_true', help='Prints output in JSON format.')
