from pathlib import Path

from ..exception import CommandRuntimeError
from ..meta import BackupMetadataModifyError
from .command import add_engine_argument, add_storage_argument, Command, get_engine_interactor, open_backup_folder


__all__ = [
    'BackupMarkCommand'
]


class BackupMarkCommand(Command):
    """The program command which marks a backup as permanent (exempt from retention) or impermanent."""

    COMMAND_STRING = 'backup-mark'

    def __init__(self, arguments, /) -> None:
        """
            :param arguments: The parsed command line arguments object acquired from argparse.
        """

        super().__init__(arguments)
        self.storage_path: Path = arguments.storage_dir
        self.backup_name: str = arguments.backup_name
        self.engine: str = arguments.engine
        self.is_permanent: bool = not arguments.impermanent

    def run(self) -> None:
        """Executes the backup mark command.

            :except CommandError: If the storage directory is invalid or the backup could not be marked.
        """

        backup_folder = open_backup_folder(self.storage_path)
        interactor = get_engine_interactor(self.engine)
        try:
            interactor.set_is_permanent(self.backup_name, backup_folder, self.is_permanent)
        except BackupMetadataModifyError as e:
            raise CommandRuntimeError(str(e)) from e

        mark = 'permanent' if self.is_permanent else 'impermanent'
        print(f'Marked backup {self.backup_name} as {mark}')

    @staticmethod
    def add_arg_subparser(subparser, /) -> None:
        """Adds the command line argument subparser for the backup mark command."""

        parser = subparser.add_parser(
            BackupMarkCommand.COMMAND_STRING, description='Marks a backup as permanent or impermanent.',
            help='Marks a backup as permanent or impermanent.')
        add_storage_argument(parser)
        parser.add_argument('backup_name', action='store', help='Name of the backup to mark.')
        add_engine_argument(parser)
        parser.add_argument(
            '--impermanent', '-i', action='store_true',
            help='Marks the backup as impermanent, instead of permanent.')
