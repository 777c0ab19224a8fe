from pathlib import Path

from ..engines import handle_restore_point_list, RestorePointMetaFetcher
from .command import add_storage_argument, Command, open_backup_folder


__all__ = [
    'RestorePointListCommand'
]


class RestorePointListCommand(Command):
    """The program command which prints the available Greenplum restore points."""

    COMMAND_STRING = 'restore-point-list'

    def __init__(self, arguments, /) -> None:
        super().__init__(arguments)
        self.storage_path: Path = arguments.storage_dir
        self.pretty: bool = arguments.pretty
        self.json: bool = arguments.json

    def run(self) -> None:
        backup_folder = open_backup_folder(self.storage_path)
        handle_restore_point_list(backup_folder, RestorePointMetaFetcher(), self.pretty, self.json)

    @staticmethod
    def add_arg_subparser(subparser, /) -> None:
        parser = subparser.add_parser(
            RestorePointListCommand.COMMAND_STRING, description='Prints available restore points.',
            help='Prints available restore points.')
        add_storage_argument(parser)
        parser.add_argument('--pretty', action='store_true', help='Prints more readable output.')
        parser.add_argument('--json', action='store_true', help='Prints output in JSON format.')
