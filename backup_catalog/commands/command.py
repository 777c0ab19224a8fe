from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from ..engines import ENGINE_INTERACTORS
from ..exception import CommandRuntimeError
from ..meta import BASE_BACKUP_PATH, GenericMetaInteractor
from ..storage import FilesystemFolder, Folder


__all__ = [
    'add_engine_argument',
    'add_storage_argument',
    'Command',
    'DEFAULT_ENGINE',
    'get_engine_interactor',
    'open_backup_folder'
]


DEFAULT_ENGINE = 'greenplum'


class Command(ABC):
    """Contains the functionality for one "command" of the backup catalog tool.
        A command is a specific mode of operation, i.e. listing backups, marking backups, etc. The principle is the same
        as git commands, e.g. "git add", "git commit".
    """

    COMMAND_STRING: ClassVar[str]
    """Name of the command as specified in the command line arguments."""

    def __init__(self, arguments, /) -> None:
        """
            :param arguments: The parsed command line arguments object acquired from argparse.
        """

    @abstractmethod
    def run(self) -> None:
        """Executes the command."""

        raise NotImplementedError()

    @staticmethod
    @abstractmethod
    def add_arg_subparser(subparser, /) -> None:
        """Adds the command line argument subparser for the command."""

        raise NotImplementedError()


def add_storage_argument(parser, /) -> None:
    parser.add_argument('storage_dir', action='store', type=Path, help='Root directory of the backup storage.')


def add_engine_argument(parser, /) -> None:
    parser.add_argument(
        '--engine', action='store', choices=sorted(ENGINE_INTERACTORS), default=DEFAULT_ENGINE,
        help=f'Database engine which made the backups. Default: {DEFAULT_ENGINE}')


def open_backup_folder(storage_path: Path, /) -> Folder:
    """Gets the folder containing the backups, within the storage root directory.

        :except CommandRuntimeError: If the storage directory doesn't exist.
    """

    try:
        if not storage_path.exists():
            raise CommandRuntimeError('Storage directory not found')
        if not storage_path.is_dir():
            raise CommandRuntimeError('Storage directory is not a directory')
    except OSError as e:
        raise CommandRuntimeError(f'Failed to query storage directory: {e}') from e
    return FilesystemFolder(storage_path).get_sub_folder(BASE_BACKUP_PATH)


def get_engine_interactor(engine: str, /) -> GenericMetaInteractor:
    return ENGINE_INTERACTORS[engine]()
