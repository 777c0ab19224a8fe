from dataclasses import dataclass
import sys
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from ..meta import BackupTimeWithMetadata, GenericMetaFetcher, get_backups_with_metadata, NoBackupsFoundError, \
    SentinelNotFoundError, SentinelParseError
from ..storage import Folder, StorageError
from ..utility import fatal_on_error, print_info
from .render import write_backup_list_as


__all__ = [
    'default_handle_backup_list',
    'handle_backup_list',
    'ListLogging',
    'NO_BACKUPS_MESSAGE',
    'sort_backup_time_with_metadata'
]


NO_BACKUPS_MESSAGE = 'No backups found'


@dataclass(frozen=True)
class ListLogging:
    """Where `handle_backup_list()` reports to."""

    info: Callable[[str], None] = print_info
    """Receives informational messages."""

    fatal_on_error: Callable[[Optional[Exception]], None] = fatal_on_error
    """Always called once with the retrieval error, or `None`. Expected to terminate the process if given an error."""


def sort_backup_time_with_metadata(backups: Sequence[BackupTimeWithMetadata], /) -> List[BackupTimeWithMetadata]:
    """Sorts backups by start time, oldest first. Backups without a start time come first.
        The sort is stable, so backups with equal start times keep their relative order.

        :return: A new sorted list.
    """

    # The flag keeps None from being compared with datetimes.
    return sorted(backups, key=lambda backup: (backup.start_time is not None, backup.start_time))


def handle_backup_list(get_backups: Callable[[], Tuple[List[BackupTimeWithMetadata], Optional[Exception]]],
                       write_backup_list: Callable[[List[BackupTimeWithMetadata]], None],
                       logging: ListLogging = ListLogging()) -> None:
    """Retrieves backups, then writes them sorted by start time.

        :param get_backups: Retrieves the backups. Returns the backups and the error which occurred, if any. "No
            backups" should be reported as an empty list with no error.
        :param write_backup_list: Renders the backups. Only called if there are backups and no error occurred.
        :param logging: Reports "no backups" and errors. If `get_backups` fails, the error is passed to
            `logging.fatal_on_error` and nothing is written, even if some backups were returned.
    """

    backups, error = get_backups()
    if len(backups) == 0:
        logging.info(NO_BACKUPS_MESSAGE)

    logging.fatal_on_error(error)
    if error is not None:
        return

    if len(backups) > 0:
        write_backup_list(sort_backup_time_with_metadata(backups))


def default_handle_backup_list(backup_folder: Folder, meta_fetcher: GenericMetaFetcher, pretty: bool,
                               json_output: bool, logging: ListLogging = ListLogging(),
                               output: Optional[TextIO] = None) -> None:
    """Prints the backups in a folder, together with their metadata. Failing to read any backup's metadata is fatal.

        :param backup_folder: The folder containing the backup sentinels.
        :param meta_fetcher: Reads backup metadata for the database engine the backups were made by.
        :param pretty: Print a human-readable table, or indented JSON if `json_output` is also set.
        :param json_output: Print JSON.
        :param output: Where to print to. Defaults to stdout.
    """

    def get_backups() -> Tuple[List[BackupTimeWithMetadata], Optional[Exception]]:
        try:
            return get_backups_with_metadata(backup_folder, meta_fetcher), None
        except NoBackupsFoundError:
            return [], None
        except (SentinelNotFoundError, SentinelParseError, StorageError) as e:
            return [], e

    def write_backups(backups: Sequence[BackupTimeWithMetadata]) -> None:
        write_backup_list_as(backups, output or sys.stdout, pretty, json_output)

    handle_backup_list(get_backups, write_backups, logging)
