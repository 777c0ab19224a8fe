from typing import List

from ..storage import Folder
from ..utility import strip_wal_file_name
from .interactor import GenericMetaFetcher
from .model import BackupTime, BackupTimeWithMetadata
from .sentinel import SENTINEL_SUFFIX


__all__ = [
    'get_backup_times',
    'get_backups_with_metadata',
    'NoBackupsFoundError'
]


def get_backup_times(backup_folder: Folder, /) -> List[BackupTime]:
    """Lists the backups in a folder, i.e. all objects which are backup sentinels.

        :return: The backups, in arbitrary order.
        :except NoBackupsFoundError: If the folder contains no backups.
        :except StorageError: If the folder could not be listed.
    """

    backup_times: List[BackupTime] = []
    for storage_object in backup_folder.list_objects():
        if storage_object.name.endswith(SENTINEL_SUFFIX):
            backup_name = storage_object.name[:-len(SENTINEL_SUFFIX)]
            backup_times.append(
                BackupTime(backup_name, storage_object.last_modified, strip_wal_file_name(backup_name)))

    if not backup_times:
        raise NoBackupsFoundError(backup_folder.path)

    return backup_times


def get_backups_with_metadata(backup_folder: Folder, meta_fetcher: GenericMetaFetcher, /) \
        -> List[BackupTimeWithMetadata]:
    """Lists the backups in a folder and reads the metadata of each, one at a time.

        :except NoBackupsFoundError: If the folder contains no backups.
        :except StorageError: If the folder could not be listed or a sentinel could not be read.
        :except SentinelNotFoundError: If a sentinel disappeared after listing.
        :except SentinelParseError: If a sentinel is malformed.
    """

    backups: List[BackupTimeWithMetadata] = []
    for backup_time in get_backup_times(backup_folder):
        metadata = meta_fetcher.fetch(backup_time.backup_name, backup_folder)
        backups.append(BackupTimeWithMetadata(backup_time, metadata))
    return backups


class NoBackupsFoundError(Exception):
    """Raised when listing a backup folder which contains no backups."""

    def __init__(self, folder_path: str) -> None:
        super().__init__(f'No backups found in "{folder_path}"')
        self.folder_path = folder_path
