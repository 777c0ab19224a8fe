from dataclasses import dataclass
from datetime import datetime
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple

from ..listing import handle_backup_list, ListLogging, write_backup_list_as
from ..meta import BackupTime, BackupTimeWithMetadata, fetch_json_object, fetch_sentinel_json, GenericMetadata, \
    GenericMetaFetcher, GenericMetaInteractor, NopIncrementDetailsFetcher, sentinel_name_from_backup, SentinelFields, \
    SentinelNotFoundError, SentinelParseError, set_sentinel_field
from ..storage import Folder, StorageError
from ..utility import print_warning, strip_wal_file_name


__all__ = [
    'get_restore_points',
    'GreenplumBackupSentinel',
    'GreenplumMetaInteractor',
    'handle_restore_point_list',
    'NoRestorePointsFoundError',
    'parse_greenplum_sentinel',
    'read_greenplum_sentinel',
    'RESTORE_POINT_SUFFIX',
    'restore_point_name',
    'RestorePointMetaFetcher'
]


RESTORE_POINT_SUFFIX = '_restore_point.json'
"""Suffix appended to a restore point's name to get the name of its metadata object."""


def restore_point_name(name: str, /) -> str:
    """Gets the name of the metadata object of a restore point."""

    return name + RESTORE_POINT_SUFFIX


@dataclass
class GreenplumBackupSentinel:
    """The fields of a Greenplum backup sentinel which are known to this tool. Others (e.g. "restore_point",
        "segments") are ignored."""

    start_time: Optional[datetime] = None
    finish_time: Optional[datetime] = None
    hostname: str = ''
    is_permanent: bool = False
    user_data: Any = None
    uncompressed_size: int = 0
    compressed_size: int = 0


def parse_greenplum_sentinel(object_name: str, json_data: Dict[str, Any], /) -> GreenplumBackupSentinel:
    fields = SentinelFields(object_name, json_data)
    return GreenplumBackupSentinel(
        start_time=fields.take_time('start_time'),
        finish_time=fields.take_time('finish_time'),
        hostname=fields.take_str('hostname'),
        is_permanent=fields.take_bool('is_permanent'),
        user_data=fields.take_any('user_data'),
        uncompressed_size=fields.take_int('uncompressed_size'),
        compressed_size=fields.take_int('compressed_size')
    )


def read_greenplum_sentinel(backup_folder: Folder, backup_name: str, /) -> GreenplumBackupSentinel:
    return parse_greenplum_sentinel(sentinel_name_from_backup(backup_name),
                                    fetch_sentinel_json(backup_folder, backup_name))


class GreenplumMetaInteractor(GenericMetaInteractor):
    """Backup metadata access for Greenplum backups."""

    def fetch(self, backup_name: str, backup_folder: Folder, /) -> GenericMetadata:
        sentinel = read_greenplum_sentinel(backup_folder, backup_name)
        return GenericMetadata(
            backup_name=backup_name,
            uncompressed_size=sentinel.uncompressed_size,
            compressed_size=sentinel.compressed_size,
            hostname=sentinel.hostname,
            start_time=sentinel.start_time,
            finish_time=sentinel.finish_time,
            is_permanent=sentinel.is_permanent,
            increment_details=NopIncrementDetailsFetcher(),
            user_data=sentinel.user_data
        )

    def set_user_data(self, backup_name: str, backup_folder: Folder, user_data: Any, /) -> None:
        set_sentinel_field(backup_name, backup_folder, 'user_data', user_data, parse_greenplum_sentinel)

    def set_is_permanent(self, backup_name: str, backup_folder: Folder, is_permanent: bool, /) -> None:
        set_sentinel_field(backup_name, backup_folder, 'is_permanent', is_permanent, parse_greenplum_sentinel)


class RestorePointMetaFetcher(GenericMetaFetcher):
    """Reads the metadata of a restore point. Restore points have no size, permanence or user data."""

    def fetch(self, backup_name: str, backup_folder: Folder, /) -> GenericMetadata:
        object_name = restore_point_name(backup_name)
        fields = SentinelFields(object_name, fetch_json_object(backup_folder, object_name, backup_name))
        return GenericMetadata(
            backup_name=backup_name,
            hostname=fields.take_str('hostname'),
            start_time=fields.take_time('start_time'),
            finish_time=fields.take_time('finish_time'),
            increment_details=NopIncrementDetailsFetcher()
        )


def get_restore_points(backup_folder: Folder, /) -> List[BackupTime]:
    """Lists the restore points in a folder.

        :return: The restore points, in arbitrary order.
        :except NoRestorePointsFoundError: If there are no restore points.
        :except StorageError: If the folder could not be listed.
    """

    restore_points: List[BackupTime] = []
    for storage_object in backup_folder.list_objects():
        if storage_object.name.endswith(RESTORE_POINT_SUFFIX):
            name = storage_object.name[:-len(RESTORE_POINT_SUFFIX)]
            restore_points.append(BackupTime(name, storage_object.last_modified, strip_wal_file_name(name)))

    if not restore_points:
        raise NoRestorePointsFoundError(backup_folder.path)

    return restore_points


def handle_restore_point_list(backup_folder: Folder, meta_fetcher: GenericMetaFetcher, pretty: bool, json_output: bool,
                              logging: ListLogging = ListLogging(), output: Optional[TextIO] = None) -> None:
    """Prints the restore points in a folder.

        A restore point whose metadata can't be read is still listed, with zero metadata.

        :param pretty: Print a human-readable table, or indented JSON if `json_output` is also set.
        :param json_output: Print JSON.
        :param output: Where to print to. Defaults to stdout.
    """

    def get_restore_points_with_metadata() -> Tuple[List[BackupTimeWithMetadata], Optional[Exception]]:
        try:
            restore_points = get_restore_points(backup_folder)
        except NoRestorePointsFoundError:
            return [], None
        except StorageError as e:
            return [], e

        results: List[BackupTimeWithMetadata] = []
        for restore_point in restore_points:
            try:
                metadata = meta_fetcher.fetch(restore_point.backup_name, backup_folder)
            except (SentinelNotFoundError, SentinelParseError, StorageError) as e:
                print_warning(f'Failed to read metadata of restore point {restore_point.backup_name}: {e}')
                metadata = GenericMetadata()
            results.append(BackupTimeWithMetadata(restore_point, metadata))
        return results, None

    def write_restore_point_list(restore_points: Sequence[BackupTimeWithMetadata]) -> None:
        write_backup_list_as(restore_points, output or sys.stdout, pretty, json_output)

    handle_backup_list(get_restore_points_with_metadata, write_restore_point_list, logging)


class NoRestorePointsFoundError(Exception):
    """Raised when listing a folder which contains no restore points."""

    def __init__(self, folder_path: str) -> None:
        super().__init__(f'No restore points found in "{folder_path}"')
        self.folder_path = folder_path
