from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..meta import fetch_sentinel_json, GenericMetadata, GenericMetaInteractor, NopIncrementDetailsFetcher, \
    sentinel_name_from_backup, SentinelFields, set_sentinel_field
from ..storage import Folder


__all__ = [
    'MongoBackupSentinel',
    'MongoMetaInteractor',
    'parse_mongo_sentinel',
    'read_mongo_sentinel'
]


@dataclass
class MongoBackupSentinel:
    """The fields of a MongoDB backup sentinel which are known to this tool. Others (e.g. "MongoMeta") are ignored."""

    backup_name: str = ''
    backup_type: str = ''
    hostname: str = ''
    start_local_time: Optional[datetime] = None
    finish_local_time: Optional[datetime] = None
    user_data: Any = None
    permanent: bool = False
    uncompressed_size: int = 0
    compressed_size: int = 0


def parse_mongo_sentinel(object_name: str, json_data: Dict[str, Any], /) -> MongoBackupSentinel:
    """Parses the sentinel of a MongoDB backup. Missing fields take zero values.

        :except SentinelParseError: If a known field has the wrong type.
    """

    fields = SentinelFields(object_name, json_data)
    return MongoBackupSentinel(
        backup_name=fields.take_str('BackupName'),
        backup_type=fields.take_str('BackupType'),
        hostname=fields.take_str('Hostname'),
        start_local_time=fields.take_time('StartLocalTime'),
        finish_local_time=fields.take_time('FinishLocalTime'),
        user_data=fields.take_any('UserData'),
        permanent=fields.take_bool('Permanent'),
        uncompressed_size=fields.take_int('UncompressedSize'),
        compressed_size=fields.take_int('CompressedSize')
    )


def read_mongo_sentinel(backup_folder: Folder, backup_name: str, /) -> MongoBackupSentinel:
    """Reads the sentinel of a MongoDB backup.

        :except SentinelNotFoundError: If the sentinel doesn't exist.
        :except SentinelParseError: If the sentinel is malformed.
        :except StorageError: If the sentinel could not be read.
    """

    return parse_mongo_sentinel(sentinel_name_from_backup(backup_name), fetch_sentinel_json(backup_folder, backup_name))


class MongoMetaInteractor(GenericMetaInteractor):
    """Backup metadata access for MongoDB backups."""

    def fetch(self, backup_name: str, backup_folder: Folder, /) -> GenericMetadata:
        sentinel = read_mongo_sentinel(backup_folder, backup_name)
        return GenericMetadata(
            backup_name=backup_name,
            uncompressed_size=sentinel.uncompressed_size,
            compressed_size=sentinel.compressed_size,
            hostname=sentinel.hostname,
            start_time=sentinel.start_local_time,
            finish_time=sentinel.finish_local_time,
            is_permanent=sentinel.permanent,
            increment_details=NopIncrementDetailsFetcher(),
            user_data=sentinel.user_data
        )

    def set_user_data(self, backup_name: str, backup_folder: Folder, user_data: Any, /) -> None:
        set_sentinel_field(backup_name, backup_folder, 'UserData', user_data, parse_mongo_sentinel)

    def set_is_permanent(self, backup_name: str, backup_folder: Folder, is_permanent: bool, /) -> None:
        set_sentinel_field(backup_name, backup_folder, 'Permanent', is_permanent, parse_mongo_sentinel)
