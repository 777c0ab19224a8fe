from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..meta import fetch_sentinel_json, GenericMetadata, GenericMetaInteractor, NopIncrementDetailsFetcher, \
    sentinel_name_from_backup, SentinelFields, set_sentinel_field
from ..storage import Folder


__all__ = [
    'parse_sqlserver_sentinel',
    'read_sqlserver_sentinel',
    'SQLServerBackupSentinel',
    'SQLServerMetaInteractor'
]


@dataclass
class SQLServerBackupSentinel:
    """The fields of an SQL Server backup sentinel which are known to this tool."""

    start_local_time: Optional[datetime] = None
    stop_local_time: Optional[datetime] = None
    is_permanent: bool = False
    user_data: Any = None


def parse_sqlserver_sentinel(object_name: str, json_data: Dict[str, Any], /) -> SQLServerBackupSentinel:
    fields = SentinelFields(object_name, json_data)
    return SQLServerBackupSentinel(
        start_local_time=fields.take_time('StartLocalTime'),
        stop_local_time=fields.take_time('StopLocalTime'),
        is_permanent=fields.take_bool('IsPermanent'),
        user_data=fields.take_any('UserData')
    )


def read_sqlserver_sentinel(backup_folder: Folder, backup_name: str, /) -> SQLServerBackupSentinel:
    return parse_sqlserver_sentinel(sentinel_name_from_backup(backup_name),
                                    fetch_sentinel_json(backup_folder, backup_name))


class SQLServerMetaInteractor(GenericMetaInteractor):
    """Backup metadata access for SQL Server backups. These sentinels carry no host or size information."""

    def fetch(self, backup_name: str, backup_folder: Folder, /) -> GenericMetadata:
        sentinel = read_sqlserver_sentinel(backup_folder, backup_name)
        return GenericMetadata(
            backup_name=backup_name,
            start_time=sentinel.start_local_time,
            finish_time=sentinel.stop_local_time,
            is_permanent=sentinel.is_permanent,
            increment_details=NopIncrementDetailsFetcher(),
            user_data=sentinel.user_data
        )

    def set_user_data(self, backup_name: str, backup_folder: Folder, user_data: Any, /) -> None:
        set_sentinel_field(backup_name, backup_folder, 'UserData', user_data, parse_sqlserver_sentinel)

    def set_is_permanent(self, backup_name: str, backup_folder: Folder, is_permanent: bool, /) -> None:
        set_sentinel_field(backup_name, backup_folder, 'IsPermanent', is_permanent, parse_sqlserver_sentinel)
