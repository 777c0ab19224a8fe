from datetime import datetime
import json
from typing import Any, Callable, Dict, NoReturn, Optional, TypeVar

from ..storage import Folder, ObjectNotFoundError, StorageError
from ..utility import parse_iso_time


__all__ = [
    'BackupMetadataModifyError',
    'BASE_BACKUP_PATH',
    'fetch_json_object',
    'fetch_sentinel_json',
    'modify_backup_sentinel',
    'SENTINEL_SUFFIX',
    'sentinel_name_from_backup',
    'set_sentinel_field',
    'SentinelFields',
    'SentinelNotFoundError',
    'SentinelParseError',
    'upload_sentinel_json'
]


BASE_BACKUP_PATH = 'basebackups_005'
"""The name of the folder, within the storage root, which contains the backups and their sentinels."""

SENTINEL_SUFFIX = '_backup_stop_sentinel.json'
"""Suffix appended to a backup's name to get the name of its sentinel object."""


def sentinel_name_from_backup(backup_name: str, /) -> str:
    return backup_name + SENTINEL_SUFFIX


def fetch_json_object(backup_folder: Folder, object_name: str, backup_name: str, /) -> Dict[str, Any]:
    """Reads a metadata object of a backup (or restore point) as a JSON object.

        :param backup_name: The backup the object belongs to, for error reporting.
        :except SentinelNotFoundError: If the object doesn't exist.
        :except SentinelParseError: If the object is not a JSON object.
        :except StorageError: If the object could not be read.
    """

    try:
        content = backup_folder.get_object(object_name)
    except ObjectNotFoundError as e:
        raise SentinelNotFoundError(backup_name, object_name) from e

    try:
        json_data = json.loads(content.decode('utf8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SentinelParseError(object_name, str(e)) from e

    if not isinstance(json_data, dict):
        raise SentinelParseError(object_name, 'Expected an object')

    return json_data


def fetch_sentinel_json(backup_folder: Folder, backup_name: str, /) -> Dict[str, Any]:
    """Reads a backup's sentinel as a JSON object.

        :except SentinelNotFoundError: If the sentinel doesn't exist.
        :except SentinelParseError: If the sentinel is not a JSON object.
        :except StorageError: If the sentinel could not be read.
    """

    return fetch_json_object(backup_folder, sentinel_name_from_backup(backup_name), backup_name)


def upload_sentinel_json(backup_folder: Folder, backup_name: str, json_data: Dict[str, Any], /) -> None:
    """Writes a backup's sentinel, replacing any existing one.

        :except StorageError: If the sentinel could not be written.
    """

    content = json.dumps(json_data, indent=4, ensure_ascii=False).encode('utf8')
    backup_folder.put_object(sentinel_name_from_backup(backup_name), content)


class SentinelFields:
    """Takes typed fields out of a sentinel JSON object. Fields not taken are left in `remaining`."""

    def __init__(self, object_name: str, json_data: Dict[str, Any], /) -> None:
        self.object_name = object_name
        self.remaining = dict(json_data)

    def parse_error(self, reason: str, e: Optional[Exception] = None, /) -> NoReturn:
        if e is None:
            raise SentinelParseError(self.object_name, reason)
        else:
            raise SentinelParseError(self.object_name, reason) from e

    def take_str(self, key: str, /) -> str:
        value = self.remaining.pop(key, None)
        if value is None:
            return ''
        if not isinstance(value, str):
            self.parse_error(f'Field "{key}" must be a string')
        return value

    def take_int(self, key: str, /) -> int:
        value = self.remaining.pop(key, None)
        if value is None:
            return 0
        # bool is a subclass of int.
        if not isinstance(value, int) or isinstance(value, bool):
            self.parse_error(f'Field "{key}" must be an integer')
        return value

    def take_bool(self, key: str, /) -> bool:
        value = self.remaining.pop(key, None)
        if value is None:
            return False
        if not isinstance(value, bool):
            self.parse_error(f'Field "{key}" must be a boolean')
        return value

    def take_time(self, key: str, /) -> Optional[datetime]:
        value = self.remaining.pop(key, None)
        if value is None:
            return None
        try:
            return parse_iso_time(value)
        except ValueError as e:
            self.parse_error(f'Field "{key}" must be an ISO-8601 date string', e)

    def take_any(self, key: str, /) -> Any:
        return self.remaining.pop(key, None)


SentinelT = TypeVar('SentinelT')


def modify_backup_sentinel(backup_name: str, backup_folder: Folder,
                           read_sentinel: Callable[[Folder, str], SentinelT],
                           write_sentinel: Callable[[Folder, str, SentinelT], None],
                           modifier: Callable[[SentinelT], SentinelT]) -> None:
    """Reads a backup's sentinel, applies `modifier` to it, and writes the result back.

        There is no locking or conditional write: if the sentinel is modified concurrently, the last write wins.

        :param read_sentinel: Reads the engine specific sentinel of a backup, given the folder and backup name.
        :param write_sentinel: Writes the engine specific sentinel of a backup.
        :param modifier: Returns the modified sentinel.
        :except BackupMetadataModifyError: If the sentinel could not be read or written.
    """

    try:
        sentinel = read_sentinel(backup_folder, backup_name)
    except (SentinelNotFoundError, SentinelParseError, StorageError) as e:
        raise BackupMetadataModifyError(f'Failed to fetch the existing backup metadata for modifying: {e}') from e

    sentinel = modifier(sentinel)

    try:
        write_sentinel(backup_folder, backup_name, sentinel)
    except StorageError as e:
        raise BackupMetadataModifyError(f'Failed to upload the modified metadata to the storage: {e}') from e


def set_sentinel_field(backup_name: str, backup_folder: Folder, key: str, value: Any,
                       parse_sentinel: Callable[[str, Dict[str, Any]], Any]) -> None:
    """Sets one field of a backup's sentinel. All other fields are written back exactly as stored.

        :param parse_sentinel: The engine specific sentinel parser, given the object name and JSON. Only used to reject
            malformed sentinels, its result is discarded.
        :except BackupMetadataModifyError: If the sentinel could not be read, is malformed, or could not be written.
    """

    def read_sentinel_json(folder: Folder, name: str, /) -> Dict[str, Any]:
        json_data = fetch_sentinel_json(folder, name)
        parse_sentinel(sentinel_name_from_backup(name), json_data)
        return json_data

    modify_backup_sentinel(backup_name, backup_folder, read_sentinel_json, upload_sentinel_json,
                           lambda json_data: {**json_data, key: value})


class SentinelNotFoundError(Exception):
    """Raised when a backup has no sentinel."""

    def __init__(self, backup_name: str, object_name: str) -> None:
        super().__init__(f'Backup "{backup_name}" not found: sentinel "{object_name}" does not exist')
        self.backup_name = backup_name
        self.object_name = object_name


class SentinelParseError(Exception):
    """Raised when a backup sentinel cannot be parsed due to invalid format."""

    def __init__(self, object_name: str, reason: str) -> None:
        super().__init__(f'Failed to parse backup sentinel "{object_name}": {reason}')
        self.object_name = object_name
        self.reason = reason


class BackupMetadataModifyError(Exception):
    """Raised when modifying a backup's metadata fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
