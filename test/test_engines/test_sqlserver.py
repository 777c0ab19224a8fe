from datetime import datetime, timezone

import pytest

from backup_catalog.engines.sqlserver import SQLServerMetaInteractor
from backup_catalog.meta import BackupMetadataModifyError, GenericMetadata, SentinelNotFoundError

from helpers import get_json_object, put_json_object


SENTINEL_NAME = 'base_20220321T000000Z_backup_stop_sentinel.json'
BACKUP_NAME = 'base_20220321T000000Z'


def test_fetch(memory_folder) -> None:
    put_json_object(memory_folder, SENTINEL_NAME, {
        'Databases': ['master', 'sales'],
        'StartLocalTime': '2022-03-21T00:00:00.123456789+03:00',
        'StopLocalTime': '2022-03-21T00:30:00+03:00',
        'IsPermanent': True,
        'UserData': {'ticket': 1234}
    })

    actual = SQLServerMetaInteractor().fetch(BACKUP_NAME, memory_folder)

    expected = GenericMetadata(
        backup_name=BACKUP_NAME,
        start_time=datetime(2022, 3, 20, 21, 0, 0, 123456, tzinfo=timezone.utc),
        finish_time=datetime(2022, 3, 20, 21, 30, 0, tzinfo=timezone.utc),
        is_permanent=True,
        user_data={'ticket': 1234}
    )
    assert actual == expected
    assert actual.hostname == ''
    assert actual.uncompressed_size == 0


def test_fetch_nonexistent(memory_folder) -> None:
    with pytest.raises(SentinelNotFoundError):
        SQLServerMetaInteractor().fetch(BACKUP_NAME, memory_folder)


def test_set_is_permanent(memory_folder) -> None:
    put_json_object(memory_folder, SENTINEL_NAME, {
        'Databases': ['master'],
        'StartLocalTime': '2022-03-21T00:00:00Z',
        'IsPermanent': True
    })

    SQLServerMetaInteractor().set_is_permanent(BACKUP_NAME, memory_folder, False)

    assert not SQLServerMetaInteractor().fetch(BACKUP_NAME, memory_folder).is_permanent
    json_data = get_json_object(memory_folder, SENTINEL_NAME)
    assert json_data['Databases'] == ['master']
    assert json_data['IsPermanent'] is False


def test_set_user_data(memory_folder) -> None:
    put_json_object(memory_folder, SENTINEL_NAME, {'StartLocalTime': '2022-03-21T00:00:00Z'})

    SQLServerMetaInteractor().set_user_data(BACKUP_NAME, memory_folder, ['a', 1, None])
    backup = SQLServerMetaInteractor().fetch(BACKUP_NAME, memory_folder)

    assert backup.user_data == ['a', 1, None]
    assert backup.start_time == datetime(2022, 3, 21, 0, 0, 0, tzinfo=timezone.utc)
    assert backup.finish_time is None


def test_set_user_data_invalid_sentinel(memory_folder) -> None:
    memory_folder.put_object(SENTINEL_NAME, b'{"StartLocalTime": 17}')
    with pytest.raises(BackupMetadataModifyError):
        SQLServerMetaInteractor().set_user_data(BACKUP_NAME, memory_folder, 'x')
    assert memory_folder.get_object(SENTINEL_NAME) == b'{"StartLocalTime": 17}'


def test_set_is_permanent_keeps_other_fields_verbatim(memory_folder) -> None:
    json_data = {
        'StartLocalTime': '2022-03-21T10:11:12.123456789+03:00',
        'StopLocalTime': '0001-01-01T00:00:00Z',
        'IsPermanent': False
    }
    put_json_object(memory_folder, SENTINEL_NAME, json_data)

    SQLServerMetaInteractor().set_is_permanent(BACKUP_NAME, memory_folder, True)

    assert get_json_object(memory_folder, SENTINEL_NAME) == {
        'StartLocalTime': '2022-03-21T10:11:12.123456789+03:00',
        'StopLocalTime': '0001-01-01T00:00:00Z',
        'IsPermanent': True
    }


def test_set_user_data_adds_only_user_data(memory_folder) -> None:
    put_json_object(memory_folder, SENTINEL_NAME, {'Databases': ['master']})

    SQLServerMetaInteractor().set_user_data(BACKUP_NAME, memory_folder, {'ticket': 1})

    assert get_json_object(memory_folder, SENTINEL_NAME) == {'Databases': ['master'], 'UserData': {'ticket': 1}}
