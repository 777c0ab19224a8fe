from datetime import datetime, timezone

import pytest

from backup_catalog.storage import MemoryFolder, ObjectNotFoundError, StorageObject


def test_put_get_object(memory_folder) -> None:
    memory_folder.put_object('foo', b'bar')
    assert memory_folder.get_object('foo') == b'bar'


def test_get_object_nonexistent(memory_folder) -> None:
    with pytest.raises(ObjectNotFoundError):
        memory_folder.get_object('foo')


def test_sub_folders_share_storage(memory_folder) -> None:
    sub_folder = memory_folder.get_sub_folder('basebackups_005')
    sub_folder.put_object('backup', b'data')

    assert memory_folder.get_sub_folder('basebackups_005').get_object('backup') == b'data'
    with pytest.raises(ObjectNotFoundError):
        memory_folder.get_object('backup')
    assert sub_folder.path == 'memory://basebackups_005/'


def test_list_objects(memory_folder) -> None:
    memory_folder.put_object('top', b'1')
    memory_folder.get_sub_folder('sub').put_object('nested', b'22')
    memory_folder.get_sub_folder('sub').get_sub_folder('deeper').put_object('deepest', b'333')

    time = datetime(2022, 3, 21, 12, 0, 0, tzinfo=timezone.utc)
    assert memory_folder.list_objects() == [StorageObject('top', time, 1)]
    assert memory_folder.get_sub_folder('sub').list_objects() == [StorageObject('nested', time, 2)]


def test_list_objects_empty() -> None:
    assert MemoryFolder().list_objects() == []
