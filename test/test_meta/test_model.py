from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Tuple

from backup_catalog.meta import BackupTime, BackupTimeWithMetadata, GenericMetadata, IncrementDetails, \
    IncrementDetailsFetcher, NopIncrementDetailsFetcher


def test_generic_metadata_zero() -> None:
    metadata = GenericMetadata()
    assert metadata.backup_name == ''
    assert metadata.uncompressed_size == 0
    assert metadata.compressed_size == 0
    assert metadata.hostname == ''
    assert metadata.start_time is None
    assert metadata.finish_time is None
    assert not metadata.is_permanent
    assert metadata.increment_details == NopIncrementDetailsFetcher()
    assert metadata.user_data is None


def test_nop_increment_details_fetcher() -> None:
    is_incremental, details = NopIncrementDetailsFetcher().fetch_increment_details()
    assert not is_incremental
    assert details == IncrementDetails('', '', 0)


def test_backup_time_with_metadata_accessors() -> None:
    start_time = datetime(2016, 3, 21, tzinfo=timezone.utc)
    backup = BackupTimeWithMetadata(
        BackupTime('base_000000010000000000000002', None, '000000010000000000000002'),
        GenericMetadata(backup_name='base_000000010000000000000002', start_time=start_time))
    assert backup.backup_name == 'base_000000010000000000000002'
    assert backup.start_time == start_time


def test_backup_time_with_metadata_to_json() -> None:
    backup = BackupTimeWithMetadata(
        BackupTime('base_000000010000000000000002', datetime(2022, 3, 21, 1, 2, 3, tzinfo=timezone.utc),
                   '000000010000000000000002'),
        GenericMetadata(
            backup_name='base_000000010000000000000002',
            uncompressed_size=1000,
            compressed_size=300,
            hostname='db1',
            start_time=datetime(2022, 3, 21, 0, 0, 0, tzinfo=timezone.utc),
            finish_time=None,
            is_permanent=True,
            user_data={'labels': ['weekly']}
        ))
    expected = {
        'backup_name': 'base_000000010000000000000002',
        'time': '2022-03-21T01:02:03+00:00',
        'wal_file_name': '000000010000000000000002',
        'start_time': '2022-03-21T00:00:00+00:00',
        'finish_time': None,
        'hostname': 'db1',
        'uncompressed_size': 1000,
        'compressed_size': 300,
        'is_permanent': True,
        'user_data': {'labels': ['weekly']},
        'is_incremental': False,
        'increment_details': None
    }
    assert backup.to_json() == expected


def test_backup_time_with_metadata_zero_to_json() -> None:
    expected = {
        'backup_name': '',
        'time': None,
        'wal_file_name': '',
        'start_time': None,
        'finish_time': None,
        'hostname': '',
        'uncompressed_size': 0,
        'compressed_size': 0,
        'is_permanent': False,
        'user_data': None,
        'is_incremental': False,
        'increment_details': None
    }
    assert BackupTimeWithMetadata().to_json() == expected


@dataclass(frozen=True)
class DeltaDetailsFetcher(IncrementDetailsFetcher):
    def fetch_increment_details(self) -> Tuple[bool, IncrementDetails]:
        return True, IncrementDetails('base_000000010000000000000004_D_000000010000000000000002',
                                      'base_000000010000000000000002', 2)


def test_backup_time_with_metadata_incremental_to_json() -> None:
    backup = BackupTimeWithMetadata(
        BackupTime('base_000000010000000000000006_D_000000010000000000000004'),
        GenericMetadata(increment_details=DeltaDetailsFetcher()))
    json_data = backup.to_json()
    assert json_data['is_incremental'] is True
    assert json_data['increment_details'] == {
        'increment_from': 'base_000000010000000000000004_D_000000010000000000000002',
        'increment_full_name': 'base_000000010000000000000002',
        'increment_count': 2
    }
