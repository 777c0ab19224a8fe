from backup_catalog.utility.wal import strip_wal_file_name


def test_strip_wal_file_name_base_backup() -> None:
    assert strip_wal_file_name('base_000000010000000000000002') == '000000010000000000000002'


def test_strip_wal_file_name_delta_backup() -> None:
    name = 'base_000000010000000000000006_D_000000010000000000000004'
    assert strip_wal_file_name(name) == '000000010000000000000006'


def test_strip_wal_file_name_none() -> None:
    assert strip_wal_file_name('stream_20220321T000000Z') == ''
    assert strip_wal_file_name('') == ''
    # Lowercase hex is not a WAL file name.
    assert strip_wal_file_name('base_00000001000000000000000a') == ''
