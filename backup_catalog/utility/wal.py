import re


__all__ = [
    'strip_wal_file_name',
    'WAL_FILE_NAME_LENGTH'
]


WAL_FILE_NAME_LENGTH = 24
"""Length of a WAL segment file name: timeline, log and segment, 8 hexadecimal digits each."""

_WAL_FILE_NAME_PATTERN = re.compile(f'[0-9A-F]{{{WAL_FILE_NAME_LENGTH}}}')


def strip_wal_file_name(name: str, /) -> str:
    """Extracts the WAL segment file name embedded in a backup name, e.g. `base_000000010000000000000002` gives
        `000000010000000000000002`.

        :return: The first WAL segment name found, or an empty string if there is none.
    """

    match = _WAL_FILE_NAME_PATTERN.search(name)
    if match is None:
        return ''
    return match.group()
