from datetime import datetime, timedelta
import json
from typing import List, Optional, Sequence, TextIO, Tuple

from ..meta import BackupTimeWithMetadata


__all__ = [
    'format_time',
    'write_as_json',
    'write_backup_list',
    'write_backup_list_as',
    'write_pretty_backup_list'
]


PRETTY_HEADERS = ('#', 'NAME', 'CREATED', 'WAL SEGMENT BACKUP START')
"""Column headers of the table printed by `write_pretty_backup_list()`."""

PLAIN_HEADERS = ('name', 'created', 'wal_segment_backup_start')
"""Column headers of the list printed by `write_backup_list()`."""


def format_time(value: Optional[datetime], /) -> str:
    """Formats a backup time for display: RFC 3339 to the second, or "-" if there is no time."""

    if value is None:
        return '-'
    if value.utcoffset() == timedelta(0):
        return value.strftime('%Y-%m-%dT%H:%M:%SZ')
    return value.isoformat(timespec='seconds')


def write_as_json(backups: Sequence[BackupTimeWithMetadata], output: TextIO, pretty: bool) -> None:
    """Writes backups as a JSON array, in the given order.

        :param pretty: If true, indent the JSON. Otherwise write it on one line without extra whitespace.
    """

    json_data = [backup.to_json() for backup in backups]
    if pretty:
        json.dump(json_data, output, indent=4, ensure_ascii=False)
    else:
        json.dump(json_data, output, separators=(',', ':'), ensure_ascii=False)
    output.write('\n')


def write_pretty_backup_list(backups: Sequence[BackupTimeWithMetadata], output: TextIO) -> None:
    """Writes backups as a bordered table with an index column, e.g.:

        +---+------+---------+--------------------------+
        | # | NAME | CREATED | WAL SEGMENT BACKUP START |
        +---+------+---------+--------------------------+
        | 0 | b0   | -       | shortWallName0           |
        +---+------+---------+--------------------------+
    """

    rows = [(str(i),) + row for i, row in enumerate(_backup_list_rows(backups))]
    widths = _column_widths(PRETTY_HEADERS, rows)

    def write_row(cells: Sequence[str]) -> None:
        output.write('| ' + ' | '.join(cell.ljust(width) for cell, width in zip(cells, widths)) + ' |\n')

    border = '+' + '+'.join('-' * (width + 2) for width in widths) + '+\n'

    output.write(border)
    write_row(PRETTY_HEADERS)
    output.write(border)
    for row in rows:
        write_row(row)
    output.write(border)


def write_backup_list(backups: Sequence[BackupTimeWithMetadata], output: TextIO) -> None:
    """Writes backups as plain text columns separated by spaces, with a header line. Suitable for scripts."""

    rows = _backup_list_rows(backups)
    widths = _column_widths(PLAIN_HEADERS, rows)

    def write_row(cells: Sequence[str]) -> None:
        # The last column isn't padded.
        padded = [cell.ljust(width) for cell, width in zip(cells[:-1], widths)]
        output.write(' '.join(padded + [cells[-1]]) + '\n')

    write_row(PLAIN_HEADERS)
    for row in rows:
        write_row(row)


def write_backup_list_as(backups: Sequence[BackupTimeWithMetadata], output: TextIO, pretty: bool, json_output: bool) \
        -> None:
    """Writes backups in the format selected by command line flags. JSON takes precedence over the pretty table;
        `pretty` also makes JSON indented. With neither flag, writes plain text."""

    if json_output:
        write_as_json(backups, output, pretty)
    elif pretty:
        write_pretty_backup_list(backups, output)
    else:
        write_backup_list(backups, output)


def _backup_list_rows(backups: Sequence[BackupTimeWithMetadata]) -> List[Tuple[str, str, str]]:
    return [(backup.backup_time.backup_name, format_time(backup.metadata.start_time), backup.backup_time.wal_file_name)
            for backup in backups]


def _column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[int]:
    return [max([len(header)] + [len(row[i]) for row in rows]) for i, header in enumerate(headers)]
