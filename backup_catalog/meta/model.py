from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..utility import format_iso_time


__all__ = [
    'BackupTime',
    'BackupTimeWithMetadata',
    'GenericMetadata',
    'IncrementDetails',
    'IncrementDetailsFetcher',
    'NopIncrementDetailsFetcher'
]


@dataclass(frozen=True)
class BackupTime:
    """Identity and coarse timing of a backup, as known from listing the storage."""

    backup_name: str = ''
    """Unique name of the backup within its backup folder."""

    time: Optional[datetime] = None
    """Last modified time of the backup's sentinel object. `None` if unavailable."""

    wal_file_name: str = ''
    """Name of the WAL segment the backup started from. May be empty."""


@dataclass(frozen=True)
class IncrementDetails:
    increment_from: str = ''
    """Name of the backup this one is a delta of."""

    increment_full_name: str = ''
    """Name of the full backup at the base of the increment chain."""

    increment_count: int = 0


class IncrementDetailsFetcher(ABC):
    """Tells whether and how a backup is incremental. Separate from `GenericMetadata` since determining it may require
        more storage reads than the rest of the metadata."""

    @abstractmethod
    def fetch_increment_details(self) -> Tuple[bool, IncrementDetails]:
        """
            :return: First element is true if the backup is incremental, second element is the increment details (only
                meaningful if the backup is incremental).
        """

        raise NotImplementedError()


@dataclass(frozen=True)
class NopIncrementDetailsFetcher(IncrementDetailsFetcher):
    """For database engines without incremental backups."""

    def fetch_increment_details(self) -> Tuple[bool, IncrementDetails]:
        return False, IncrementDetails()


@dataclass(frozen=True)
class GenericMetadata:
    """Backup metadata common to all database engines. A default constructed instance is "zero" metadata."""

    backup_name: str = ''
    uncompressed_size: int = 0
    compressed_size: int = 0
    hostname: str = ''

    start_time: Optional[datetime] = None
    """Time the backup started. `None` if the engine doesn't record it."""

    finish_time: Optional[datetime] = None
    """Time the backup finished. `None` if the engine doesn't record it."""

    is_permanent: bool = False
    """Permanent backups are never deleted by retention."""

    increment_details: IncrementDetailsFetcher = field(default_factory=NopIncrementDetailsFetcher)

    user_data: Any = None
    """Arbitrary JSON-compatible value attached to the backup by the user."""


@dataclass(frozen=True)
class BackupTimeWithMetadata:
    """A listed backup joined with its metadata. This is what backup lists are sorted and rendered from."""

    backup_time: BackupTime = field(default_factory=BackupTime)
    metadata: GenericMetadata = field(default_factory=GenericMetadata)

    @property
    def backup_name(self) -> str:
        return self.backup_time.backup_name

    @property
    def start_time(self) -> Optional[datetime]:
        return self.metadata.start_time

    def to_json(self) -> Dict[str, Any]:
        """Converts to a JSON-compatible object, for structured output.
            "increment_details" is `None` unless the backup is incremental."""

        is_incremental, increment_details = self.metadata.increment_details.fetch_increment_details()
        return {
            'backup_name': self.backup_time.backup_name,
            'time': format_iso_time(self.backup_time.time),
            'wal_file_name': self.backup_time.wal_file_name,
            'start_time': format_iso_time(self.metadata.start_time),
            'finish_time': format_iso_time(self.metadata.finish_time),
            'hostname': self.metadata.hostname,
            'uncompressed_size': self.metadata.uncompressed_size,
            'compressed_size': self.metadata.compressed_size,
            'is_permanent': self.metadata.is_permanent,
            'user_data': self.metadata.user_data,
            'is_incremental': is_incremental,
            'increment_details': asdict(increment_details) if is_incremental else None
        }
