from abc import ABC, abstractmethod
from typing import Any

from ..storage import Folder
from .model import GenericMetadata


__all__ = [
    'GenericMetaFetcher',
    'GenericMetaInteractor',
    'GenericMetaSetter'
]


class GenericMetaFetcher(ABC):
    """Reads a backup's metadata from the database engine's own sentinel format."""

    @abstractmethod
    def fetch(self, backup_name: str, backup_folder: Folder, /) -> GenericMetadata:
        """Reads the metadata of a backup.

            :param backup_name: Name of the backup.
            :param backup_folder: Folder containing the backups' sentinels.
            :except SentinelNotFoundError: If the backup has no sentinel.
            :except SentinelParseError: If the sentinel is malformed.
            :except StorageError: If the sentinel could not be read.
        """

        raise NotImplementedError()


class GenericMetaSetter(ABC):
    """Modifies the mutable parts of a backup's metadata.

        Modifications read, modify and rewrite the whole sentinel without any locking, so concurrent modifications of
        the same backup may lose all but the last write. Callers must serialise modifications themselves if that
        matters.
    """

    @abstractmethod
    def set_user_data(self, backup_name: str, backup_folder: Folder, user_data: Any, /) -> None:
        """Replaces the user data of a backup. `user_data` must be JSON-compatible but is otherwise not validated.

            :except BackupMetadataModifyError: If the sentinel could not be read or written.
        """

        raise NotImplementedError()

    @abstractmethod
    def set_is_permanent(self, backup_name: str, backup_folder: Folder, is_permanent: bool, /) -> None:
        """Marks a backup as permanent or impermanent.

            :except BackupMetadataModifyError: If the sentinel could not be read or written.
        """

        raise NotImplementedError()


class GenericMetaInteractor(GenericMetaFetcher, GenericMetaSetter, ABC):
    """Both reads and modifies backup metadata. Implemented once per database engine."""
