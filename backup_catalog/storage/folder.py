from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List


__all__ = [
    'Folder',
    'ObjectNotFoundError',
    'StorageError',
    'StorageObject'
]


@dataclass(frozen=True)
class StorageObject:
    """Listing information of one object in a `Folder`."""

    name: str
    """Name of the object, relative to the folder it was listed from."""

    last_modified: datetime
    """UTC time the object was last written."""

    size: int


class Folder(ABC):
    """An addressable container of named binary objects, e.g. a directory or an object storage prefix.
        Folders may contain subfolders, which are addressed with `get_sub_folder()`. Object names do not contain
        separators.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Location of this folder, for messages."""

        raise NotImplementedError()

    @abstractmethod
    def get_sub_folder(self, name: str, /) -> 'Folder':
        """Gets the subfolder with the given name. The subfolder need not exist yet."""

        raise NotImplementedError()

    @abstractmethod
    def get_object(self, name: str, /) -> bytes:
        """Reads the whole content of an object.

            :except ObjectNotFoundError: If there is no object with the given name.
            :except StorageError: If the object could not be read.
        """

        raise NotImplementedError()

    @abstractmethod
    def put_object(self, name: str, content: bytes, /) -> None:
        """Creates or overwrites an object.

            :except StorageError: If the object could not be written.
        """

        raise NotImplementedError()

    @abstractmethod
    def list_objects(self) -> List[StorageObject]:
        """Lists the objects directly contained in this folder, in arbitrary order. A folder which doesn't exist is
            empty.

            :except StorageError: If the folder could not be enumerated.
        """

        raise NotImplementedError()


class StorageError(Exception):
    """Raised when a storage operation fails."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'Storage operation on "{path}" failed: {reason}')
        self.path = path
        self.reason = reason


class ObjectNotFoundError(StorageError):
    """Raised when reading an object which doesn't exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, 'Object not found')
