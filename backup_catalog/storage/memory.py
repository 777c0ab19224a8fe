from datetime import datetime, timezone
from typing import Callable, Dict, List, Tuple

from .folder import Folder, ObjectNotFoundError, StorageObject


__all__ = [
    'MemoryFolder'
]


class MemoryFolder(Folder):
    """`Folder` kept entirely in memory. Subfolders share the storage of the folder they were obtained from.
        Handy for testing.
    """

    def __init__(self, clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)) -> None:
        """
            :param clock: Supplies the last modified time of objects as they are written.
        """

        self._objects: Dict[str, Tuple[bytes, datetime]] = {}
        self._prefix = ''
        self._clock = clock

    @property
    def path(self) -> str:
        return f'memory://{self._prefix}'

    def get_sub_folder(self, name: str, /) -> 'MemoryFolder':
        sub_folder = MemoryFolder(self._clock)
        sub_folder._objects = self._objects
        sub_folder._prefix = f'{self._prefix}{name.strip("/")}/'
        return sub_folder

    def get_object(self, name: str, /) -> bytes:
        try:
            content, _ = self._objects[self._prefix + name]
        except KeyError as e:
            raise ObjectNotFoundError(self.path + name) from e
        return content

    def put_object(self, name: str, content: bytes, /) -> None:
        self._objects[self._prefix + name] = (bytes(content), self._clock())

    def list_objects(self) -> List[StorageObject]:
        objects: List[StorageObject] = []
        for key, (content, last_modified) in self._objects.items():
            if key.startswith(self._prefix):
                name = key[len(self._prefix):]
                if '/' not in name:
                    objects.append(StorageObject(name, last_modified, len(content)))
        return objects
