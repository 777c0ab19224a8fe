from datetime import datetime, timezone
from os import PathLike
from pathlib import Path
from typing import List

from .folder import Folder, ObjectNotFoundError, StorageError, StorageObject


__all__ = [
    'FilesystemFolder'
]


class FilesystemFolder(Folder):
    """`Folder` backed by a local directory. Objects are regular files, subfolders are subdirectories."""

    def __init__(self, directory: PathLike, /) -> None:
        self.directory = Path(directory)

    @property
    def path(self) -> str:
        return str(self.directory)

    def get_sub_folder(self, name: str, /) -> 'FilesystemFolder':
        return FilesystemFolder(self.directory / name)

    def get_object(self, name: str, /) -> bytes:
        path = self.directory / name
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise ObjectNotFoundError(str(path)) from e
        except OSError as e:
            raise StorageError(str(path), str(e)) from e

    def put_object(self, name: str, content: bytes, /) -> None:
        path = self.directory / name
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise StorageError(str(path), str(e)) from e

    def list_objects(self) -> List[StorageObject]:
        try:
            if not self.directory.exists():
                return []
            objects: List[StorageObject] = []
            for entry in self.directory.iterdir():
                if entry.is_file():
                    stat = entry.stat()
                    last_modified = datetime.fromtimestamp(stat.st_mtime, timezone.utc)
                    objects.append(StorageObject(entry.name, last_modified, stat.st_size))
        except OSError as e:
            raise StorageError(self.path, f'Failed to enumerate folder: {e}') from e
        return objects
