from dataclasses import dataclass, field
import json
from os import PathLike
from pathlib import Path
import subprocess
import sys
from typing import Any, Dict, List, Optional

from backup_catalog.listing import ListLogging
from backup_catalog.storage import Folder


__all__ = [
    'AssertFilesystemUnmodified',
    'get_json_object',
    'LoggingRecorder',
    'put_json_object',
    'read_directory_tree',
    'run_application'
]


PROJECT_ROOT = Path(__file__).parent.parent


class AssertFilesystemUnmodified:
    """Context object that asserts that the content of the specified paths is the same when exiting as when entering."""

    def __init__(self, *paths: PathLike) -> None:
        self.paths = tuple(map(Path, paths))

    def __enter__(self):
        self.trees_before = tuple(map(read_directory_tree, self.paths))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.trees_after = tuple(map(read_directory_tree, self.paths))
        assert self.trees_after == self.trees_before


def read_directory_tree(path: Path, /) -> Optional[Dict[str, bytes]]:
    """Reads every file under a directory (or the single file at `path`), keyed by relative path.
        Returns `None` if the path doesn't exist, to allow checking that a path is not created.
    """

    if path.is_file():
        return {'': path.read_bytes()}
    elif path.is_dir():
        return {str(p.relative_to(path)): p.read_bytes() for p in path.rglob('*') if p.is_file()}
    else:
        return None


@dataclass
class LoggingRecorder:
    """Records the calls `handle_backup_list()` makes to its logging, instead of printing or exiting."""

    info_messages: List[str] = field(default_factory=list)
    fatal_on_error_calls: List[Optional[Exception]] = field(default_factory=list)

    def as_logging(self) -> ListLogging:
        return ListLogging(info=self.info_messages.append, fatal_on_error=self.fatal_on_error_calls.append)


def put_json_object(folder: Folder, name: str, json_data: Any) -> None:
    folder.put_object(name, json.dumps(json_data).encode('utf8'))


def get_json_object(folder: Folder, name: str) -> Any:
    return json.loads(folder.get_object(name).decode('utf8'))


def run_application(*arguments: str) -> subprocess.CompletedProcess:
    """Runs the backup catalog program with the given arguments in a new process and returns the results."""

    return subprocess.run(
        [sys.executable, '-m', 'backup_catalog'] + list(arguments), capture_output=True, encoding='utf8',
        cwd=PROJECT_ROOT)
