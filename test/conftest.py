from datetime import datetime, timezone
from pathlib import Path

import pytest

from backup_catalog.storage import MemoryFolder


@pytest.fixture
def tmpdir(tmpdir) -> Path:
    return Path(tmpdir)


@pytest.fixture
def memory_folder() -> MemoryFolder:
    """Empty in-memory folder whose objects are all last modified at 2022-03-21 12:00 UTC."""

    return MemoryFolder(clock=lambda: datetime(2022, 3, 21, 12, 0, 0, tzinfo=timezone.utc))
