from __future__ import annotations

import io
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def store(tmp_path: Path, log_stream: io.StringIO):
    """
    A store rooted in a temp directory whose console output goes to log_stream.
    """
    from docstore import ConsoleLogger, DiskDocumentStore

    return DiskDocumentStore(tmp_path / "db", logger=ConsoleLogger("TRACE", stream=log_stream))


def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Relative path -> file bytes (None for directories)."""
    return {
        str(p.relative_to(root)): (p.read_bytes() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }
