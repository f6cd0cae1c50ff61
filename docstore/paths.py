from __future__ import annotations

import os
from pathlib import Path

RESOURCE_SUFFIX = ".json"
TEMP_SUFFIX = ".tmp"

DIR_MODE = 0o755


def normalize_root(root_dir: str | os.PathLike[str]) -> Path:
    return Path(os.path.normpath(os.fspath(root_dir)))


def ensure_dir(path: Path) -> Path:
    path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    return path


def collection_dir(root: Path, collection: str) -> Path:
    return root / collection


def resource_path(root: Path, collection: str, resource: str) -> Path:
    return collection_dir(root, collection) / f"{resource}{RESOURCE_SUFFIX}"


def temp_path(path: Path) -> Path:
    # john.json -> john.json.tmp, next to the final file so the rename stays on one file system.
    return path.with_name(path.name + TEMP_SUFFIX)


def is_resource_file(name: str) -> bool:
    return name.endswith(RESOURCE_SUFFIX)


def resource_name(filename: str) -> str:
    return filename[: -len(RESOURCE_SUFFIX)] if is_resource_file(filename) else filename
