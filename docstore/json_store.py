from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic_core import to_jsonable_python

from .paths import temp_path


def dumps_json(payload: Any, *, indent: int = 2, sort_keys: bool = True) -> str:
    """
    Encode a value as indented JSON text ending in a newline.

    Pydantic models, dataclasses, datetimes and the like are converted to plain
    JSON values first. NaN and infinities are rejected so the output always
    parses as strict JSON.

    Raises TypeError or ValueError (including pydantic's serialization error)
    when the value cannot be represented.
    """
    plain = to_jsonable_python(payload)
    return json.dumps(plain, indent=indent, sort_keys=sort_keys, allow_nan=False) + "\n"


def atomic_write_text(path: Path, text: str) -> None:
    """
    Atomically write text to disk by writing to a temp file then replacing.
    """
    tmp_path = temp_path(path)
    with tmp_path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    tmp_path.replace(path)


def read_text(path: Path) -> str:
    """
    Read a file as UTF-8 exactly as stored; line endings are not translated.

    Raises UnicodeDecodeError when the bytes are not valid UTF-8.
    """
    return path.read_bytes().decode("utf-8")
