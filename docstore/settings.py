from __future__ import annotations

import os
from dataclasses import dataclass

from .logger import parse_level


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Storage
    root_dir: str

    # Logging
    log_level: int
    log_demo_writes: bool


def get_settings() -> Settings:
    root_dir = os.getenv("DOCSTORE_ROOT", "./db").strip() or "./db"
    log_level = parse_level(os.getenv("DOCSTORE_LOG_LEVEL", "INFO"))
    log_demo_writes = _env_bool("DOCSTORE_LOG_DEMO", True)

    return Settings(
        root_dir=root_dir,
        log_level=log_level,
        log_demo_writes=log_demo_writes,
    )
