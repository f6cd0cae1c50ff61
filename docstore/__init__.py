from __future__ import annotations

from .disk_store import DiskDocumentStore, open_store
from .errors import (
    DocumentStoreError,
    InvalidArgumentError,
    ResourceNotFoundError,
    SerializationError,
    StoreIOError,
)
from .interfaces import DocumentStore
from .locks import CollectionLockRegistry
from .logger import ConsoleLogger, Logger
from .repositories import AsyncDiskDocumentStore, ModelCollection

__version__ = "1.0.0"

__all__ = [
    "DocumentStore",
    "DiskDocumentStore",
    "open_store",
    "AsyncDiskDocumentStore",
    "ModelCollection",
    "CollectionLockRegistry",
    "Logger",
    "ConsoleLogger",
    "DocumentStoreError",
    "InvalidArgumentError",
    "ResourceNotFoundError",
    "SerializationError",
    "StoreIOError",
]
