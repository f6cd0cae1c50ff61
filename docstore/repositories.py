from __future__ import annotations

import asyncio
import os
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from .disk_store import DiskDocumentStore
from .errors import ResourceNotFoundError, SerializationError, StoreIOError
from .logger import Logger
from .paths import resource_name

ModelT = TypeVar("ModelT", bound=BaseModel)


class AsyncDiskDocumentStore:
    """
    Async wrapper around the disk-backed document store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: DiskDocumentStore) -> None:
        self._store = store

    @classmethod
    def open(cls, root_dir: str | os.PathLike[str], *, logger: Logger | None = None) -> "AsyncDiskDocumentStore":
        return cls(DiskDocumentStore(root_dir, logger=logger))

    @property
    def store(self) -> DiskDocumentStore:
        return self._store

    async def write(self, collection: str, resource: str, value: Any) -> None:
        await asyncio.to_thread(self._store.write, collection, resource, value)

    async def read(self, collection: str, resource: str, model: Any = None) -> Any:
        return await asyncio.to_thread(self._store.read, collection, resource, model)

    async def read_all(self, collection: str) -> dict[str, str]:
        return await asyncio.to_thread(self._store.read_all, collection)

    async def delete(self, collection: str, resource: str) -> None:
        await asyncio.to_thread(self._store.delete, collection, resource)


class ModelCollection(Generic[ModelT]):
    """
    One collection bound to a pydantic model.

    Missing records are reported as None / False instead of raising, which is
    what most callers branch on anyway.
    """

    def __init__(self, store: DiskDocumentStore, collection: str, model: type[ModelT]):
        self._store = store
        self._collection = collection
        self._model = model

    @property
    def name(self) -> str:
        return self._collection

    def put(self, name: str, record: ModelT) -> None:
        self._store.write(self._collection, name, record.model_dump(mode="json"))

    def get(self, name: str) -> ModelT | None:
        try:
            return self._store.read(self._collection, name, self._model)
        except ResourceNotFoundError:
            return None

    def delete(self, name: str) -> bool:
        try:
            self._store.delete(self._collection, name)
        except ResourceNotFoundError:
            return False
        return True

    def all(self) -> dict[str, ModelT]:
        try:
            raw_records = self._store.read_all(self._collection)
        except StoreIOError as e:
            if isinstance(e.__cause__, FileNotFoundError):
                return {}
            raise
        records: dict[str, ModelT] = {}
        for filename, raw in raw_records.items():
            try:
                records[resource_name(filename)] = self._model.model_validate_json(raw)
            except ValidationError as e:
                raise SerializationError(f"cannot decode {self._collection}/{filename}: {e}") from e
        return records
