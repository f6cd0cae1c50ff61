from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import InvalidArgumentError, ResourceNotFoundError, SerializationError, StoreIOError
from .interfaces import DocumentStore
from .json_store import atomic_write_text, dumps_json, read_text
from .locks import CollectionLockRegistry
from .logger import ConsoleLogger, Logger
from .paths import collection_dir, ensure_dir, is_resource_file, normalize_root, resource_path

T = TypeVar("T")


def _check_names(collection: str, resource: str | None = None) -> None:
    if not collection:
        raise InvalidArgumentError("collection name cannot be empty", collection=collection, resource=resource or "")
    if resource is not None and not resource:
        raise InvalidArgumentError("resource name cannot be empty", collection=collection, resource=resource)


class DiskDocumentStore(DocumentStore):
    """
    Stores JSON documents as one file per resource under a root directory:

        <root>/<collection>/<resource>.json

    - One lock per collection: operations on the same collection are
      serialized, different collections never wait on each other.
    - Writes go to <resource>.json.tmp and are renamed over the final file, so
      a reader sees either the previous or the new document, never a partial one.
    - Errors are raised to the caller; nothing is retried or swallowed.
    """

    def __init__(self, root_dir: str | os.PathLike[str], *, logger: Logger | None = None):
        self._root = normalize_root(root_dir)
        self._log: Logger = logger if logger is not None else ConsoleLogger()
        self._locks = CollectionLockRegistry()

        if self._root.is_dir():
            self._log.info("Database directory already exists: %s", self._root)
            return

        self._log.debug("Creating database directory: %s", self._root)
        try:
            ensure_dir(self._root)
        except OSError as e:
            raise StoreIOError(f"cannot create database directory {self._root}: {e}") from e

    @property
    def root(self) -> Path:
        return self._root

    @property
    def locks(self) -> CollectionLockRegistry:
        return self._locks

    def write(self, collection: str, resource: str, value: Any) -> None:
        _check_names(collection, resource)

        with self._locks.lock_for(collection):
            target_dir = collection_dir(self._root, collection)
            try:
                ensure_dir(target_dir)
            except OSError as e:
                raise StoreIOError(f"cannot create collection directory {target_dir}: {e}") from e

            try:
                text = dumps_json(value)
            except (TypeError, ValueError, PydanticSerializationError) as e:
                raise SerializationError(f"cannot encode {collection}/{resource}: {e}") from e

            path = resource_path(self._root, collection, resource)
            try:
                atomic_write_text(path, text)
            except OSError as e:
                raise StoreIOError(f"cannot write {path}: {e}") from e
            self._log.trace("Wrote %s", path)

    @overload
    def read(self, collection: str, resource: str) -> Any: ...
    @overload
    def read(self, collection: str, resource: str, model: type[T]) -> T: ...

    def read(self, collection: str, resource: str, model: Any = None) -> Any:
        """
        Load one document.

        Without a model the decoded JSON is returned as plain Python values.
        With a model (a pydantic model, dataclass, or any type pydantic can
        validate, e.g. list[int]) the document is validated into that type.
        """
        _check_names(collection, resource)

        with self._locks.lock_for(collection):
            path = resource_path(self._root, collection, resource)
            try:
                raw = read_text(path)
            except FileNotFoundError as e:
                raise ResourceNotFoundError(collection, resource) from e
            except UnicodeDecodeError as e:
                raise SerializationError(f"cannot decode {collection}/{resource}: {e}") from e
            except OSError as e:
                raise StoreIOError(f"cannot read {path}: {e}") from e

        try:
            if model is None:
                return json.loads(raw)
            return TypeAdapter(model).validate_json(raw)
        except (ValueError, ValidationError) as e:
            raise SerializationError(f"cannot decode {collection}/{resource}: {e}") from e

    def read_all(self, collection: str) -> dict[str, str]:
        """
        Return the raw text of every <name>.json file in a collection, keyed by file name.

        Takes the collection's own lock, so the result is a consistent snapshot
        with respect to write/read/delete on the same collection.
        """
        _check_names(collection)

        with self._locks.lock_for(collection):
            target_dir = collection_dir(self._root, collection)
            records: dict[str, str] = {}
            try:
                entries = sorted(os.scandir(target_dir), key=lambda entry: entry.name)
                for entry in entries:
                    if is_resource_file(entry.name) and entry.is_file():
                        records[entry.name] = read_text(Path(entry.path))
            except OSError as e:
                raise StoreIOError(f"cannot read collection {target_dir}: {e}") from e
            except UnicodeDecodeError as e:
                raise SerializationError(f"cannot decode {entry.path}: {e}") from e
            return records

    def delete(self, collection: str, resource: str) -> None:
        _check_names(collection, resource)

        with self._locks.lock_for(collection):
            path = resource_path(self._root, collection, resource)
            try:
                path.unlink()
            except FileNotFoundError as e:
                raise ResourceNotFoundError(collection, resource) from e
            except OSError as e:
                raise StoreIOError(f"cannot delete {path}: {e}") from e
            self._log.trace("Deleted %s", path)


def open_store(root_dir: str | os.PathLike[str], *, logger: Logger | None = None) -> DiskDocumentStore:
    return DiskDocumentStore(root_dir, logger=logger)
