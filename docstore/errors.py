from __future__ import annotations


class DocumentStoreError(Exception):
    """Base class for every error raised by the document store."""


class InvalidArgumentError(DocumentStoreError, ValueError):
    def __init__(self, message: str, *, collection: str = "", resource: str = ""):
        super().__init__(message)
        self.collection = collection
        self.resource = resource


class ResourceNotFoundError(DocumentStoreError, LookupError):
    def __init__(self, collection: str, resource: str):
        super().__init__(f"resource not found: {collection}/{resource}")
        self.collection = collection
        self.resource = resource


class StoreIOError(DocumentStoreError):
    """
    A file-system operation failed (mkdir, read, write, rename, listing).

    The underlying OSError is always chained as __cause__.
    """


class SerializationError(DocumentStoreError, ValueError):
    """A value could not be encoded to JSON, or stored content could not be decoded."""
