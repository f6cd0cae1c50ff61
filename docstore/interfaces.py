from __future__ import annotations

from typing import Any, Protocol


class DocumentStore(Protocol):
    """
    Minimal document store: JSON documents addressed by (collection, resource).
    """

    def write(self, collection: str, resource: str, value: Any) -> None:
        """Persist value as <collection>/<resource> atomically."""
        ...

    def read(self, collection: str, resource: str, model: Any = None) -> Any:
        """Load one document; validated into model when one is given."""
        ...

    def read_all(self, collection: str) -> dict[str, str]:
        """Raw content of every document in a collection, keyed by file name."""
        ...

    def delete(self, collection: str, resource: str) -> None:
        ...
