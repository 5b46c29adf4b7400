"""Entry store base class (abstract).

The dialog and CLI depend on this type, so an alternative store (memory/db/etc.)
can be injected without changing them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from credstore.entry import Entry

Listing = List[Tuple[str, str]]


class EntryStoreBase(ABC):
    @abstractmethod
    def get_path(self) -> str:
        """Get the path/identifier of the backing store."""
        ...

    @abstractmethod
    def get(self, service: str) -> Optional[Entry]:
        """Exact, case-sensitive lookup. None when the service is absent."""
        ...

    @abstractmethod
    def exists(self, service: str) -> bool:
        """Whether an entry is stored under ``service``."""
        ...

    @abstractmethod
    def add_and_persist(self, entry: Entry) -> None:
        """Insert or overwrite ``entry`` and persist the full store.

        Raises PersistError when the write fails.
        """
        ...

    @abstractmethod
    def update(self, entry: Entry) -> None:
        """Replace the stored record for ``entry.service``.

        Raises EntryNotFoundError when there is nothing to replace and
        PersistError when the write fails.
        """
        ...

    @abstractmethod
    def list(self) -> Listing:
        """(service, username) pairs. Passwords are never included."""
        ...
