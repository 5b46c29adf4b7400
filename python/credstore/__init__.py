from credstore.base import EntryStoreBase
from credstore.entry import Entry
from credstore.errors import (
    EntryNotFoundError,
    MalformedStoreError,
    PersistError,
    StoreError,
    StoreOpenError,
)
from credstore.store import DEFAULT_STORE_FILENAME, EntryStore

__all__ = [
    "DEFAULT_STORE_FILENAME",
    "Entry",
    "EntryStoreBase",
    "EntryStore",
    "StoreError",
    "StoreOpenError",
    "MalformedStoreError",
    "PersistError",
    "EntryNotFoundError",
]
