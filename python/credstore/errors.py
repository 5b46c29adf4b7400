"""Exception hierarchy for the entry store."""

from __future__ import annotations

from typing import Optional


class StoreError(RuntimeError):
    """Base error that carries the backing file path when known."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class StoreOpenError(StoreError):
    """The backing file could not be created, opened or read at startup."""


class MalformedStoreError(StoreOpenError):
    """The backing file exists but its content is not a valid entry document."""


class PersistError(StoreError):
    """Serializing or writing the persisted form failed."""


class EntryNotFoundError(StoreError, KeyError):
    """No entry is stored for the requested service."""

    def __init__(self, service: str, *, path: Optional[str] = None) -> None:
        super().__init__(f"No entry for service: {service}", path=path)
        self.service = service

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
