"""EntryStore: JSON file of credential entries, loaded on open, written through on mutation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from common.logger import get_logger
from credstore.base import EntryStoreBase, Listing
from credstore.codec import decode_entries, encode_entries
from credstore.entry import Entry
from credstore.errors import (
    EntryNotFoundError,
    MalformedStoreError,
    PersistError,
    StoreOpenError,
)

DEFAULT_STORE_FILENAME = "passwords.json"
FILE_MODE = 0o600


def default_path() -> str:
    return str(Path.cwd() / DEFAULT_STORE_FILENAME)


class EntryStore(EntryStoreBase):
    """File-based entry store (pretty-printed JSON document).

    The index is populated once, in the constructor. Every successful mutation
    rewrites the whole document through a temporary file and ``os.replace`` so
    the live file is never left truncated.

    A failed ``add_and_persist`` keeps the new entry in memory (unless it
    cannot be encoded at all); memory is then
    ahead of disk until the next successful write or a restart. Nothing guards
    against a second process writing the same file concurrently.
    """

    def __init__(self, file_path: Optional[str] = None):
        # explicit path, then CREDSTORE_PATH, then ./passwords.json
        self.file_path = str(file_path or os.environ.get("CREDSTORE_PATH") or default_path())
        self._index: Dict[str, Entry] = {}
        self._load()

    @classmethod
    def open(cls, file_path: Optional[str] = None) -> "EntryStore":
        return cls(file_path)

    def get_path(self) -> str:
        return self.file_path

    def _load(self) -> None:
        log = get_logger(__name__)
        log.debug("store: open start path=%s", self.file_path)

        if not os.path.exists(self.file_path):
            try:
                self._write({})
            except OSError as exc:
                raise StoreOpenError(
                    f"Unable to create store file {self.file_path}: {exc}",
                    path=self.file_path,
                ) from exc
            log.info("store: created empty store path=%s", self.file_path)
            return

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreOpenError(
                f"Unable to read store file {self.file_path}: {exc}",
                path=self.file_path,
            ) from exc

        try:
            self._index = decode_entries(text)
        except ValueError as exc:
            raise MalformedStoreError(
                f"Store file {self.file_path} is not a valid entry document: {exc}",
                path=self.file_path,
            ) from exc

        log.info("store: open ok path=%s entries=%d", self.file_path, len(self._index))

    def _read_persisted(self) -> Dict[str, Entry]:
        """Fresh read of the file, independent of the in-memory index.

        A missing, unreadable or malformed file reads as empty.
        """
        log = get_logger(__name__)
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return decode_entries(f.read())
        except FileNotFoundError:
            log.warning("store: file missing on re-read path=%s", self.file_path)
        except (OSError, ValueError) as exc:
            log.warning("store: unreadable on re-read path=%s error=%s", self.file_path, exc)
        return {}

    def _write(self, entries: Dict[str, Entry]) -> None:
        """Write ``entries`` to file. Atomic via tmp+rename."""
        log = get_logger(__name__)
        Path(self.file_path).parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.file_path + ".tmp"

        # encoded before the tmp file exists; UnicodeEncodeError leaves nothing behind
        payload = encode_entries(entries).encode("utf-8")
        try:
            with open(tmp_path, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            try:
                os.chmod(tmp_path, FILE_MODE)
            except OSError:
                log.debug("store: chmod not supported path=%s", tmp_path)
            os.replace(tmp_path, self.file_path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        log.debug("store: write ok path=%s entries=%d", self.file_path, len(entries))

    def get(self, service: str) -> Optional[Entry]:
        return self._index.get(service)

    def exists(self, service: str) -> bool:
        return service in self._index

    def add_and_persist(self, entry: Entry) -> None:
        """Insert/overwrite ``entry`` and rewrite the whole store file.

        The file is re-read and merged under the index, so records written by
        someone else since open are kept. The index is not rolled back when
        the write fails, except for an entry that cannot be encoded as UTF-8:
        that one could never be persisted and would block every later write.
        """
        log = get_logger(__name__)
        previous = self._index.get(entry.service)
        self._index[entry.service] = entry
        merged = {**self._read_persisted(), **self._index}
        try:
            self._write(merged)
        except (OSError, UnicodeError) as exc:
            log.error("store: add failed service=%s path=%s", entry.service, self.file_path)
            if isinstance(exc, UnicodeError):
                if previous is None:
                    del self._index[entry.service]
                else:
                    self._index[entry.service] = previous
            raise PersistError(
                f"Failed to save entry for {entry.service} to {self.file_path}: {exc}",
                path=self.file_path,
            ) from exc
        log.info("store: add ok service=%s entries=%d", entry.service, len(self._index))

    def update(self, entry: Entry) -> None:
        """Replace the persisted record for ``entry.service``.

        The file is re-read first so records written by someone else since
        open are kept. If the service is not in the file, nothing is written.
        """
        log = get_logger(__name__)
        persisted = self._read_persisted()
        if entry.service not in persisted:
            log.info("store: update miss service=%s", entry.service)
            raise EntryNotFoundError(entry.service, path=self.file_path)

        persisted[entry.service] = entry
        try:
            self._write(persisted)
        except (OSError, UnicodeError) as exc:
            log.error("store: update failed service=%s path=%s", entry.service, self.file_path)
            raise PersistError(
                f"Failed to update entry for {entry.service} in {self.file_path}: {exc}",
                path=self.file_path,
            ) from exc

        self._index[entry.service] = entry
        log.info("store: update ok service=%s", entry.service)

    def list(self) -> Listing:
        return [(service, entry.username) for service, entry in self._index.items()]

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, service: object) -> bool:
        return service in self._index
