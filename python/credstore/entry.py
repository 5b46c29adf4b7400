"""Entry: one stored (service, username, password) record."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Entry:
    """Immutable credential record keyed by ``service``.

    No validation is performed; empty strings are accepted. Updating an entry
    means building a new one with the same service, see ``with_username`` and
    ``with_password``.
    """

    service: str
    username: str
    password: str = field(repr=False)

    def with_username(self, username: str) -> "Entry":
        return replace(self, username=username)

    def with_password(self, password: str) -> "Entry":
        return replace(self, password=password)
