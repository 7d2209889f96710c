"""Storage collaborator interface shared by the snapshot backends."""
from __future__ import annotations

from typing import Iterable, Protocol

from giftbox.domain.gift import Gift


class StorageError(Exception):
    """Raised when a snapshot cannot be read or written."""


class SnapshotStorage(Protocol):
    def import_json(self) -> list[Gift]:
        """Return every stored gift (called once at startup)."""
        ...

    def export_json(self, gifts: Iterable[Gift]) -> None:
        """Replace the stored snapshot with ``gifts``."""
        ...
