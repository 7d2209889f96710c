"""
Persistence adapters.

Each adapter stores a full snapshot of the gift collection (JSON file or SQL
table). Services depend on the SnapshotStorage interface, never on a concrete
backend.
"""

from .base import SnapshotStorage, StorageError

__all__ = ["SnapshotStorage", "StorageError"]
