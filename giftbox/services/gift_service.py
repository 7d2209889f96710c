"""
Gift use cases: list, create, read, update and delete.

GiftStore keeps the authoritative collection in memory and hands a full
snapshot to its storage collaborator after every successful mutation.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Optional

from giftbox.core.config import get_settings
from giftbox.core.principal import current_principal
from giftbox.domain.gift import Gift, has_title, title_order
from giftbox.repositories.base import SnapshotStorage, StorageError

logger = logging.getLogger(__name__)

class GiftError(Exception):
    """Base exception for the gift workflow."""

    code = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GiftError):
    """Raised when no gift has the requested id."""

    code = "not_found"
    status_code = 404


class DuplicateError(GiftError):
    """Raised when a gift with the same id exists already."""

    code = "duplicate"
    status_code = 409


class ValidationError(GiftError):
    """Raised when a payload is missing a mandatory field or carries a client id."""

    code = "invalid"
    status_code = 400


class InternalError(GiftError):
    """Raised when the in-memory index is inconsistent."""

    code = "internal"
    status_code = 500


class PersistenceError(InternalError):
    """Raised when the snapshot cannot be loaded or saved."""

    code = "persistence"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GiftStore:
    """In-memory gift index with optional snapshot persistence."""

    def __init__(
        self,
        storage: SnapshotStorage,
        *,
        persistent: bool = False,
        principal: Callable[[], str] = current_principal,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.storage = storage
        self.persistent = persistent
        self._principal = principal
        self._clock = clock
        self._index: dict[str, Gift] | None = None
        self._init_lock = threading.Lock()

    # -------------------------- lifecycle --------------------------
    def load(self) -> None:
        """Seed the index from the storage collaborator, once."""
        if self._index is not None:
            return
        with self._init_lock:
            if self._index is not None:
                return
            try:
                gifts = self.storage.import_json()
            except StorageError as exc:
                logger.exception("gift snapshot could not be imported")
                raise PersistenceError(str(exc)) from exc
            index: dict[str, Gift] = {}
            discarded = 0
            for gift in gifts:
                if not gift.id:
                    logger.warning("discarding imported gift without ID: %s", gift.to_json())
                    discarded += 1
                elif not has_title(gift):
                    logger.warning("discarding imported gift <%s>: it has no valid title.", gift.id)
                    discarded += 1
                else:
                    index[gift.id] = gift
            self._index = index
            logger.info("%d gifts imported, %d discarded.", len(index), discarded)

    def save(self) -> None:
        """Write the whole collection to storage when persistence is enabled."""
        if not self.persistent:
            return
        try:
            self.storage.export_json(self._gifts().values())
        except StorageError as exc:
            logger.exception("gift snapshot could not be exported")
            raise PersistenceError(str(exc)) from exc

    def _gifts(self) -> dict[str, Gift]:
        self.load()
        return self._index

    # -------------------------- queries --------------------------
    def count(self) -> int:
        return len(self._gifts())

    def snapshot(self) -> list[Gift]:
        return [replace(gift) for gift in sorted(self._gifts().values(), key=title_order)]

    def list(
        self,
        query_type: Optional[str] = None,
        query: Optional[str] = None,
        position: int = 0,
        size: Optional[int] = None,
    ) -> list[Gift]:
        """Return the page ``[position, position + size)`` of gifts ordered by title.

        ``query`` and ``query_type`` are accepted for interface compatibility
        and do not filter anything yet.
        """
        if size is None:
            size = get_settings().default_page_size
        ordered = self.snapshot()
        selection = [gift for i, gift in enumerate(ordered) if position <= i < position + size]
        logger.info(
            "list(<%s>, <%s>, <%s>, <%s>) -> %d gifts.", query, query_type, position, size, len(selection)
        )
        return selection

    def read(self, gift_id: str) -> Gift:
        gift = self._gifts().get(gift_id)
        if gift is None:
            raise NotFoundError(f"no gift with ID <{gift_id}> was found.")
        logger.info("read(%s) -> %s", gift_id, gift.to_json())
        return replace(gift)

    # -------------------------- mutations --------------------------
    def create(self, gift: Gift) -> Gift:
        logger.info("create(%s)", gift.to_json())
        index = self._gifts()
        if gift.id:
            if gift.id in index:
                raise DuplicateError(f"gift <{gift.id}> exists already.")
            raise ValidationError(
                f"gift <{gift.id}> contains an ID generated on the client. This is not allowed."
            )
        gift_id = str(uuid.uuid4())
        if not has_title(gift):
            raise ValidationError(f"gift <{gift_id}> must contain a valid title.")

        now = self._clock()
        principal = self._principal()
        created = Gift(
            id=gift_id,
            title=gift.title,
            description=gift.description,
            created_at=now,
            created_by=principal,
            modified_at=now,
            modified_by=principal,
        )
        index[gift_id] = created
        logger.info("create() -> %s", created.to_json())
        self.save()
        return replace(created)

    def update(self, gift_id: str, gift: Gift) -> Gift:
        index = self._gifts()
        current = index.get(gift_id)
        if current is None:
            raise NotFoundError(f"no gift with ID <{gift_id}> was found.")
        if gift.created_at is not None and gift.created_at != current.created_at:
            logger.warning(
                "gift <%s>: ignoring createdAt value <%s> because it was set on the client.",
                gift_id,
                gift.created_at.isoformat(),
            )
        if gift.created_by is not None and gift.created_by.lower() != (current.created_by or "").lower():
            logger.warning(
                "gift <%s>: ignoring createdBy value <%s> because it was set on the client.",
                gift_id,
                gift.created_by,
            )
        if not has_title(gift):
            raise ValidationError(f"gift <{gift_id}> must contain a valid title.")

        current.title = gift.title
        current.description = gift.description
        current.modified_at = self._clock()
        current.modified_by = self._principal()
        logger.info("update(%s) -> %s", gift_id, current.to_json())
        self.save()
        return replace(current)

    def delete(self, gift_id: str) -> None:
        index = self._gifts()
        if gift_id not in index:
            raise NotFoundError(f"gift <{gift_id}> was not found.")
        if index.pop(gift_id, None) is None:
            raise InternalError(
                f"gift <{gift_id}> can not be removed, because it does not exist in the index"
            )
        logger.info("delete(%s)", gift_id)
        self.save()


def build_gift_store(settings=None) -> GiftStore:
    """Build the store on the storage backend named by the settings."""
    settings = settings or get_settings()
    if settings.storage_backend == "sql":
        from giftbox.repositories.sql_repository import SQLGiftStorage

        storage: SnapshotStorage = SQLGiftStorage()
    elif settings.storage_backend == "json":
        from giftbox.repositories.json_storage import JsonGiftStorage

        storage = JsonGiftStorage(settings.data_file)
    else:
        raise ValueError(f"unknown gift storage backend: {settings.storage_backend!r}")
    return GiftStore(storage, persistent=settings.persistent)
