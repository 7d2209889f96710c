"""SQL snapshot adapter backed by SQLAlchemy."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from giftbox.db.models import GiftRecord
from giftbox.db.session import get_session
from giftbox.domain.gift import Gift, parse_timestamp

from .base import StorageError

logger = logging.getLogger(__name__)


def _record_to_gift(record: GiftRecord) -> Gift:
    return Gift(
        id=record.id,
        title=record.title,
        description=record.description,
        created_at=parse_timestamp(record.created_at),
        created_by=record.created_by,
        modified_at=parse_timestamp(record.modified_at),
        modified_by=record.modified_by,
    )


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops the offset, so everything is stored as UTC
    return parse_timestamp(value).astimezone(timezone.utc) if value else None


def _gift_to_record(gift: Gift) -> GiftRecord:
    return GiftRecord(
        id=gift.id,
        title=gift.title,
        description=gift.description,
        created_at=_as_utc(gift.created_at),
        created_by=gift.created_by,
        modified_at=_as_utc(gift.modified_at),
        modified_by=gift.modified_by,
    )


class SQLGiftStorage:
    """Keeps the gift snapshot in the ``gifts`` table.

    Same contract as the JSON adapter: every export replaces the table
    contents, inside a single transaction.
    """

    def import_json(self) -> list[Gift]:
        try:
            with get_session() as session:
                records = session.execute(select(GiftRecord)).scalars().all()
                return [_record_to_gift(record) for record in records]
        except SQLAlchemyError as exc:
            raise StorageError(f"cannot read gifts table: {exc}") from exc

    def export_json(self, gifts: Iterable[Gift]) -> None:
        records = [_gift_to_record(gift) for gift in gifts]
        try:
            with get_session() as session:
                session.execute(delete(GiftRecord))
                session.add_all(records)
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"cannot write gifts table: {exc}") from exc
        logger.debug("exported %d gifts to the gifts table", len(records))
