"""
Smoke tests for the SQL snapshot adapter against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Make the giftbox package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from giftbox.core import config as core_config
from giftbox.db import models
from giftbox.db import session as db_session
from giftbox.db.create_tables import create_all
from giftbox.domain.gift import Gift
from giftbox.repositories.sql_repository import SQLGiftStorage
from giftbox.services.gift_service import GiftStore


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset the cached engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.reset_engine()

    create_all()

    yield db_file

    models.Base.metadata.drop_all(bind=db_session.get_engine())
    db_session.reset_engine()
    core_config.get_settings.cache_clear()


def test_empty_table_imports_nothing(temp_db):
    assert SQLGiftStorage().import_json() == []


def test_export_replaces_table_contents(temp_db):
    storage = SQLGiftStorage()
    when = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    storage.export_json(
        [
            Gift(id="g1", title="Book", created_at=when, created_by="alice", modified_at=when, modified_by="alice"),
            Gift(id="g2", title="Apple", description="green"),
        ]
    )
    storage.export_json([Gift(id="g2", title="Apple", description="red")])

    (gift,) = storage.import_json()
    assert gift.id == "g2"
    assert gift.description == "red"


def test_timestamps_come_back_timezone_aware(temp_db):
    storage = SQLGiftStorage()
    when = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    storage.export_json([Gift(id="g1", title="Book", created_at=when, modified_at=when)])

    (gift,) = storage.import_json()
    assert gift.created_at == when
    assert gift.created_at.tzinfo is not None


def test_store_round_trip(temp_db):
    first = GiftStore(SQLGiftStorage(), persistent=True, principal=lambda: "alice")
    book = first.create(Gift(title="Book"))
    first.create(Gift(title="Apple"))
    first.delete(book.id)

    second = GiftStore(SQLGiftStorage(), persistent=True)
    assert [g.title for g in second.list()] == ["Apple"]
    assert second.snapshot() == first.snapshot()
