from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the giftbox package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from giftbox.core import config as core_config  # noqa: E402
from giftbox.core.principal import current_principal, principal_scope  # noqa: E402
from giftbox.services.gift_service import build_gift_store  # noqa: E402
from giftbox.repositories.json_storage import JsonGiftStorage  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("GIFTS_STORAGE", "GIFTS_PERSISTENT", "GIFTS_DATA_FILE", "DEFAULT_PAGE_SIZE", "DEFAULT_PRINCIPAL"):
        monkeypatch.delenv(name, raising=False)
    settings = core_config.get_settings()
    assert settings.storage_backend == "json"
    assert settings.persistent is True
    assert settings.data_file == core_config.DEFAULT_DATA_FILE
    assert settings.default_page_size == 25
    assert settings.default_principal == "anonymous"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("GIFTS_PERSISTENT", "off")
    monkeypatch.setenv("GIFTS_DATA_FILE", str(tmp_path / "g.json"))
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "not-a-number")
    settings = core_config.get_settings()
    assert settings.persistent is False
    assert settings.data_file == tmp_path / "g.json"
    assert settings.default_page_size == 25


def test_build_store_uses_json_backend(monkeypatch, tmp_path):
    monkeypatch.setenv("GIFTS_STORAGE", "json")
    monkeypatch.setenv("GIFTS_DATA_FILE", str(tmp_path / "g.json"))
    store = build_gift_store()
    assert isinstance(store.storage, JsonGiftStorage)
    assert store.storage.path == tmp_path / "g.json"


def test_build_store_rejects_unknown_backend(monkeypatch):
    monkeypatch.setenv("GIFTS_STORAGE", "redis")
    with pytest.raises(ValueError):
        build_gift_store()


def test_principal_scope(monkeypatch):
    monkeypatch.setenv("DEFAULT_PRINCIPAL", "service")
    assert current_principal() == "service"
    with principal_scope("alice") as who:
        assert who == "alice"
        assert current_principal() == "alice"
    with principal_scope("   "):
        assert current_principal() == "service"
    assert current_principal() == "service"
