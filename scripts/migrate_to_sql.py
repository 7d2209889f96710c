"""One-off migration script: JSON gift snapshot -> SQL gifts table."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the giftbox package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from giftbox.core.config import get_settings
from giftbox.db.create_tables import create_all
from giftbox.repositories.base import StorageError
from giftbox.repositories.json_storage import JsonGiftStorage
from giftbox.repositories.sql_repository import SQLGiftStorage


def migrate(source: Path) -> int:
    if not source.exists():
        raise SystemExit(f"File not found: {source}")
    gifts = JsonGiftStorage(source).import_json()
    create_all()
    SQLGiftStorage().export_json(gifts)
    return len(gifts)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Copy a JSON gift snapshot into DATABASE_URL")
    ap.add_argument("--source", type=Path, default=None, help="JSON snapshot (default: GIFTS_DATA_FILE)")
    args = ap.parse_args(argv)
    source = args.source or get_settings().data_file
    try:
        count = migrate(source)
    except StorageError as exc:
        raise SystemExit(f"Migration failed: {exc}") from exc
    print(f"{count} gifts migrated to SQL successfully.")


if __name__ == "__main__":
    main()
