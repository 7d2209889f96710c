#!/usr/bin/env python3
"""
Create one gift through the configured store (GIFTS_STORAGE, GIFTS_DATA_FILE, DATABASE_URL).

Usage:
  python scripts/add_gift.py --title "Book" [--description "..."] [--principal alice]
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the giftbox package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from giftbox.core.config import get_settings
from giftbox.core.logging_config import setup_logging
from giftbox.core.principal import principal_scope
from giftbox.domain.gift import Gift
from giftbox.services.gift_service import GiftError, build_gift_store


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create a gift")
    ap.add_argument("--title", required=True, help="Gift title (non-empty)")
    ap.add_argument("--description", help="Optional description")
    ap.add_argument("--principal", help="Identity stamped in createdBy/modifiedBy")
    args = ap.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    store = build_gift_store(settings)
    if not store.persistent:
        sys.stderr.write("Warning: GIFTS_PERSISTENT is off, the gift will not be saved\n")

    with principal_scope(args.principal):
        gift = store.create(Gift(title=args.title, description=args.description))
    print("OK: gift created")
    print(f"  ID: {gift.id}")
    print(f"  Title: {gift.title}")
    print(f"  Created by: {gift.created_by}")
    print(f"  Gifts stored: {store.count()}")


if __name__ == "__main__":
    try:
        main()
    except GiftError as exc:
        sys.stderr.write(f"Error: {exc.message}\n")
        raise SystemExit(1)
