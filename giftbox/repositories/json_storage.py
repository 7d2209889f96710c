"""
JSON-file snapshot adapter.

The file holds a JSON array of gift objects. It is read once to seed the
store and rewritten completely after every mutation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
import json
import logging

from giftbox.domain.gift import Gift

from .base import StorageError

logger = logging.getLogger(__name__)


class JsonGiftStorage:
    """Reads and writes the whole gift collection as one JSON document."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def import_json(self) -> list[Gift]:
        if not self.path.exists():
            logger.info("snapshot %s does not exist yet, starting empty", self.path)
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(f"cannot read gift snapshot {self.path}: {exc}") from exc
        if not isinstance(raw, list):
            raise StorageError(f"gift snapshot {self.path} must contain a JSON array")
        gifts = []
        for position, item in enumerate(raw):
            if not isinstance(item, dict):
                logger.warning("discarding entry %d of %s: not a JSON object (%r)", position, self.path, item)
                continue
            try:
                gifts.append(Gift.from_json(item))
            except (TypeError, ValueError) as exc:
                raise StorageError(f"invalid gift in snapshot {self.path}: {exc}") from exc
        return gifts

    def export_json(self, gifts: Iterable[Gift]) -> None:
        payload = [gift.to_json() for gift in gifts]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"cannot write gift snapshot {self.path}: {exc}") from exc
        logger.debug("exported %d gifts to %s", len(payload), self.path)
