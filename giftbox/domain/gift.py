"""Gift record and its JSON representation."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

# attribute name -> JSON key
_JSON_KEYS = {
    "id": "id",
    "title": "title",
    "description": "description",
    "created_at": "createdAt",
    "created_by": "createdBy",
    "modified_at": "modifiedAt",
    "modified_by": "modifiedBy",
}
_TIMESTAMPS = ("created_at", "modified_at")


@dataclass
class Gift:
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    modified_at: Optional[datetime] = None
    modified_by: Optional[str] = None

    def to_json(self) -> dict:
        data = asdict(self)
        for name in _TIMESTAMPS:
            value = data[name]
            data[name] = value.isoformat() if value else None
        return {_JSON_KEYS[name]: value for name, value in data.items()}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Gift":
        values = {name: data.get(key) for name, key in _JSON_KEYS.items()}
        for name in _TIMESTAMPS:
            values[name] = parse_timestamp(values[name])
        return cls(**values)


def parse_timestamp(value: Any) -> datetime | None:
    """Accept datetimes or ISO-8601 strings; naive values are taken as UTC."""
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def has_title(gift: Gift) -> bool:
    return bool((gift.title or "").strip())


def title_order(gift: Gift) -> tuple[str, str]:
    """Sort key for listings: title ascending, id as tie-breaker."""
    return (gift.title or "", gift.id or "")
