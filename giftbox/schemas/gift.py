"""
Gift request/response schemas.

Field names follow the JSON snapshot (camelCase); Python attributes stay
snake_case.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from giftbox.domain.gift import Gift


class GiftIn(BaseModel):
    """Payload for create and update. Server-owned fields are accepted and ignored."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    created_by: Optional[str] = Field(None, alias="createdBy")
    modified_at: Optional[datetime] = Field(None, alias="modifiedAt")
    modified_by: Optional[str] = Field(None, alias="modifiedBy")

    def to_gift(self) -> Gift:
        return Gift(**self.model_dump())


class GiftOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    created_by: Optional[str] = Field(None, alias="createdBy")
    modified_at: Optional[datetime] = Field(None, alias="modifiedAt")
    modified_by: Optional[str] = Field(None, alias="modifiedBy")
