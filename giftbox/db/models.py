"""SQLAlchemy model mirroring the JSON gift snapshot."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Text

from .session import Base


class GiftRecord(Base):
    __tablename__ = "gifts"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(String(255), nullable=True)
    modified_at = Column(DateTime(timezone=True), nullable=True)
    modified_by = Column(String(255), nullable=True)
