"""Create the gifts table on the configured DATABASE_URL."""
from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers GiftRecord on Base.metadata

logger = logging.getLogger(__name__)


def create_all(engine: Engine | None = None) -> None:
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("gift tables ready on %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
