"""Create the catalog tables (courses, blog_posts, id_counters) on the configured database."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the catalog tables on Base.metadata

logger = logging.getLogger(__name__)


def create_all() -> list[str]:
    """Create any missing catalog tables; returns the table names known to the metadata."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        tables = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create catalog tables: {exc}") from exc
    logger.info("Catalog tables ready: %s", ", ".join(tables))
