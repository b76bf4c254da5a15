"""One-off migration script: local JSON catalog (data.json) -> SQL database."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

# Make the catalog package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import delete

from catalog.core.config import get_settings
from catalog.db.create_tables import create_all
from catalog.db.models import BlogPostRow, IdCounter
from catalog.db.session import get_session
from catalog.repositories.json_storage import JsonFileStorage
from catalog.repositories.local_repository import LocalBlogRepository, LocalCourseRepository
from catalog.repositories.sql_repository import (
    BLOG_COUNTER,
    COURSES_COUNTER,
    SQLCourseRepository,
    post_to_row,
)

logger = logging.getLogger("migrate_to_sql")


def migrate(data_file: Path) -> tuple[int, int]:
    if not data_file.exists():
        raise SystemExit(f"File not found: {data_file}")
    storage = JsonFileStorage(data_file)
    local_courses = LocalCourseRepository(storage)
    local_posts = LocalBlogRepository(storage)

    create_all()
    if not SQLCourseRepository().import_snapshot(local_courses.export_snapshot()):
        raise SystemExit("Failed to copy courses")

    posts = local_posts.get_all()
    with get_session() as session:
        session.execute(delete(BlogPostRow))
        for post in posts:
            session.add(BlogPostRow(**post_to_row(post)))
        # Carry the counters over so new ids keep counting from where the file left off.
        session.merge(IdCounter(name=COURSES_COUNTER, value=local_courses.store.next_id()))
        session.merge(IdCounter(name=BLOG_COUNTER, value=local_posts.store.next_id()))
        session.commit()
    return len(local_courses.get_all()), len(posts)


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy the local JSON catalog into the SQL database")
    ap.add_argument("--data-file", help="JSON file to read (default: CATALOG_DATA_FILE)")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    data_file = Path(args.data_file) if args.data_file else get_settings().data_file
    courses, posts = migrate(data_file)
    logger.info("Migrated %d courses and %d blog posts from %s", courses, posts, data_file)


if __name__ == "__main__":
    main()
