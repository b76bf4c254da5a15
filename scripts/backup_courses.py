#!/usr/bin/env python3
"""
Export or restore the course collection of the configured backend.

Usage:
  python scripts/backup_courses.py export [--output backup.json]
  python scripts/backup_courses.py import backup.json
  python scripts/backup_courses.py clear
"""
from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.core.config import get_settings
from catalog.services.container import build_catalog

logger = logging.getLogger("backup_courses")


class _ScriptOperator:
    """The operator running this script is trusted like a logged-in admin."""

    def is_authenticated(self) -> bool:
        return True


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Back up or restore TNQDO courses")
    sub = ap.add_subparsers(dest="command", required=True)
    export_cmd = sub.add_parser("export", help="Write every course as a JSON array")
    export_cmd.add_argument("--output", help="Destination file (default: stdout)")
    import_cmd = sub.add_parser("import", help="Replace every course with a JSON backup")
    import_cmd.add_argument("path", help="Backup file produced by export")
    sub.add_parser("clear", help="Remove every course and reset the id counter")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Backups act on what is stored; never seed defaults first.
    catalog = build_catalog(replace(get_settings(), seed_defaults=False))
    service = catalog.course_service(_ScriptOperator())
    if args.command == "export":
        result = service.export_courses()
        if result.error:
            raise SystemExit(result.error)
        if args.output:
            Path(args.output).write_text(result.data, encoding="utf-8")
            logger.info("Courses written to %s", args.output)
        else:
            print(result.data)
        return 0
    if args.command == "import":
        outcome = service.import_courses(Path(args.path).read_text(encoding="utf-8"))
    else:
        outcome = service.clear_courses()
    if not outcome.success:
        raise SystemExit(outcome.error)
    logger.info("%s finished", args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
