"""
Utility helpers shared across repositories/services.
"""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """
    Current UTC time in the ``2025-01-15T10:00:00.000Z`` form used by stored records.
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str | None) -> datetime:
    """
    Parse an ISO-8601 timestamp; unknown or empty values sort before everything else.
    """
    if not value:
        return datetime.min.replace(tzinfo=timezone.utc)
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return datetime.min.replace(tzinfo=timezone.utc)
    # Naive timestamps are treated as UTC.
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def later_iso(current: str | None, candidate: str) -> str:
    """Return whichever timestamp is later, keeping ``updatedAt`` non-decreasing."""
    if current and parse_iso(current) > parse_iso(candidate):
        return current
    return candidate
