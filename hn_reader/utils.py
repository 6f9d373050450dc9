"""
Small helpers shared by the parsers, mappers and the domain model.
"""

import re
from datetime import datetime, timezone
from typing import Iterable, Optional

from .config import INFO_SEPARATOR

_LEADING_INT = re.compile(r"^\s*(-?\d+)")


def ensure_utc(dt: datetime) -> datetime:
    """
    Return a timezone aware datetime in UTC.

    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_int(value, default: Optional[int] = None) -> Optional[int]:
    """Parse an integer from an int or a numeric string, else return default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def parse_leading_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the integer at the start of a label such as "123 points".

    Returns None when the label does not start with a number.
    """
    if not text:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def classify_title(title: str, url: Optional[str]) -> str:
    """
    Classify a story as "show", "ask" or "normal".

    Prefix checks are exact and case-sensitive. A story without an
    external URL is a text post and counts as "ask".
    """
    if title.startswith("Show HN:"):
        return "show"
    if title.startswith("Ask HN:") or url is None:
        return "ask"
    return "normal"


def time_ago(date: datetime, now: Optional[datetime] = None) -> str:
    """Render a relative age label like "3 hours ago"."""
    now = ensure_utc(now or utc_now())
    seconds = int((now - ensure_utc(date)).total_seconds())
    if seconds < 60:
        return "just now"

    for unit, size in (("year", 365 * 86400), ("month", 30 * 86400),
                       ("day", 86400), ("hour", 3600), ("minute", 60)):
        count = seconds // size
        if count >= 1:
            return f"{count} {unit}{'s' if count > 1 else ''} ago"
    return "just now"


def join_info(parts: Iterable[Optional[str]]) -> str:
    """Join the present parts of an info line with a middle dot."""
    return INFO_SEPARATOR.join(part for part in parts if part)
