from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from ..core.exceptions import InvalidRangeError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    v = (value or "").strip()
    if not v:
        return None
    try:
        return parse_iso_date(v)
    except ValueError:
        raise InvalidRangeError(f"Invalid date: {v} (expected YYYY-MM-DD)")


def date_key(day: date) -> str:
    """Holiday key built from the local year/month/day, never from a UTC instant."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each calendar day from start to end inclusive (nothing if end < start)."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
