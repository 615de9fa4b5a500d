"""Date range parsing and validation (core domain)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from core.errors import ValidationError
from core.models import Query

# Calendar date formats accepted from users, tried in order.
DATE_FORMATS = ("%Y-%m-%d", "%m-%d-%Y")

DEFAULT_LATEST_LABEL = "today"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_date(value: str) -> datetime:
    """Parse a calendar date as midnight UTC."""

    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone.utc)
    raise ValidationError(f"Unrecognized date: {value!r}")


def describe_range(
    oldest_text: Optional[str],
    latest_text: Optional[str],
    default_days: int = 30,
) -> tuple[str, str]:
    """Return human labels for the requested range, before validation."""

    return (
        _clean(oldest_text) or f"the past {default_days} days",
        _clean(latest_text) or DEFAULT_LATEST_LABEL,
    )


def build_query(
    channel_id: str,
    oldest_text: Optional[str],
    latest_text: Optional[str],
    now: datetime,
    default_days: int = 30,
) -> Query:
    """Build a Query from optional date texts.

    Omitted dates default to `default_days` before `now` and to `now`.
    Both bounds are truncated to whole epoch seconds.
    """

    oldest_text = _clean(oldest_text)
    latest_text = _clean(latest_text)

    latest_dt = parse_date(latest_text) if latest_text else now
    oldest_dt = parse_date(oldest_text) if oldest_text else now - timedelta(days=default_days)

    oldest = int(oldest_dt.timestamp())
    latest = int(latest_dt.timestamp())
    if oldest >= latest:
        raise ValidationError(f"Oldest date {oldest} is not before latest date {latest}")

    return Query(channel_id=channel_id, oldest=oldest, latest=latest)
