"""Datetime helpers shared across the application."""

from __future__ import annotations

from datetime import UTC, datetime

__all__ = [
    "elapsed_hours",
    "ensure_utc",
    "format_last_interaction",
    "parse_timestamp",
]


def ensure_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC, assuming UTC for naive values."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO 8601 string or ``datetime`` into an aware UTC value.

    Anything that cannot be interpreted yields ``None`` instead of raising.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return ensure_utc(parsed)


def elapsed_hours(value: object, now: datetime) -> float | None:
    """Hours between ``value`` and ``now``; future timestamps count as zero."""
    start = parse_timestamp(value)
    reference = ensure_utc(now)
    if start is None or reference is None:
        return None
    seconds = (reference - start).total_seconds()
    return max(seconds, 0.0) / 3600


def format_last_interaction(value: object, now: datetime) -> str:
    """Return a short relative description such as ``"3h atrás"``."""
    start = parse_timestamp(value)
    reference = ensure_utc(now)
    if start is None or reference is None:
        return "Data desconhecida"
    seconds = max(int((reference - start).total_seconds()), 0)
    if seconds < 3600:
        return f"{seconds // 60}min atrás"
    if seconds < 24 * 3600:
        return f"{seconds // 3600}h atrás"
    if seconds < 7 * 24 * 3600:
        return f"{seconds // 86400}d atrás"
    return start.strftime("%d/%m/%Y")
