"""Time-based decay of conversation momentum."""

from __future__ import annotations

from datetime import datetime

from pet_momentum.core.config import MomentumSettings
from pet_momentum.core.datetime_utils import elapsed_hours
from pet_momentum.core.models import DecayResult

VERY_RECENT_TRIGGER = "⚡ Interação muito recente"
RECENT_TRIGGER = "🕐 Interação recente"
REACTIVATION_TRIGGER = "📅 Precisa reativar relacionamento"


def decay_factor(hours: float | None, settings: MomentumSettings) -> float:
    """Map elapsed hours to the first matching bucket factor."""
    if hours is None:
        return settings.stale_factor
    for bucket in settings.decay_buckets:
        if hours < bucket.max_hours:
            return bucket.factor
    return settings.stale_factor


def compute_decay(
    updated_at: datetime | str | None, now: datetime, settings: MomentumSettings
) -> DecayResult:
    """Return the decay factor and recency markers for ``updated_at``.

    A missing timestamp lands in the oldest bucket and produces no recency
    trigger.
    """
    hours = elapsed_hours(updated_at, now)
    factor = decay_factor(hours, settings)
    if hours is None:
        return DecayResult(
            factor=factor,
            elapsed_hours=None,
            very_recent=False,
            recent=False,
            needs_reactivation=False,
            trigger=None,
        )

    very_recent = hours < settings.very_recent_hours
    recent = hours < settings.recent_hours
    needs_reactivation = hours > settings.reactivation_hours

    trigger: str | None = None
    if very_recent:
        trigger = VERY_RECENT_TRIGGER
    elif recent:
        trigger = RECENT_TRIGGER
    elif needs_reactivation:
        trigger = REACTIVATION_TRIGGER

    return DecayResult(
        factor=factor,
        elapsed_hours=hours,
        very_recent=very_recent,
        recent=recent,
        needs_reactivation=needs_reactivation,
        trigger=trigger,
    )


__all__ = [
    "REACTIVATION_TRIGGER",
    "RECENT_TRIGGER",
    "VERY_RECENT_TRIGGER",
    "compute_decay",
    "decay_factor",
]
