"""Heuristic distress detection for conversation messages."""

from __future__ import annotations

from pet_momentum.core.config import MomentumSettings
from pet_momentum.core.models import UrgencySignal

URGENCY_MARKER = "🚨 Urgência detectada"


def detect_urgency(text: str | None, settings: MomentumSettings) -> UrgencySignal:
    """Flag messages containing any distress term, independent of intent tier."""
    haystack = (text or "").lower()
    matched = tuple(
        keyword for keyword in settings.urgency_keywords if keyword in haystack
    )
    if not haystack or not matched:
        return UrgencySignal(urgent=False, multiplier=1.0, matched=(), triggers=())
    return UrgencySignal(
        urgent=True,
        multiplier=settings.urgency_multiplier,
        matched=matched,
        triggers=tuple(f'{URGENCY_MARKER}: "{keyword}"' for keyword in matched),
    )


__all__ = ["URGENCY_MARKER", "detect_urgency"]
