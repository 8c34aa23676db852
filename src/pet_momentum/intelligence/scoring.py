"""Momentum scoring for customer conversations.

The score combines four signals:

* intent keywords pick a base score from the dominant tier (hot, warm, cold)
* time since the last interaction scales that base down
* distress vocabulary multiplies it up
* unread messages add a capped number of points afterwards

The result is clamped to ``[0, max_score]`` and mapped to a tier using fixed
thresholds.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from pet_momentum.core.config import MomentumSettings
from pet_momentum.core.models import (
    ConversationSnapshot,
    KeywordMatches,
    MomentumScore,
    MomentumSignals,
    MomentumTier,
)

from .decay import compute_decay
from .keywords import KeywordClassifier
from .urgency import detect_urgency

LOGGER = logging.getLogger(__name__)

AI_HANDLED_TRIGGER = "🤖 Atendido pela IA"


def classify_tier(score: float, settings: MomentumSettings) -> MomentumTier:
    """Map a clamped score to its momentum tier."""
    if score >= settings.hot_threshold:
        return MomentumTier.HOT
    if score >= settings.warm_threshold:
        return MomentumTier.WARM
    return MomentumTier.COLD


def base_score(matches: KeywordMatches, settings: MomentumSettings) -> float:
    """Return the pre-modifier score for the dominant keyword tier."""
    dominant = matches.dominant
    if dominant is MomentumTier.HOT:
        return settings.hot_base + settings.hot_weight * matches.hot
    if dominant is MomentumTier.WARM:
        return settings.warm_base + settings.warm_weight * matches.warm
    if dominant is MomentumTier.COLD:
        return settings.cold_base + settings.cold_weight * matches.cold
    return settings.floor_score


def unread_boost_points(unread_count: int, settings: MomentumSettings) -> float:
    """Points added for unread messages, capped at ``unread_cap * 100``."""
    unread = max(unread_count, 0)
    return min(unread * settings.unread_step, settings.unread_cap) * 100


def _summary_trigger(matches: KeywordMatches) -> str | None:
    dominant = matches.dominant
    if dominant is MomentumTier.HOT:
        return f"{matches.hot} indicadores de compra detectados"
    if dominant is MomentumTier.WARM:
        return f"{matches.warm} indicadores de interesse detectados"
    if dominant is MomentumTier.COLD:
        return f"{matches.cold} indicadores de primeiro contato"
    return None


def _unread_trigger(unread: int, settings: MomentumSettings) -> str | None:
    if unread > settings.unread_volume_threshold:
        return f"📱 {unread} mensagens não lidas"
    if unread == 1:
        return "📩 1 mensagem aguardando resposta"
    if unread > 1:
        return f"📩 {unread} mensagens aguardando resposta"
    return None


class MomentumScorer:
    """Score conversation snapshots into tiers with explanatory triggers."""

    def __init__(
        self,
        settings: MomentumSettings | None = None,
        *,
        classifier: KeywordClassifier | None = None,
    ) -> None:
        """Store scoring heuristics drawn from application settings."""
        self._settings = settings or MomentumSettings()
        self._classifier = classifier or KeywordClassifier(self._settings)

    @property
    def settings(self) -> MomentumSettings:
        return self._settings

    def score(
        self, snapshot: ConversationSnapshot, now: datetime | None = None
    ) -> MomentumScore:
        """Score a single conversation relative to ``now`` (defaults to UTC now)."""
        settings = self._settings
        reference = now or datetime.now(tz=UTC)
        message = (snapshot.last_message or "").lower()
        unread = max(snapshot.unread_count or 0, 0)

        matches = self._classifier.classify(message)
        urgency = detect_urgency(message, settings)
        decay = compute_decay(snapshot.updated_at, reference, settings)

        raw = (
            base_score(matches, settings) * decay.factor * urgency.multiplier
            + unread_boost_points(unread, settings)
        )
        score = min(max(raw, 0.0), settings.max_score)
        tier = classify_tier(score, settings)

        triggers = [*matches.triggers, *urgency.triggers]
        summary = _summary_trigger(matches)
        if summary:
            triggers.append(summary)
        if decay.trigger:
            triggers.append(decay.trigger)
        unread_trigger = _unread_trigger(unread, settings)
        if unread_trigger:
            triggers.append(unread_trigger)
        if snapshot.is_ai_handled:
            triggers.append(AI_HANDLED_TRIGGER)

        LOGGER.debug(
            "Scored conversation %s: tier=%s score=%.2f decay=%.2f urgent=%s",
            snapshot.id,
            tier.value,
            score,
            decay.factor,
            urgency.urgent,
        )

        return MomentumScore(
            tier=tier,
            score=score,
            triggers=tuple(triggers),
            signals=MomentumSignals(
                urgent=urgency.urgent,
                very_recent=decay.very_recent,
                recent=decay.recent,
                needs_reactivation=decay.needs_reactivation,
                ai_handled=snapshot.is_ai_handled,
                elapsed_hours=decay.elapsed_hours,
            ),
        )


__all__ = [
    "AI_HANDLED_TRIGGER",
    "MomentumScorer",
    "base_score",
    "classify_tier",
    "unread_boost_points",
]
