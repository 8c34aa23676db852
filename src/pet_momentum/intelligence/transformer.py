"""Batch orchestration turning conversation snapshots into board records."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from pet_momentum.core.config import AppSettings
from pet_momentum.core.datetime_utils import format_last_interaction
from pet_momentum.core.interfaces import (
    ConversationSource,
    RandomSource,
    ValueEstimator,
)
from pet_momentum.core.models import (
    ConversationSnapshot,
    MomentumResult,
    MomentumScore,
    MomentumTier,
    UrgencyLevel,
)
from pet_momentum.ingestion.parser import ConversationParser

from .actions import recommend_action
from .scoring import MomentumScorer
from .valuation import TierValueEstimator

LOGGER = logging.getLogger(__name__)


def urgency_level(score: MomentumScore) -> UrgencyLevel:
    """Derive the board urgency badge from tier and signals."""
    if score.signals.urgent:
        return UrgencyLevel.HIGH
    if score.tier is MomentumTier.HOT or score.signals.very_recent:
        return UrgencyLevel.MEDIUM
    return UrgencyLevel.LOW


class MomentumTransformer:
    """Score, explain, and value a batch of conversations."""

    def __init__(
        self,
        scorer: MomentumScorer | None = None,
        estimator: ValueEstimator | None = None,
        parser: ConversationParser | None = None,
    ) -> None:
        self._scorer = scorer or MomentumScorer()
        self._estimator = estimator or TierValueEstimator()
        self._parser = parser or ConversationParser()

    @classmethod
    def from_settings(
        cls, settings: AppSettings, *, rng: RandomSource | None = None
    ) -> MomentumTransformer:
        """Wire scorer and estimator from loaded application settings."""
        return cls(
            scorer=MomentumScorer(settings.momentum),
            estimator=TierValueEstimator(settings.valuation, rng=rng),
        )

    def transform_one(
        self, snapshot: ConversationSnapshot, now: datetime | None = None
    ) -> MomentumResult:
        """Build the board record for a single snapshot."""
        reference = now or datetime.now(tz=UTC)
        score = self._scorer.score(snapshot, now=reference)
        return MomentumResult(
            id=snapshot.id,
            customer_name=snapshot.customer_name,
            customer_phone=snapshot.customer_phone,
            pet_name=snapshot.pet_name,
            last_message=snapshot.last_message,
            timestamp=snapshot.timestamp,
            tier=score.tier,
            score=score.score,
            triggers=score.triggers,
            next_action=recommend_action(score.tier, score.signals),
            potential_value=self._estimator.estimate(score.tier),
            urgency_level=urgency_level(score),
            last_interaction=format_last_interaction(snapshot.updated_at, reference),
            signals=score.signals,
        )

    def transform(
        self, snapshots: Iterable[ConversationSnapshot], now: datetime | None = None
    ) -> list[MomentumResult]:
        """Score snapshots in order against a single reference time."""
        reference = now or datetime.now(tz=UTC)
        results = [self.transform_one(snapshot, reference) for snapshot in snapshots]
        LOGGER.info(
            "Scored %d conversations (%d hot)",
            len(results),
            sum(1 for result in results if result.tier is MomentumTier.HOT),
        )
        return results

    def transform_source(
        self, source: ConversationSource, now: datetime | None = None
    ) -> list[MomentumResult]:
        """Parse raw records from ``source`` and score the valid ones."""
        snapshots = self._parser.parse_many(source.list_conversations())
        return self.transform(snapshots, now=now)


__all__ = ["MomentumTransformer", "urgency_level"]
