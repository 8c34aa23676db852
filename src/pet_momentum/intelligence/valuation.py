"""Potential value estimates shown next to each conversation."""

from __future__ import annotations

from pet_momentum.core.config import ValuationSettings
from pet_momentum.core.interfaces import RandomSource
from pet_momentum.core.models import MomentumTier


class TierValueEstimator:
    """Multiply a base consultation value by a per-tier factor.

    With ``jitter`` left at zero the estimate is a pure function of the tier.
    A positive ``jitter`` adds a uniform variation drawn from ``rng`` for
    display purposes; the minimum value still holds.
    """

    def __init__(
        self,
        settings: ValuationSettings | None = None,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        self._settings = settings or ValuationSettings()
        if self._settings.jitter and rng is None:
            raise ValueError("rng is required when valuation jitter is enabled")
        self._rng = rng

    def estimate(self, tier: MomentumTier) -> float:
        settings = self._settings
        multipliers = {
            MomentumTier.HOT: settings.hot_multiplier,
            MomentumTier.WARM: settings.warm_multiplier,
            MomentumTier.COLD: settings.cold_multiplier,
        }
        value = settings.base_value * multipliers[tier]
        if settings.jitter and self._rng is not None:
            value += self._rng.uniform(-settings.jitter, settings.jitter)
        return max(value, settings.minimum_value)


__all__ = ["TierValueEstimator"]
