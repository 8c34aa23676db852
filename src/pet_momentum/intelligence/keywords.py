"""Rule-based intent vocabulary matching for conversation messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pet_momentum.core.config import MomentumSettings
from pet_momentum.core.models import KeywordMatches, MomentumTier


@dataclass(frozen=True)
class VocabularyRule:
    """Vocabulary for one tier and the label used in its triggers."""

    tier: MomentumTier
    trigger_prefix: str
    keywords: tuple[str, ...]


class KeywordClassifier:
    """Count hot, warm, and cold vocabulary hits inside a message.

    Matching is substring containment on lower-cased text, so ``"oi"`` also
    hits inside ``"noite"``. Each term counts once regardless of repetitions.
    """

    def __init__(
        self,
        settings: MomentumSettings | None = None,
        rules: Sequence[VocabularyRule] | None = None,
    ) -> None:
        settings = settings or MomentumSettings()
        self._rules: tuple[VocabularyRule, ...] = (
            tuple(rules)
            if rules is not None
            else (
                VocabularyRule(
                    tier=MomentumTier.HOT,
                    trigger_prefix="Interesse imediato",
                    keywords=settings.hot_keywords,
                ),
                VocabularyRule(
                    tier=MomentumTier.WARM,
                    trigger_prefix="Demonstra interesse",
                    keywords=settings.warm_keywords,
                ),
                VocabularyRule(
                    tier=MomentumTier.COLD,
                    trigger_prefix="Primeiro contato",
                    keywords=settings.cold_keywords,
                ),
            )
        )

    def classify(self, text: str | None) -> KeywordMatches:
        """Return per-tier match counts and one trigger per matched term."""
        haystack = (text or "").lower()
        counts = {tier: 0 for tier in MomentumTier}
        triggers: list[str] = []

        if haystack:
            for rule in self._rules:
                for keyword in rule.keywords:
                    if keyword in haystack:
                        counts[rule.tier] += 1
                        triggers.append(f'{rule.trigger_prefix}: "{keyword}"')

        return KeywordMatches(
            hot=counts[MomentumTier.HOT],
            warm=counts[MomentumTier.WARM],
            cold=counts[MomentumTier.COLD],
            triggers=tuple(triggers),
        )


__all__ = ["KeywordClassifier", "VocabularyRule"]
