"""Heuristic momentum scoring for customer conversations."""

from .actions import recommend_action
from .decay import compute_decay, decay_factor
from .keywords import KeywordClassifier, VocabularyRule
from .scoring import MomentumScorer, classify_tier
from .transformer import MomentumTransformer, urgency_level
from .urgency import detect_urgency
from .valuation import TierValueEstimator

__all__ = [
    "KeywordClassifier",
    "MomentumScorer",
    "MomentumTransformer",
    "TierValueEstimator",
    "VocabularyRule",
    "classify_tier",
    "compute_decay",
    "decay_factor",
    "detect_urgency",
    "recommend_action",
    "urgency_level",
]
