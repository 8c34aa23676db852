"""Protocol interfaces for decoupling components."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from .models import MomentumTier


class SnapshotError(ValueError):
    """Raised when an upstream record cannot be turned into a snapshot."""


class ConversationSource(Protocol):
    """Abstraction over the data layer that supplies conversation records."""

    def list_conversations(self) -> Iterable[Mapping[str, Any]]:
        """Return raw conversation records, most recent first."""
        raise NotImplementedError


class ValueEstimator(Protocol):
    """Estimate the monetary potential of a conversation."""

    def estimate(self, tier: MomentumTier) -> float:
        """Return an estimate in BRL for the given tier."""
        raise NotImplementedError


class RandomSource(Protocol):
    """Subset of :class:`random.Random` used for display jitter."""

    def uniform(self, a: float, b: float) -> float:
        """Return a float drawn from ``[a, b]``."""
        raise NotImplementedError


__all__ = [
    "ConversationSource",
    "RandomSource",
    "SnapshotError",
    "ValueEstimator",
]
