"""Core domain models used across the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class MomentumTier(str, Enum):
    """Purchase-intent strength of a conversation."""

    HOT = "hot"
    WARM = "warm"
    COLD = "cold"


class UrgencyLevel(str, Enum):
    """How quickly the team should look at a conversation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActionType(str, Enum):
    """Follow-up operations suggested on the momentum board."""

    EMERGENCY_CONTACT = "emergency_contact"
    CLOSE_SALE = "close_sale"
    SEND_QUOTE = "send_quote"
    HUMAN_TAKEOVER = "human_takeover"
    NURTURE = "nurture"
    WARM_GREETING = "warm_greeting"
    REACTIVATE = "reactivate"
    GENERAL_FOLLOW_UP = "general_follow_up"


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True, slots=True)
class ConversationSnapshot:
    """Normalized view of a customer conversation at scoring time."""

    id: str
    customer_name: str
    customer_phone: str
    last_message: str
    unread_count: int
    is_ai_handled: bool
    status: str
    updated_at: datetime | str | None
    pet_name: str | None = None
    timestamp: str | None = None
    contact_id: str | None = None


@dataclass(frozen=True, slots=True)
class KeywordMatches:
    """Intent vocabulary hits found in a message."""

    hot: int
    warm: int
    cold: int
    triggers: tuple[str, ...]

    @property
    def dominant(self) -> MomentumTier | None:
        """Return the first tier with hits, checked hot, warm, then cold."""
        if self.hot:
            return MomentumTier.HOT
        if self.warm:
            return MomentumTier.WARM
        if self.cold:
            return MomentumTier.COLD
        return None


@dataclass(frozen=True, slots=True)
class UrgencySignal:
    """Distress vocabulary detected in a message."""

    urgent: bool
    multiplier: float
    matched: tuple[str, ...]
    triggers: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DecayResult:
    """Decay factor and recency markers derived from elapsed time."""

    factor: float
    elapsed_hours: float | None
    very_recent: bool
    recent: bool
    needs_reactivation: bool
    trigger: str | None


@dataclass(frozen=True, slots=True)
class MomentumSignals:
    """Boolean flags carried from scoring into action selection."""

    urgent: bool = False
    very_recent: bool = False
    recent: bool = False
    needs_reactivation: bool = False
    ai_handled: bool = False
    elapsed_hours: float | None = None


@dataclass(frozen=True, slots=True)
class MomentumScore:
    """Outcome of scoring a single conversation."""

    tier: MomentumTier
    score: float
    triggers: tuple[str, ...]
    signals: MomentumSignals


@dataclass(frozen=True, slots=True)
class NextAction:
    """Recommended follow-up with a relative priority."""

    type: ActionType
    label: str
    priority: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to the board's JSON shape."""
        return {"type": self.type.value, "label": self.label, "priority": self.priority}


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True, slots=True)
class MomentumResult:
    """Presentation record consumed by the momentum board."""

    id: str
    customer_name: str
    customer_phone: str
    pet_name: str | None
    last_message: str
    timestamp: str | None
    tier: MomentumTier
    score: float
    triggers: tuple[str, ...]
    next_action: NextAction
    potential_value: float
    urgency_level: UrgencyLevel
    last_interaction: str
    pet_species: str = "Não informado"
    signals: MomentumSignals = field(default_factory=MomentumSignals)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase record rendered by the board."""
        return {
            "id": self.id,
            "customerName": self.customer_name,
            "customerPhone": self.customer_phone,
            "petName": self.pet_name,
            "petSpecies": self.pet_species,
            "lastMessage": self.last_message,
            "timestamp": self.timestamp,
            "momentum": self.tier.value,
            "score": self.score,
            "triggers": list(self.triggers),
            "lastInteraction": self.last_interaction,
            "potentialValue": self.potential_value,
            "urgencyLevel": self.urgency_level.value,
            "nextAction": self.next_action.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class BoardSummary:
    """Headline counts shown above the momentum board."""

    total: int
    hot: int
    warm: int
    cold: int
    total_value: float


__all__ = [
    "ActionType",
    "BoardSummary",
    "ConversationSnapshot",
    "DecayResult",
    "KeywordMatches",
    "MomentumResult",
    "MomentumScore",
    "MomentumSignals",
    "MomentumTier",
    "NextAction",
    "UrgencyLevel",
    "UrgencySignal",
]
