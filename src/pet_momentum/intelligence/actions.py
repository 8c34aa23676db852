"""Next-action recommendations for scored conversations."""

from __future__ import annotations

from pet_momentum.core.models import ActionType, MomentumSignals, MomentumTier, NextAction

EMERGENCY_CONTACT = NextAction(
    type=ActionType.EMERGENCY_CONTACT,
    label="Contatar imediatamente - Emergência detectada",
    priority=10,
)
CLOSE_SALE = NextAction(
    type=ActionType.CLOSE_SALE,
    label="Finalizar venda enquanto o interesse está alto",
    priority=9,
)
SEND_QUOTE = NextAction(
    type=ActionType.SEND_QUOTE,
    label="Enviar orçamento personalizado",
    priority=8,
)
HUMAN_TAKEOVER = NextAction(
    type=ActionType.HUMAN_TAKEOVER,
    label="Assumir conversa da IA para nutrir relacionamento",
    priority=6,
)
NURTURE = NextAction(
    type=ActionType.NURTURE,
    label="Nutrir relacionamento com conteúdo relevante",
    priority=5,
)
WARM_GREETING = NextAction(
    type=ActionType.WARM_GREETING,
    label="Responder com saudação calorosa",
    priority=4,
)
REACTIVATE = NextAction(
    type=ActionType.REACTIVATE,
    label="Reativar relacionamento com dica ou promoção",
    priority=3,
)
GENERAL_FOLLOW_UP = NextAction(
    type=ActionType.GENERAL_FOLLOW_UP,
    label="Acompanhamento geral",
    priority=1,
)


def recommend_action(tier: MomentumTier, signals: MomentumSignals) -> NextAction:
    """Pick the first matching row of the tier/signal decision table."""
    if tier is MomentumTier.HOT:
        if signals.urgent:
            return EMERGENCY_CONTACT
        if signals.very_recent:
            return CLOSE_SALE
        return SEND_QUOTE
    if tier is MomentumTier.WARM:
        if signals.ai_handled:
            return HUMAN_TAKEOVER
        return NURTURE
    if tier is MomentumTier.COLD:
        if signals.very_recent:
            return WARM_GREETING
        return REACTIVATE
    return GENERAL_FOLLOW_UP


__all__ = [
    "CLOSE_SALE",
    "EMERGENCY_CONTACT",
    "GENERAL_FOLLOW_UP",
    "HUMAN_TAKEOVER",
    "NURTURE",
    "REACTIVATE",
    "SEND_QUOTE",
    "WARM_GREETING",
    "recommend_action",
]
