"""Tests for intent vocabulary matching and distress detection."""

from __future__ import annotations

import pytest

from pet_momentum.core.config import MomentumSettings
from pet_momentum.core.models import MomentumTier
from pet_momentum.intelligence.keywords import KeywordClassifier, VocabularyRule
from pet_momentum.intelligence.urgency import URGENCY_MARKER, detect_urgency


@pytest.fixture
def classifier() -> KeywordClassifier:
    return KeywordClassifier(MomentumSettings())


def test_counts_each_tier_and_labels_triggers(classifier: KeywordClassifier) -> None:
    matches = classifier.classify("Olá, gostaria de saber o preço do banho para hoje")

    assert (matches.hot, matches.warm, matches.cold) == (2, 1, 1)
    assert matches.dominant is MomentumTier.HOT
    assert matches.triggers == (
        'Interesse imediato: "preço"',
        'Interesse imediato: "hoje"',
        'Demonstra interesse: "gostaria"',
        'Primeiro contato: "olá"',
    )


def test_matching_is_case_insensitive(classifier: KeywordClassifier) -> None:
    matches = classifier.classify("QUANTO CUSTA O PREÇO?")

    assert matches.hot == 2


def test_matching_uses_substrings_not_words(classifier: KeywordClassifier) -> None:
    """The cold term 'oi' matches inside 'noite'."""
    matches = classifier.classify("Boa noite")

    assert matches.cold == 1
    assert matches.triggers == ('Primeiro contato: "oi"',)


def test_repeated_term_counts_once(classifier: KeywordClassifier) -> None:
    matches = classifier.classify("hoje hoje hoje")

    assert matches.hot == 1


def test_dominant_tier_falls_through_in_order(classifier: KeywordClassifier) -> None:
    assert classifier.classify("gostaria de uma informação").dominant is MomentumTier.WARM
    assert classifier.classify("bom dia").dominant is MomentumTier.COLD


@pytest.mark.parametrize("text", ["", None, "Tudo certo com o Rex?"])
def test_no_matches(classifier: KeywordClassifier, text: str | None) -> None:
    matches = classifier.classify(text)

    assert (matches.hot, matches.warm, matches.cold) == (0, 0, 0)
    assert matches.dominant is None
    assert matches.triggers == ()


def test_custom_rules_replace_default_vocabularies() -> None:
    classifier = KeywordClassifier(
        rules=[
            VocabularyRule(
                tier=MomentumTier.HOT,
                trigger_prefix="Serviço pedido",
                keywords=("tosa", "banho"),
            )
        ]
    )

    matches = classifier.classify("Quero uma tosa, bom dia")

    assert (matches.hot, matches.warm, matches.cold) == (1, 0, 0)
    assert matches.dominant is MomentumTier.HOT
    assert matches.triggers == ('Serviço pedido: "tosa"',)


def test_urgency_detected_independent_of_intent() -> None:
    signal = detect_urgency("meu cachorro está sangrando, socorro!", MomentumSettings())

    assert signal.urgent is True
    assert signal.multiplier == 1.5
    assert set(signal.matched) == {"sangrando", "socorro"}
    assert all(trigger.startswith(URGENCY_MARKER) for trigger in signal.triggers)
    assert len(signal.triggers) == 2


@pytest.mark.parametrize("text", ["quero agendar para hoje", "", None])
def test_no_urgency_without_distress_terms(text: str | None) -> None:
    signal = detect_urgency(text, MomentumSettings())

    assert signal.urgent is False
    assert signal.multiplier == 1.0
    assert signal.triggers == ()
