"""Tests for time-based momentum decay."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pet_momentum.core.config import MomentumSettings
from pet_momentum.intelligence.decay import (
    REACTIVATION_TRIGGER,
    RECENT_TRIGGER,
    VERY_RECENT_TRIGGER,
    compute_decay,
    decay_factor,
)

NOW = datetime(2025, 10, 26, 12, 0, tzinfo=timezone.utc)
SETTINGS = MomentumSettings()


@pytest.mark.parametrize(
    ("hours", "expected"),
    [
        (0, 1.0),
        (0.99, 1.0),
        (1, 0.9),
        (2.9, 0.9),
        (3, 0.8),
        (5.99, 0.8),
        (6, 0.7),
        (23, 0.7),
        (24, 0.5),
        (167, 0.5),
        (168, 0.3),
        (719, 0.3),
        (720, 0.1),
        (10_000, 0.1),
        (None, 0.1),
    ],
)
def test_decay_buckets(hours: float | None, expected: float) -> None:
    assert decay_factor(hours, SETTINGS) == expected


def test_decay_never_increases_with_time() -> None:
    hours = [step * 0.5 for step in range(0, 2000)]
    factors = [decay_factor(value, SETTINGS) for value in hours]

    assert all(later <= earlier for earlier, later in zip(factors, factors[1:]))


@pytest.mark.parametrize(
    ("age", "trigger"),
    [
        (timedelta(minutes=10), VERY_RECENT_TRIGGER),
        (timedelta(hours=4), RECENT_TRIGGER),
        (timedelta(hours=48), None),
        (timedelta(hours=168), None),
        (timedelta(days=8), REACTIVATION_TRIGGER),
    ],
)
def test_recency_triggers(age: timedelta, trigger: str | None) -> None:
    result = compute_decay(NOW - age, NOW, SETTINGS)

    assert result.trigger == trigger


def test_missing_timestamp_is_treated_as_oldest() -> None:
    result = compute_decay(None, NOW, SETTINGS)

    assert result.factor == 0.1
    assert result.elapsed_hours is None
    assert result.trigger is None
    assert not (result.very_recent or result.recent or result.needs_reactivation)


def test_future_timestamp_counts_as_just_now() -> None:
    result = compute_decay(NOW + timedelta(hours=2), NOW, SETTINGS)

    assert result.elapsed_hours == 0
    assert result.factor == 1.0
    assert result.very_recent is True


def test_naive_timestamp_assumed_utc() -> None:
    naive = (NOW - timedelta(hours=4)).replace(tzinfo=None)

    result = compute_decay(naive, NOW, SETTINGS)

    assert result.elapsed_hours == pytest.approx(4)
    assert result.factor == 0.8
