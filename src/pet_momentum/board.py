"""Filtering, grouping, and summary helpers for the momentum board."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pet_momentum.core.models import BoardSummary, MomentumResult, MomentumTier


def filter_results(
    results: Iterable[MomentumResult],
    *,
    query: str | None = None,
    tier: MomentumTier | None = None,
) -> list[MomentumResult]:
    """Return results matching a free-text query and an optional tier."""
    needle = (query or "").strip().lower()
    selected: list[MomentumResult] = []
    for result in results:
        if tier is not None and result.tier is not tier:
            continue
        if needle and not _matches_query(result, needle):
            continue
        selected.append(result)
    return selected


def group_by_tier(
    results: Iterable[MomentumResult],
) -> dict[MomentumTier, list[MomentumResult]]:
    """Bucket results per tier, highest score first within each column."""
    columns: dict[MomentumTier, list[MomentumResult]] = {
        tier: [] for tier in MomentumTier
    }
    for result in results:
        columns[result.tier].append(result)
    for column in columns.values():
        column.sort(key=lambda item: item.score, reverse=True)
    return columns


def summarize(results: Sequence[MomentumResult]) -> BoardSummary:
    """Count results per tier and total their potential value."""
    counts = {tier: 0 for tier in MomentumTier}
    for result in results:
        counts[result.tier] += 1
    return BoardSummary(
        total=len(results),
        hot=counts[MomentumTier.HOT],
        warm=counts[MomentumTier.WARM],
        cold=counts[MomentumTier.COLD],
        total_value=sum(result.potential_value for result in results),
    )


def _matches_query(result: MomentumResult, needle: str) -> bool:
    haystacks = (result.customer_name, result.pet_name or "", result.last_message)
    return any(needle in value.lower() for value in haystacks)


__all__ = ["filter_results", "group_by_tier", "summarize"]
