"""
Weight merging and aggregation.

This module turns a per-criterion breakdown plus weights into one overall score:
- `merge_weights`: defaults overlaid with per-request overrides (None keeps the default)
- `active_weights`: keep only weights of criteria that actually produced a score
- `normalize_weights`: rescale non-negative weights so they sum to 1.0
- `aggregate`: rounded weighted mean over the active criteria
"""

from __future__ import annotations

import math
from typing import Mapping

from housematch.domain.models import Criterion, CriteriaWeights, ScoreBreakdown, WeightOverrides


def clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp a number into the [lo, hi] range."""
    return max(lo, min(hi, float(x)))


def round_half_up(x: float) -> int:
    """Round to the nearest integer with .5 going up (built-in `round` rounds to even)."""
    return int(math.floor(float(x) + 0.5))


def coerce_overrides(weights: WeightOverrides | CriteriaWeights | Mapping[str, float | None] | None) -> WeightOverrides:
    """Accept the shapes callers pass weights in and validate them into `WeightOverrides`."""
    if weights is None:
        return WeightOverrides()
    if isinstance(weights, WeightOverrides):
        return weights
    if isinstance(weights, CriteriaWeights):
        return WeightOverrides.model_validate(weights.model_dump())
    # Unknown keys raise a ValidationError (extra="forbid").
    return WeightOverrides.model_validate(dict(weights))


def merge_weights(defaults: CriteriaWeights, overrides: WeightOverrides | None) -> CriteriaWeights:
    """Overlay overrides on the defaults; unspecified keys keep the default value."""
    if overrides is None:
        return defaults
    merged = defaults.model_dump()
    merged.update(overrides.model_dump(exclude_none=True))
    return CriteriaWeights.model_validate(merged)


def active_weights(breakdown: ScoreBreakdown, weights: CriteriaWeights) -> dict[Criterion, float]:
    """Weights restricted to criteria with a non-null score."""
    return {name: float(getattr(weights, name)) for name in breakdown.active()}


def normalize_weights(weights: Mapping[Criterion, float]) -> dict[Criterion, float]:
    """Normalize weights so they sum to 1.0; all zeros when there is nothing to spread."""
    cleaned = {k: max(0.0, float(v)) for k, v in weights.items()}
    total = sum(cleaned.values())
    if total <= 0:
        return {k: 0.0 for k in cleaned}
    return {k: v / total for k, v in cleaned.items()}


def aggregate(breakdown: ScoreBreakdown, weights: CriteriaWeights) -> int:
    """Rounded weighted mean of the active criteria (0 when none are active or weighted)."""
    scores = breakdown.active()
    normalized = normalize_weights(active_weights(breakdown, weights))
    total = sum(score * normalized.get(name, 0.0) for name, score in scores.items())
    return round_half_up(clamp(total))
