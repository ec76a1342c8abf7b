"""
Match-quality badges.

Maps an overall score onto the coarse label/tier shown next to a listing.
"""

from __future__ import annotations

from housematch.domain.models import MatchQuality, QualityTier

QUALITY_TIERS: tuple[tuple[float, str, QualityTier], ...] = (
    (85, "Excellent Match", "excellent"),
    (70, "Good Match", "good"),
    (50, "Fair Match", "fair"),
)

POOR_MATCH = MatchQuality(label="Poor Match", tier="poor")


def get_match_quality(score: float) -> MatchQuality:
    for threshold, label, tier in QUALITY_TIERS:
        if score >= threshold:
            return MatchQuality(label=label, tier=tier)
    return POOR_MATCH
