"""
Listing-feature criteria: pet-friendliness, furnishing and amenities.

The two flags are opt-in preferences: `False` means "don't care", never "must not have".
A pet requirement is a deal-breaker (0 when unmet); furnishing is a soft wish (50 when unmet).
"""

from __future__ import annotations

from typing import Sequence

from housematch.scoring.composite import round_half_up

AMENITIES_BASE_SCORE = 60.0


def score_pet_friendly(is_pet_friendly: bool, requires_pet_friendly: bool) -> float | None:
    if not requires_pet_friendly:
        return None
    return 100.0 if is_pet_friendly else 0.0


def score_furnished(is_furnished: bool, prefers_furnished: bool) -> float | None:
    if not prefers_furnished:
        return None
    return 100.0 if is_furnished else 50.0


def score_amenities(property_amenities: Sequence[str] | None, desired_amenities: Sequence[str]) -> float | None:
    """Blend a 60-point base with the share of desired amenities the listing offers."""
    if not desired_amenities:
        return None
    if not property_amenities:
        return AMENITIES_BASE_SCORE

    desired = set(desired_amenities)
    matches = sum(1 for a in property_amenities if a in desired)
    match_rate = matches / len(desired_amenities)
    return float(min(100, round_half_up(AMENITIES_BASE_SCORE + match_rate * 40)))
