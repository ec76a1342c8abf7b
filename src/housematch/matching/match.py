from __future__ import annotations

# This module is the entry point of the match-scoring engine.
# It wires together:
# - domain input (PropertySnapshot, UserPreferences, optional weight overrides)
# - the nine criterion scorers (pure functions, None when a preference is unset)
# - weight merging + renormalization over the active criteria (MatchScore)
#
# The engine does no I/O and keeps no state between calls, so it can be called
# concurrently and once per property when ranking.

import logging
from typing import Any, Mapping

from housematch.config.settings import Settings, get_settings
from housematch.criteria.features import score_amenities, score_furnished, score_pet_friendly
from housematch.criteria.location import score_location
from housematch.criteria.price import score_price
from housematch.criteria.property_type import score_property_type
from housematch.criteria.rooms import score_bathrooms, score_bedrooms
from housematch.criteria.size import score_size
from housematch.domain.models import (
    CriteriaWeights,
    MatchScore,
    PropertySnapshot,
    ScoreBreakdown,
    UserPreferences,
    WeightOverrides,
)
from housematch.scoring.composite import aggregate, coerce_overrides, merge_weights

logger = logging.getLogger(__name__)

WeightsInput = WeightOverrides | CriteriaWeights | Mapping[str, float | None] | None


def coerce_property(value: PropertySnapshot | Mapping[str, Any]) -> PropertySnapshot:
    if isinstance(value, PropertySnapshot):
        return value
    return PropertySnapshot.model_validate(value)


def coerce_preferences(value: UserPreferences | Mapping[str, Any]) -> UserPreferences:
    if isinstance(value, UserPreferences):
        return value
    return UserPreferences.model_validate(value)


def score_breakdown(
    prop: PropertySnapshot, preferences: UserPreferences, *, settings: Settings | None = None
) -> ScoreBreakdown:
    """Run every criterion scorer for one property/preferences pair."""
    settings = settings or get_settings()
    address = prop.address
    return ScoreBreakdown(
        price=score_price(prop.rent, preferences.min_budget, preferences.max_budget),
        location=score_location(
            address.city,
            address.latitude,
            address.longitude,
            preferences.preferred_city,
            preferences.preferred_latitude,
            preferences.preferred_longitude,
            preferences.max_distance_km,
            default_max_distance_km=settings.scoring.default_max_distance_km,
        ),
        bedrooms=score_bedrooms(prop.rooms.bedrooms, preferences.desired_bedrooms),
        bathrooms=score_bathrooms(prop.rooms.bathrooms, preferences.desired_bathrooms),
        property_type=score_property_type(prop.property_type, preferences.preferred_property_type),
        pet_friendly=score_pet_friendly(bool(prop.pet_friendly), preferences.requires_pet_friendly),
        furnished=score_furnished(bool(prop.furnished), preferences.prefers_furnished),
        amenities=score_amenities(prop.amenities, preferences.desired_amenities),
        size=score_size(prop.square_meters, preferences.min_square_meters, preferences.max_square_meters),
    )


def calculate_match_score(
    prop: PropertySnapshot | Mapping[str, Any],
    preferences: UserPreferences | Mapping[str, Any],
    weights: WeightsInput = None,
    *,
    settings: Settings | None = None,
) -> MatchScore:
    """Score one property against one preference set.

    Only criteria the user configured contribute, and their weights are renormalized
    to sum to 1 so the overall score stays on the 0..100 scale however many
    preferences were set. With nothing configured (or every active weight at 0) the
    overall score is 0.
    """
    settings = settings or get_settings()
    prop = coerce_property(prop)
    preferences = coerce_preferences(preferences)

    breakdown = score_breakdown(prop, preferences, settings=settings)
    base_weights = merge_weights(settings.scoring.default_weights, coerce_overrides(weights))
    overall = aggregate(breakdown, base_weights)

    logger.debug(
        "match score property=%s overall=%d active=%s",
        prop.id,
        overall,
        ",".join(breakdown.active()) or "-",
    )
    return MatchScore(overall=overall, breakdown=breakdown, weights=base_weights)
