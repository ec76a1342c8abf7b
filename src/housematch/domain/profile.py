"""
Stored user profiles -> scoring inputs.

A saved profile keeps target values plus an "importance" (0..100) per criterion, picked
in the UI from four levels. This module validates such a record and turns it into the
`UserPreferences` + `WeightOverrides` pair the match engine consumes.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from housematch.domain.models import UserPreferences, WeightOverrides
from housematch.scoring.composite import round_half_up

ImportanceLevel = Literal["not-important", "somewhat", "very", "critical"]

IMPORTANCE_WEIGHTS: dict[ImportanceLevel, int] = {
    "not-important": 0,
    "somewhat": 33,
    "very": 66,
    "critical": 100,
}

# Used for levels we do not recognize (e.g. records written by an older UI).
UNKNOWN_LEVEL_WEIGHT = 50


def weight_from_level(level: str) -> int:
    return IMPORTANCE_WEIGHTS.get(level, UNKNOWN_LEVEL_WEIGHT)  # type: ignore[call-overload]


def level_from_weight(weight: float) -> ImportanceLevel:
    if weight <= 0:
        return "not-important"
    if weight <= 33:
        return "somewhat"
    if weight <= 66:
        return "very"
    return "critical"


def clamp_importance(value: float) -> int:
    """Round and clamp an importance into 0..100."""
    return max(0, min(100, round_half_up(value)))


class ProfilePreferences(BaseModel):
    """Preferences section of a stored user profile."""

    city: str | None = None
    country: str | None = None
    location_importance: int = 0
    property_type: str | None = None
    property_type_importance: int = 0
    bedrooms: int | None = Field(default=None, ge=0)
    bedrooms_importance: int = 0
    bathrooms: float | None = Field(default=None, ge=0)
    bathrooms_importance: int = 0
    min_square_meters: float | None = Field(default=None, ge=0)
    square_meters_importance: int = 0
    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    price_importance: int = 0
    pet_friendly: bool | None = None
    pet_friendly_importance: int = 0
    furnished: bool | None = None
    furnished_importance: int = 0
    amenities: list[str] | None = None
    amenities_importance: int = 0

    @field_validator(
        "location_importance",
        "property_type_importance",
        "bedrooms_importance",
        "bathrooms_importance",
        "square_meters_importance",
        "price_importance",
        "pet_friendly_importance",
        "furnished_importance",
        "amenities_importance",
        mode="before",
    )
    @classmethod
    def _clamp(cls, value: object) -> object:
        if value is None:
            return 0
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return clamp_importance(value)
        return value


def preferences_from_profile(profile: ProfilePreferences) -> tuple[UserPreferences, WeightOverrides]:
    """Map a stored profile onto engine preferences and weight overrides.

    The profile only stores a city name (no coordinates), so location is scored by
    city match. A profile with only `min_price` has no budget ceiling and therefore
    leaves the price criterion inactive. Stored zeros for prices, room counts and
    the minimum size mean "not set".
    """
    preferences = UserPreferences(
        min_budget=profile.min_price or None,
        max_budget=profile.max_price or None,
        desired_bedrooms=profile.bedrooms or None,
        desired_bathrooms=profile.bathrooms or None,
        preferred_city=profile.city or None,
        preferred_property_type=profile.property_type or None,
        requires_pet_friendly=bool(profile.pet_friendly),
        prefers_furnished=bool(profile.furnished),
        desired_amenities=list(profile.amenities or []),
        min_square_meters=profile.min_square_meters or None,
    )
    weights = WeightOverrides(
        price=profile.price_importance,
        location=profile.location_importance,
        bedrooms=profile.bedrooms_importance,
        bathrooms=profile.bathrooms_importance,
        property_type=profile.property_type_importance,
        pet_friendly=profile.pet_friendly_importance,
        furnished=profile.furnished_importance,
        amenities=profile.amenities_importance,
        size=profile.square_meters_importance,
    )
    return preferences, weights
