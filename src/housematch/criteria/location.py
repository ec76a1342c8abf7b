"""
Location criterion.

When both sides carry coordinates we score by great-circle distance:
- within 10% of the acceptable radius -> 100
- inside the radius -> linear 100 -> 60
- beyond the radius -> linear decay from 60 towards 0 as the excess grows

Without a full coordinate pair on both sides (including a half-filled pair) we fall
back to a case-insensitive city-name comparison: same city 100, otherwise 60, since
a different city name alone does not tell us how far away the listing is.
"""

from __future__ import annotations

from housematch.core.geo import distance_km

DEFAULT_MAX_DISTANCE_KM = 50.0
IDEAL_DISTANCE_RATIO = 0.1
IN_RANGE_FLOOR = 60.0
CITY_MISMATCH_SCORE = 60.0


def score_distance(distance: float, max_distance_km: float) -> float:
    """Score a known distance (km) against an acceptable radius (km)."""
    if max_distance_km <= 0:
        return 100.0 if distance <= 0 else 0.0
    ideal = max_distance_km * IDEAL_DISTANCE_RATIO
    if distance <= ideal:
        return 100.0
    if distance <= max_distance_km:
        ratio = (distance - ideal) / (max_distance_km - ideal)
        return max(IN_RANGE_FLOOR, 100 - ratio * 40)
    excess = (distance - max_distance_km) / max_distance_km
    return max(0.0, IN_RANGE_FLOOR - excess * 60)


def score_location(
    property_city: str,
    property_lat: float | None,
    property_lon: float | None,
    preferred_city: str | None,
    preferred_lat: float | None,
    preferred_lon: float | None,
    max_distance_km: float | None,
    *,
    default_max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
) -> float | None:
    if preferred_city is None:
        return None

    coords = (property_lat, property_lon, preferred_lat, preferred_lon)
    if all(c is not None for c in coords):
        distance = distance_km(property_lat, property_lon, preferred_lat, preferred_lon)  # type: ignore[arg-type]
        # An unset or zero radius falls back to the default.
        return score_distance(distance, max_distance_km or default_max_distance_km)

    if (property_city or "").lower() == preferred_city.lower():
        return 100.0
    return CITY_MISMATCH_SCORE
