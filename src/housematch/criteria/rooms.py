"""
Room-count criteria (bedrooms, bathrooms).

Bedrooms: an exact match is the only perfect score. Extra bedrooms are welcome but
with diminishing returns (85 + 5 per extra room, capped at 90); missing bedrooms cost
25 points each down to a floor of 30.

Bathrooms: having at least the desired number is perfect; each missing bathroom costs
30 points down to a floor of 40. Bathroom counts may be fractional (half baths).
"""

from __future__ import annotations

BEDROOM_EXTRA_BASE = 85.0
BEDROOM_EXTRA_STEP = 5.0
BEDROOM_EXTRA_CAP = 90.0
BEDROOM_PENALTY = 25.0
BEDROOM_FLOOR = 30.0

BATHROOM_PENALTY = 30.0
BATHROOM_FLOOR = 40.0


def score_bedrooms(actual: int, desired: int | None) -> float | None:
    if desired is None:
        return None
    if actual == desired:
        return 100.0
    if actual > desired:
        extra = actual - desired
        return min(BEDROOM_EXTRA_CAP, BEDROOM_EXTRA_BASE + extra * BEDROOM_EXTRA_STEP)
    deficit = desired - actual
    return max(BEDROOM_FLOOR, 100 - deficit * BEDROOM_PENALTY)


def score_bathrooms(actual: float, desired: float | None) -> float | None:
    if desired is None:
        return None
    if actual >= desired:
        return 100.0
    deficit = desired - actual
    return max(BATHROOM_FLOOR, 100 - deficit * BATHROOM_PENALTY)
