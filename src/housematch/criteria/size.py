"""
Size criterion (square meters).

Too small is penalized harder than too big: each percent below the minimum costs a
full point (floor 0), each percent above the maximum costs half a point (floor 50).
"""

from __future__ import annotations

UNDERSIZE_FLOOR = 0.0
OVERSIZE_FLOOR = 50.0


def _undersize(actual: float, minimum: float) -> float:
    if minimum <= 0:
        return 100.0
    deficit = minimum - actual
    return max(UNDERSIZE_FLOOR, 100 - (deficit / minimum) * 100)


def _oversize(actual: float, maximum: float) -> float:
    # Any excess over a zero ceiling is unbounded in relative terms.
    if maximum <= 0:
        return OVERSIZE_FLOOR
    excess = actual - maximum
    return max(OVERSIZE_FLOOR, 100 - (excess / maximum) * 50)


def score_size(actual: float, min_square_meters: float | None, max_square_meters: float | None) -> float | None:
    if min_square_meters is None and max_square_meters is None:
        return None
    if min_square_meters is not None and actual < min_square_meters:
        return _undersize(actual, min_square_meters)
    if max_square_meters is not None and actual > max_square_meters:
        return _oversize(actual, max_square_meters)
    return 100.0
