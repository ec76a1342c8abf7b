"""
Price criterion.

Scores a monthly rent against the user's budget on a 0..100 scale:
- no max budget configured -> `None` (criterion not active)
- rent of 0 means the listing has no price data and scores 0
- below the optional minimum budget: mild penalty, never below 50
- within budget: 70-85% of the budget is the sweet spot (100); far cheaper listings
  score 85-100, listings close to the limit score 90-100
- over budget: tiered penalty (<=10% over floors at 75, <=25% at 50, beyond at 0)
"""

from __future__ import annotations

SWEET_SPOT_LOW = 0.70
SWEET_SPOT_HIGH = 0.85


def score_price(rent: float, min_budget: float | None, max_budget: float | None) -> float | None:
    if max_budget is None:
        return None

    if rent == 0:
        return 0.0

    if min_budget is not None and rent < min_budget:
        deficit = (min_budget - rent) / min_budget
        return max(50.0, 100 - deficit * 100)

    if max_budget <= 0:
        # A zero budget cannot be met by any priced listing.
        return 0.0

    if rent <= max_budget:
        ratio = rent / max_budget
        if SWEET_SPOT_LOW <= ratio <= SWEET_SPOT_HIGH:
            return 100.0
        if ratio < SWEET_SPOT_LOW:
            return max(85.0, 100 - (SWEET_SPOT_LOW - ratio) * 50)
        return max(90.0, 100 - (ratio - SWEET_SPOT_HIGH) * 30)

    over = (rent - max_budget) / max_budget
    if over <= 0.10:
        return max(75.0, 90 - over * 150)
    if over <= 0.25:
        return max(50.0, 75 - (over - 0.10) * 150)
    return max(0.0, 50 - (over - 0.25) * 100)
