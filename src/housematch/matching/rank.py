"""
Ranking of many properties against one preference set.

Listing views score every candidate property (N independent engine calls), drop
properties that do not match at all, sort best-first and page through the result
with an opaque numeric cursor.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, Field

from housematch.config.settings import Settings, get_settings
from housematch.domain.models import MatchQuality, MatchScore, PropertySnapshot, UserPreferences
from housematch.matching.match import WeightsInput, coerce_preferences, coerce_property, calculate_match_score
from housematch.scoring.composite import coerce_overrides
from housematch.scoring.quality import get_match_quality

logger = logging.getLogger(__name__)


class RankedProperty(BaseModel):
    """One ranked output item: property + its match score and badge."""

    property: PropertySnapshot
    match: MatchScore
    quality: MatchQuality


class RankedPage(BaseModel):
    page: list[RankedProperty] = Field(default_factory=list)
    total: int = Field(0, ge=0)
    is_done: bool = True
    continue_cursor: str | None = None


def rank_properties(
    properties: Iterable[PropertySnapshot | Mapping[str, Any]],
    preferences: UserPreferences | Mapping[str, Any],
    weights: WeightsInput = None,
    *,
    settings: Settings | None = None,
    min_score: int | None = None,
) -> list[RankedProperty]:
    """Score and sort properties best-first, dropping those below `min_score`.

    Ties keep the input order.
    """
    settings = settings or get_settings()
    preferences = coerce_preferences(preferences)
    overrides = coerce_overrides(weights)
    threshold = settings.ranking.min_score if min_score is None else int(min_score)

    ranked: list[RankedProperty] = []
    scored = 0
    for raw in properties:
        prop = coerce_property(raw)
        match = calculate_match_score(prop, preferences, overrides, settings=settings)
        scored += 1
        if match.overall < threshold:
            continue
        ranked.append(RankedProperty(property=prop, match=match, quality=get_match_quality(match.overall)))

    # `sorted` is stable, so equal scores stay in input order.
    ranked = sorted(ranked, key=lambda item: item.match.overall, reverse=True)
    logger.info("ranked %d of %d properties (min_score=%d)", len(ranked), scored, threshold)
    return ranked


def _parse_cursor(cursor: str | None) -> int:
    if cursor is None or cursor == "":
        return 0
    try:
        offset = int(cursor)
    except ValueError as e:
        raise ValueError(f"Invalid cursor '{cursor}', expected a non-negative integer") from e
    if offset < 0:
        raise ValueError(f"Invalid cursor '{cursor}', expected a non-negative integer")
    return offset


def paginate(
    ranked: list[RankedProperty],
    *,
    cursor: str | None = None,
    page_size: int | None = None,
    settings: Settings | None = None,
) -> RankedPage:
    """Slice one page out of a ranked list; `continue_cursor` is None on the last page."""
    settings = settings or get_settings()
    size = settings.ranking.page_size if page_size is None else int(page_size)
    if size < 1:
        raise ValueError(f"page_size must be >= 1, got {size}")
    size = min(size, settings.ranking.max_page_size)

    start = _parse_cursor(cursor)
    end = start + size
    is_done = end >= len(ranked)
    return RankedPage(
        page=ranked[start:end],
        total=len(ranked),
        is_done=is_done,
        continue_cursor=None if is_done else str(end),
    )
