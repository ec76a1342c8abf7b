"""
API routes.

Endpoints:
- POST `/api/match-score`: score one property against one preference set.
- POST `/api/matches`: rank a batch of properties and return one page.
- GET  `/api/match-quality`: badge label/tier for a score.
- GET  `/api/settings`: the scoring/ranking defaults (weights, radius, paging limits).

Callers send the property/preference data; the API does not read any storage.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from housematch.config.settings import get_settings
from housematch.domain.models import MatchQuality, MatchScore, PropertySnapshot, UserPreferences, WeightOverrides
from housematch.matching.match import calculate_match_score
from housematch.matching.rank import RankedPage, paginate, rank_properties
from housematch.scoring.quality import get_match_quality

router = APIRouter()


class MatchScoreRequest(BaseModel):
    property: PropertySnapshot
    preferences: UserPreferences
    weights: WeightOverrides | None = None


class MatchScoreResponse(MatchScore):
    quality: MatchQuality


class MatchesRequest(BaseModel):
    properties: list[PropertySnapshot] = Field(default_factory=list)
    preferences: UserPreferences
    weights: WeightOverrides | None = None
    min_score: int | None = Field(default=None, ge=0, le=100)
    cursor: str | None = None
    page_size: int | None = None


@router.post("/api/match-score", response_model=MatchScoreResponse)
def post_match_score(body: MatchScoreRequest) -> MatchScoreResponse:
    """Score one property and attach its quality badge."""
    settings = get_settings()
    match = calculate_match_score(body.property, body.preferences, body.weights, settings=settings)
    return MatchScoreResponse(**match.model_dump(), quality=get_match_quality(match.overall))


@router.post("/api/matches", response_model=RankedPage)
def post_matches(body: MatchesRequest) -> RankedPage:
    """Rank the given properties best-first and return the requested page."""
    settings = get_settings()
    try:
        ranked = rank_properties(
            body.properties, body.preferences, body.weights, settings=settings, min_score=body.min_score
        )
        return paginate(ranked, cursor=body.cursor, page_size=body.page_size, settings=settings)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"code": "VALIDATION_ERROR", "message": str(e)},
        ) from e


@router.get("/api/match-quality", response_model=MatchQuality)
def get_quality(score: float = Query(..., ge=0, le=100)) -> MatchQuality:
    """Return the badge for a score (0..100)."""
    return get_match_quality(score)


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return the scoring/ranking defaults so clients can show them."""
    settings = get_settings()
    return {
        "scoring": settings.scoring.model_dump(mode="json"),
        "ranking": settings.ranking.model_dump(mode="json"),
    }
