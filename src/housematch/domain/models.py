"""
Domain models (Pydantic).

These types represent the stable "contract" between the scoring engine and its callers:
- scoring inputs (`PropertySnapshot`, `UserPreferences`, `WeightOverrides`)
- explainable scoring output (`ScoreBreakdown`, `MatchScore`, `MatchQuality`)

The nine criteria form a closed set (`Criterion`); every per-criterion record below
declares exactly those nine fields so an unknown criterion cannot slip through.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

Criterion = Literal[
    "price",
    "location",
    "bedrooms",
    "bathrooms",
    "property_type",
    "pet_friendly",
    "furnished",
    "amenities",
    "size",
]

CRITERIA: tuple[Criterion, ...] = get_args(Criterion)

QualityTier = Literal["excellent", "good", "fair", "poor"]


class MonthlyRent(BaseModel):
    """Monthly rent split into cold (base) and warm (incl. utilities) amounts."""

    cold: float | None = Field(default=None, ge=0)
    warm: float | None = Field(default=None, ge=0)


class Rooms(BaseModel):
    bedrooms: int = Field(0, ge=0)
    bathrooms: float = Field(0, ge=0)


class Address(BaseModel):
    city: str = ""
    country: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class PropertySnapshot(BaseModel):
    """The subset of a listing the match engine looks at (read-only input)."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    property_type: str = ""
    monthly_rent: MonthlyRent = Field(default_factory=MonthlyRent)
    rooms: Rooms = Field(default_factory=Rooms)
    square_meters: float = Field(..., gt=0)
    address: Address = Field(default_factory=Address)
    furnished: bool | None = None
    pet_friendly: bool | None = None
    amenities: list[str] | None = None

    @property
    def rent(self) -> float:
        """Warm rent when known, else cold rent, else 0 (missing)."""
        return float(self.monthly_rent.warm or self.monthly_rent.cold or 0)


class UserPreferences(BaseModel):
    """One user's search preferences; `None`/empty/False means "no preference"."""

    model_config = ConfigDict(frozen=True)

    min_budget: float | None = Field(default=None, ge=0)
    max_budget: float | None = Field(default=None, ge=0)
    desired_bedrooms: int | None = Field(default=None, ge=0)
    desired_bathrooms: float | None = Field(default=None, ge=0)
    preferred_city: str | None = None
    preferred_latitude: float | None = Field(default=None, ge=-90, le=90)
    preferred_longitude: float | None = Field(default=None, ge=-180, le=180)
    max_distance_km: float | None = Field(default=None, ge=0)
    preferred_property_type: str | None = None
    requires_pet_friendly: bool = False
    prefers_furnished: bool = False
    desired_amenities: list[str] = Field(default_factory=list)
    min_square_meters: float | None = Field(default=None, ge=0)
    max_square_meters: float | None = Field(default=None, ge=0)

    @field_validator("desired_amenities", mode="before")
    @classmethod
    def _none_means_empty(cls, value: object) -> object:
        return [] if value is None else value


class CriteriaWeights(BaseModel):
    """Relative importance of each criterion (any non-negative scale)."""

    price: float = Field(35, ge=0)
    location: float = Field(15, ge=0)
    bedrooms: float = Field(20, ge=0)
    bathrooms: float = Field(10, ge=0)
    property_type: float = Field(5, ge=0)
    pet_friendly: float = Field(5, ge=0)
    furnished: float = Field(5, ge=0)
    amenities: float = Field(5, ge=0)
    size: float = Field(5, ge=0)


class WeightOverrides(BaseModel):
    """Optional per-request overrides for criteria weights (None keeps the default)."""

    model_config = ConfigDict(extra="forbid")

    price: float | None = Field(default=None, ge=0)
    location: float | None = Field(default=None, ge=0)
    bedrooms: float | None = Field(default=None, ge=0)
    bathrooms: float | None = Field(default=None, ge=0)
    property_type: float | None = Field(default=None, ge=0)
    pet_friendly: float | None = Field(default=None, ge=0)
    furnished: float | None = Field(default=None, ge=0)
    amenities: float | None = Field(default=None, ge=0)
    size: float | None = Field(default=None, ge=0)


class ScoreBreakdown(BaseModel):
    """Per-criterion scores; `None` marks a criterion the user did not configure."""

    price: float | None = Field(default=None, ge=0, le=100)
    location: float | None = Field(default=None, ge=0, le=100)
    bedrooms: float | None = Field(default=None, ge=0, le=100)
    bathrooms: float | None = Field(default=None, ge=0, le=100)
    property_type: float | None = Field(default=None, ge=0, le=100)
    pet_friendly: float | None = Field(default=None, ge=0, le=100)
    furnished: float | None = Field(default=None, ge=0, le=100)
    amenities: float | None = Field(default=None, ge=0, le=100)
    size: float | None = Field(default=None, ge=0, le=100)

    def active(self) -> dict[Criterion, float]:
        """Return only the configured criteria, in canonical order."""
        out: dict[Criterion, float] = {}
        for name in CRITERIA:
            score = getattr(self, name)
            if score is not None:
                out[name] = score
        return out


class MatchScore(BaseModel):
    """Overall score, breakdown and the (un-normalized) weights that produced it."""

    overall: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    weights: CriteriaWeights


class MatchQuality(BaseModel):
    label: str
    tier: QualityTier
