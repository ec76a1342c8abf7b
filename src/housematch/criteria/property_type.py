"""
Property-type criterion.

Exact (case-insensitive) type matches score 100. Related types get partial credit from
a static similarity table with two clusters (apartment-like and house-like types);
the table is consulted in both key orders. Unrelated types score 50.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from housematch.scoring.composite import round_half_up

NO_SIMILARITY_SCORE = 50.0


def _frozen(table: dict[str, dict[str, float]]) -> Mapping[str, Mapping[str, float]]:
    return MappingProxyType({k: MappingProxyType(dict(v)) for k, v in table.items()})


PROPERTY_TYPE_SIMILARITY: Mapping[str, Mapping[str, float]] = _frozen(
    {
        "apartment": {"apartment": 1.0, "flat": 0.95, "studio": 0.85, "loft": 0.75},
        "flat": {"flat": 1.0, "apartment": 0.95, "studio": 0.85, "loft": 0.75},
        "house": {"house": 1.0, "villa": 0.9, "townhouse": 0.85, "duplex": 0.8},
        "villa": {"villa": 1.0, "house": 0.9, "townhouse": 0.75, "duplex": 0.7},
        "studio": {"studio": 1.0, "apartment": 0.85, "flat": 0.85, "loft": 0.8},
        "loft": {"loft": 1.0, "studio": 0.8, "apartment": 0.75, "flat": 0.75},
        "townhouse": {"townhouse": 1.0, "house": 0.85, "duplex": 0.85, "villa": 0.75},
        "duplex": {"duplex": 1.0, "townhouse": 0.85, "house": 0.8, "villa": 0.7},
    }
)


def type_similarity(a: str, b: str) -> float | None:
    """Similarity coefficient between two lower-cased types, or None if unrelated."""
    coefficient = PROPERTY_TYPE_SIMILARITY.get(a, {}).get(b)
    if coefficient is None:
        coefficient = PROPERTY_TYPE_SIMILARITY.get(b, {}).get(a)
    return coefficient


def score_property_type(actual_type: str, preferred_type: str | None) -> float | None:
    if preferred_type is None:
        return None

    actual = (actual_type or "").lower()
    preferred = preferred_type.lower()
    if actual == preferred:
        return 100.0

    similarity = type_similarity(preferred, actual)
    if similarity:
        return float(round_half_up(similarity * 100))
    return NO_SIMILARITY_SCORE
