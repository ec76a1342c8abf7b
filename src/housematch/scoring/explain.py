"""
Small explainability formatting helpers.

Used by the CLI to print compact summaries of match results.
"""

from __future__ import annotations

from housematch.domain.models import MatchScore
from housematch.scoring.composite import active_weights, normalize_weights


def one_line_summary(match: MatchScore) -> str:
    """Render a compact single-line summary; unconfigured criteria are left out."""
    parts = [f"overall={match.overall}"]
    shares = normalize_weights(active_weights(match.breakdown, match.weights))
    for name, score in match.breakdown.active().items():
        parts.append(f"{name}={score:.0f} (w={shares[name]:.2f})")
    return " | ".join(parts)
