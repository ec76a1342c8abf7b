"""
HouseMatch CLI entrypoint.

This CLI is intended for quick local checks of the match engine against JSON fixtures.
It delegates all scoring to `housematch.matching`.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from housematch.config.settings import get_settings
from housematch.core.env import resolve_project_path
from housematch.core.logging import configure_logging
from housematch.domain.models import CRITERIA, PropertySnapshot, UserPreferences, WeightOverrides
from housematch.matching.match import calculate_match_score
from housematch.matching.rank import paginate, rank_properties
from housematch.scoring.explain import one_line_summary
from housematch.scoring.quality import get_match_quality


def _read_json(path: str) -> Any:
    return json.loads(resolve_project_path(path).read_text(encoding="utf-8"))


def _parse_weight_pairs(pairs: list[str]) -> WeightOverrides:
    """Parse `NAME=VALUE` CLI arguments into weight overrides."""
    out: dict[str, float] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid --weight '{pair}', expected NAME=VALUE")
        name, value = pair.split("=", 1)
        name = name.strip().lower().replace("-", "_")
        if name not in CRITERIA:
            raise ValueError(f"Unknown criterion '{name}' in --weight; expected one of {', '.join(CRITERIA)}")
        out[name] = float(value)
    return WeightOverrides.model_validate(out)


def _cmd_score(args: argparse.Namespace) -> int:
    """Handle the `score` subcommand."""
    settings = get_settings()
    prop = PropertySnapshot.model_validate(_read_json(args.property))
    prefs = UserPreferences.model_validate(_read_json(args.preferences))
    weights = _parse_weight_pairs(args.weight)

    match = calculate_match_score(prop, prefs, weights, settings=settings)
    quality = get_match_quality(match.overall)

    if args.json:
        payload = {**match.model_dump(mode="json"), "quality": quality.model_dump(mode="json")}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print(f"{prop.id or '-'}: {quality.label}  {one_line_summary(match)}")
    return 0


def _cmd_rank(args: argparse.Namespace) -> int:
    """Handle the `rank` subcommand."""
    settings = get_settings()
    raw = _read_json(args.properties)
    if not isinstance(raw, list):
        raise ValueError(f"{args.properties} must contain a JSON list of properties")
    prefs = UserPreferences.model_validate(_read_json(args.preferences))
    weights = _parse_weight_pairs(args.weight)

    ranked = rank_properties(raw, prefs, weights, settings=settings, min_score=args.min_score)
    page = paginate(ranked, cursor=args.cursor, page_size=args.page_size, settings=settings)

    if args.json:
        print(json.dumps(page.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    offset = int(args.cursor or 0)
    for i, item in enumerate(page.page, start=offset + 1):
        print(f"{i:>3}. {item.property.id or '-'} ({item.property.address.city})  {item.quality.label}")
        print(f"     {one_line_summary(item.match)}")
    if page.continue_cursor is not None:
        print(f"next cursor: {page.continue_cursor}")
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--preferences", required=True, help="JSON file with user preferences")
    p.add_argument("--weight", action="append", default=[], help="Override a criterion weight: NAME=VALUE")
    p.add_argument("--json", action="store_true", help="Output machine-readable JSON")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the HouseMatch CLI."""
    parser = argparse.ArgumentParser(prog="housematch")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score one property against a preference set.")
    score.add_argument("--property", required=True, help="JSON file with one property")
    _add_common(score)
    score.set_defaults(func=_cmd_score)

    rank = sub.add_parser("rank", help="Rank a list of properties against a preference set.")
    rank.add_argument("--properties", required=True, help="JSON file with a list of properties")
    _add_common(rank)
    rank.add_argument("--min-score", type=int, default=None, help="Drop properties scoring below this")
    rank.add_argument("--cursor", type=str, default=None, help="Continue from a previous page")
    rank.add_argument("--page-size", type=int, default=None)
    rank.set_defaults(func=_cmd_rank)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m housematch.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
