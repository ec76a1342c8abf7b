# src/housematch/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/housematch/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `HOUSEMATCH_CONFIG_PATH`
- environment variables (currently only `HOUSEMATCH_LOG_LEVEL`)

The per-criterion scoring curves are fixed product rules and live in `housematch.criteria`;
what is tunable here is the default weighting, the fallback search radius and the
ranking/paging knobs.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from housematch.core.env import load_dotenv_if_present
from housematch.domain.models import CriteriaWeights


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `housematch.config`."""
    text = resources.files("housematch.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "HouseMatch"
    log_level: str = "INFO"


class ScoringSettings(BaseModel):
    default_weights: CriteriaWeights = Field(default_factory=CriteriaWeights)
    # Radius used when the user gave coordinates but no explicit max distance.
    default_max_distance_km: float = Field(50, gt=0)


class RankingSettings(BaseModel):
    # Properties scoring below this are dropped from ranked listings (1 drops only zero scores).
    min_score: int = Field(1, ge=0, le=100)
    page_size: int = Field(20, ge=1)
    max_page_size: int = Field(100, ge=1)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    ranking: RankingSettings = Field(default_factory=RankingSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("HOUSEMATCH_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("HOUSEMATCH_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
