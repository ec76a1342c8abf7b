"""
Logging configuration.

We use a YAML logging config (`src/housematch/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `HOUSEMATCH_LOG_LEVEL`).
"""

from __future__ import annotations

import copy
import logging.config

from housematch.config.settings import get_logging_config, get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure the Python logging system based on packaged YAML config + settings.

    An explicit `level` (e.g. from a CLI flag) wins over the configured one.
    """
    settings = get_settings()
    # The cached dict is shared; dictConfig gets a private copy.
    config = copy.deepcopy(get_logging_config())

    level = (level or settings.app.log_level).upper()
    config.setdefault("root", {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
