"""repeatcal.config_loader

Lightweight config loader for repeatcal.

- Reads YAML (PyYAML); JSON files load too since JSON is valid YAML.
- Exposes a typed dataclass `Config` and a `load_config()` helper that accepts
  an optional path override.
- REPEATCAL_MAX_END_DATE in the environment overrides the file value.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from .date_utils import parse_calendar_date
from .exceptions import InvalidDateFormatError
from .recurrence import DEFAULT_MAX_END_DATE, RecurrenceConfig

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Typed configuration for repeatcal.

    Fields:
        max_end_date: latest end date a recurrence may use (horizon cap)
        log_level: logging level name
    """

    max_end_date: date = field(default=DEFAULT_MAX_END_DATE)
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Unparseable values are replaced by defaults with a logged warning rather
        than failing the whole load.
        """
        if data is None:
            data = {}

        max_end_date = DEFAULT_MAX_END_DATE
        raw_end = data.get("max_end_date")
        if raw_end is not None:
            try:
                max_end_date = parse_calendar_date(raw_end if isinstance(raw_end, date) else str(raw_end))
            except InvalidDateFormatError:
                logger.warning(
                    "Config max_end_date=%r is not a YYYY-MM-DD date; using default %s",
                    raw_end,
                    DEFAULT_MAX_END_DATE,
                )

        log_level = data.get("log_level", "INFO")
        log_level = str(log_level).upper() if log_level is not None else "INFO"
        if log_level not in _VALID_LOG_LEVELS:
            logger.warning("Config log_level=%r is not a known level; using INFO", log_level)
            log_level = "INFO"

        return cls(max_end_date=max_end_date, log_level=log_level)

    def recurrence_config(self) -> RecurrenceConfig:
        """Return the generator configuration derived from this config."""
        return RecurrenceConfig.from_settings(self)


def _load_yaml(path: Path) -> Any:
    """Load a YAML (or JSON) document, normalizing empty files to an empty dict."""
    loaded = yaml.safe_load(path.read_text())
    if loaded is None:
        return {}
    return loaded


def load_config(path: str | None = None) -> Config:
    """Load configuration from a YAML file and return a Config instance.

    Args:
        path: Optional path to the config file. If not provided the default is
              ./repeatcal.yaml (relative to current working dir).

    Returns:
        Config dataclass instance with values from file (or defaults).

    Behavior:
    - If file is missing: returns Config() with defaults.
    - If file exists but top-level is not a mapping: raises ValueError.
    - REPEATCAL_MAX_END_DATE, when set, overrides max_end_date.
    """
    p = Path(path) if path else Path.cwd() / "repeatcal.yaml"
    logger.debug("Attempting to load config from %s", p)

    raw: Any = {}
    if p.exists():
        raw = _load_yaml(p)
        if not isinstance(raw, dict):
            logger.warning("Config file %s parsed but top-level is not a mapping: %r", p, raw)
            raise ValueError("Config file must contain a mapping at top level")  # noqa: TRY004
        logger.info("Loaded configuration from %s", p)
    else:
        logger.info("Config file %s not found; using defaults", p)

    env_end = os.getenv("REPEATCAL_MAX_END_DATE")
    if env_end:
        raw = {**raw, "max_end_date": env_end}
        logger.debug("Applied REPEATCAL_MAX_END_DATE override: %s", env_end)

    cfg = Config.from_dict(raw)
    logger.debug("Configuration values: %s", cfg)
    return cfg
