from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from pushblock_core.equivalence import EQUIVALENCE_MODES
from pushblock_core.utils.logging_utils import LOG_LEVELS


class ConfigError(ValueError):
    """Invalid solver configuration."""


@dataclass
class SearchSettings:
    equivalence: str = "component"
    node_limit: Optional[int] = None
    time_limit_s: Optional[float] = None


@dataclass
class LoggingSettings:
    level: str = "info"
    file: Optional[str] = None


@dataclass
class SolveConfig:
    search: SearchSettings = field(default_factory=SearchSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def _section(raw: Dict[str, Any], name: str, allowed) -> Dict[str, Any]:
    sec = raw.get(name) or {}
    if not isinstance(sec, dict):
        raise ConfigError(f"section '{name}' must be a mapping")
    unknown = set(sec) - set(allowed)
    if unknown:
        raise ConfigError(f"unknown keys in '{name}': {sorted(unknown)}")
    return sec


def config_from_dict(raw: Optional[Dict[str, Any]]) -> SolveConfig:
    raw = raw or {}
    unknown = set(raw) - {"search", "logging"}
    if unknown:
        raise ConfigError(f"unknown sections: {sorted(unknown)}")

    s = _section(raw, "search", ("equivalence", "node_limit", "time_limit_s"))
    search = SearchSettings(**s)
    if search.equivalence not in EQUIVALENCE_MODES:
        raise ConfigError(f"search.equivalence must be one of {EQUIVALENCE_MODES}, got {search.equivalence!r}")
    if search.node_limit is not None and int(search.node_limit) <= 0:
        raise ConfigError("search.node_limit must be positive")
    if search.time_limit_s is not None and float(search.time_limit_s) <= 0:
        raise ConfigError("search.time_limit_s must be positive")

    lg = _section(raw, "logging", ("level", "file"))
    log = LoggingSettings(**lg)
    if str(log.level).lower() not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {sorted(LOG_LEVELS)}")

    return SolveConfig(search=search, logging=log)


def load_config(path: Optional[str]) -> SolveConfig:
    """Reads a YAML config; None gives the defaults."""
    if path is None:
        return SolveConfig()
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is not None and not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return config_from_dict(raw)
