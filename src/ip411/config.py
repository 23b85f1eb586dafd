"""User configuration, stored as JSON in the home directory."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".ip411.json")
ENV_PATH = "IP411_CONFIG"


class ConfigError(ValueError):
    pass


@dataclass
class Config:
    base_url: str = "http://ipinfo.io"
    timeout: float = 5.0
    user_agent: str = "ip411/1.0"
    marker: str = "X"
    info_height: int = 8
    placeholder: str = "-"
    log_file: Optional[str] = None
    log_level: str = "WARNING"

    @staticmethod
    def default_path() -> str:
        return os.environ.get(ENV_PATH) or DEFAULT_PATH

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Read config from ``path``; anything missing or invalid keeps its default."""
        path = path or cls.default_path()
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            data = {}
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", path, e)
            data = {}
        if not isinstance(data, dict):
            logger.warning("ignoring config %s: not a JSON object", path)
            data = {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        cfg = cls()
        for f in fields(cls):
            if f.name not in data:
                continue
            try:
                setattr(cfg, f.name, _coerce(f.name, data[f.name], getattr(cfg, f.name)))
            except ConfigError as e:
                logger.warning("config key %r: %s, using default", f.name, e)
        return cfg


def _coerce(name: str, value: Any, default: Any) -> Any:
    if name == "log_file":
        if value is None or isinstance(value, str):
            return value
        raise ConfigError(f"expected a path or null, got {value!r}")
    if name == "log_level":
        if isinstance(value, str) and value.upper() in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return value.upper()
        raise ConfigError(f"unknown level {value!r}")
    if isinstance(value, bool):
        raise ConfigError(f"unexpected boolean {value!r}")
    if isinstance(default, float):
        if isinstance(value, (int, float)) and value > 0:
            return float(value)
        raise ConfigError(f"expected a positive number, got {value!r}")
    if isinstance(default, int):
        if isinstance(value, int) and value > 0:
            return value
        raise ConfigError(f"expected a positive integer, got {value!r}")
    if isinstance(value, str) and value:
        return value
    raise ConfigError(f"expected a non-empty string, got {value!r}")
