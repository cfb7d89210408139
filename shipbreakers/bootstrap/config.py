"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger("bootstrap.config")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("SHIPBREAKERS_LOG_LEVEL", "INFO"),
            format=os.getenv("SHIPBREAKERS_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("SHIPBREAKERS_LOG_FILE"),
            json_logs=_env_flag("SHIPBREAKERS_JSON_LOGS"),
        )


@dataclass
class LayoutConfig:
    """Layout generation settings."""

    strict_templates: bool = False  # Reject unknown templates instead of falling back
    json_indent: int = 2

    @classmethod
    def from_env(cls) -> "LayoutConfig":
        return cls(
            strict_templates=_env_flag("SHIPBREAKERS_STRICT_TEMPLATES"),
            json_indent=_env_int("SHIPBREAKERS_JSON_INDENT", 2),
        )


@dataclass
class ShipbreakersConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False
    version: str = "0.3.0"

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "ShipbreakersConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("SHIPBREAKERS_ENVIRONMENT", "development"),
            debug=_env_flag("SHIPBREAKERS_DEBUG"),
            layout=LayoutConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "ShipbreakersConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Cannot parse config file {filepath}: {e}, using defaults")
            return cls.from_env()

        if not isinstance(data, dict):
            logger.warning(f"Config file {filepath} is not a JSON object, using defaults")
            return cls.from_env()

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "ShipbreakersConfig":
        """Create config from dictionary, over environment defaults."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = bool(data["debug"])

        for section in ("layout", "logging"):
            values = data.get(section) or {}
            if not isinstance(values, dict):
                logger.warning(f"Ignoring config section {section}: expected an object")
                continue
            target = getattr(config, section)
            for key, value in values.items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "layout": {
                "strict_templates": self.layout.strict_templates,
                "json_indent": self.layout.json_indent,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


def load_config(filepath: Optional[str] = None) -> ShipbreakersConfig:
    """Load from file when given, otherwise from the environment."""
    if filepath:
        return ShipbreakersConfig.from_file(filepath)
    return ShipbreakersConfig.from_env()
