"""Engine configuration and its JSON persistence.

Handles loading and saving of ``EngineConfig`` to/from a JSON file. A
missing file yields defaults; keys the file does not mention keep their
default values and unknown keys are ignored.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union

from .errors import PixMillError

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".pixmill.json"


class ConfigError(PixMillError, ValueError):
    """Raised when a config file cannot be parsed or holds bad values."""


def _require_int(name: str, value) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


@dataclass
class EngineConfig:
    """Tunable defaults for sessions and the command line."""

    mosaic_seeds: int = 500  # seeds used when none are given
    random_seed: Optional[int] = None  # None draws fresh entropy per mosaic
    history_limit: Optional[int] = None  # None keeps every undo snapshot
    output_scale: int = 1  # nearest-neighbour upscale before saving

    def validate(self) -> "EngineConfig":
        for name in ("mosaic_seeds", "output_scale"):
            _require_int(name, getattr(self, name))
        for name in ("history_limit", "random_seed"):
            value = getattr(self, name)
            if value is not None:
                _require_int(name, value)
        if self.mosaic_seeds < 1:
            raise ConfigError("mosaic_seeds must be >= 1")
        if self.history_limit is not None and self.history_limit < 0:
            raise ConfigError("history_limit must be >= 0")
        if self.output_scale < 1:
            raise ConfigError("output_scale must be >= 1")
        return self


class ConfigManager:
    """Handles loading and saving of engine configuration."""

    def __init__(self, config_path: Union[str, Path] = CONFIG_FILE):
        """Initialize config manager.

        Parameters
        ----------
        config_path : str | Path
            Path to the configuration file (defaults to ~/.pixmill.json).
        """
        self.config_path = Path(config_path)

    def load(self) -> EngineConfig:
        """Load configuration from file, returning defaults if not found.

        Returns
        -------
        EngineConfig
            Loaded values, defaults for keys the file omits.

        Raises
        ------
        ConfigError
            If the file exists but is not valid JSON or holds bad values.
        """
        config = EngineConfig()
        if not self.config_path.exists():
            logger.debug("no config at %s, using defaults", self.config_path)
            return config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Could not parse config file {self.config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {self.config_path} must hold a JSON object")

        known = {f.name for f in fields(EngineConfig)}
        for key, value in data.items():
            if key in known:
                setattr(config, key, value)
            else:
                logger.warning("ignoring unknown config key %r", key)
        logger.info("Loaded configuration from %s", self.config_path)
        return config.validate()

    def save(self, config: EngineConfig) -> None:
        """Save configuration to file.

        Parameters
        ----------
        config : EngineConfig
            Configuration to write; validated first.
        """
        config.validate()
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(asdict(config), f, indent=2)


__all__ = ["EngineConfig", "ConfigManager", "ConfigError", "CONFIG_FILE"]
