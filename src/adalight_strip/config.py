"""
Strip configuration loaded from a YAML file.

Example file::

    port: /dev/ttyUSB0
    led_count: 60
    baud: 115200
    timeout: 1.0
    log_level: INFO

Usage::

    from adalight_strip.config import load_config

    config = load_config("config/strip.yaml")
    with config.create_controller() as strip:
        strip.rainbow()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from .constants import DEFAULT_BAUD, DEFAULT_TIMEOUT
from .controller import LedController
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StripConfig:
    """Validated strip configuration."""

    port: str
    led_count: int
    baud: int = DEFAULT_BAUD
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    def create_controller(self) -> LedController:
        """Build an unopened serial-backed :class:`LedController`."""
        return LedController.for_port(
            self.port,
            led_count=self.led_count,
            baud_rate=self.baud,
            timeout=self.timeout,
        )


def load_config(path: str | Path) -> StripConfig:
    """Load and validate a strip configuration from a YAML file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigurationError: If the config is malformed or contains invalid values.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Cannot parse {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    port = raw.get("port")
    if not isinstance(port, str) or not port:
        raise ConfigurationError("Config must specify a non-empty 'port' string")

    led_count = raw.get("led_count")
    if isinstance(led_count, bool) or not isinstance(led_count, int) or led_count < 1:
        raise ConfigurationError(f"'led_count' must be a positive integer, got {led_count!r}")

    baud = raw.get("baud", DEFAULT_BAUD)
    if isinstance(baud, bool) or not isinstance(baud, int) or baud <= 0:
        raise ConfigurationError(f"'baud' must be a positive integer, got {baud!r}")

    timeout = raw.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigurationError(f"'timeout' must be a positive number, got {timeout!r}")

    log_level = str(raw.get("log_level", "INFO")).upper()
    if log_level not in _VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"'log_level' must be one of {list(_VALID_LOG_LEVELS)}, got {log_level!r}"
        )

    config = StripConfig(
        port=port,
        led_count=led_count,
        baud=baud,
        timeout=float(timeout),
        log_level=log_level,
    )
    logger.debug("Loaded config from %s: %s", path, config)
    return config
