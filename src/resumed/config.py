"""
Configuration file support for resumed.

Provides:
- Config dataclasses for holding configuration values
- TOML config file loading (resumed.toml)
- Precedence: CLI > config file > defaults
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "resumed.toml"

DEFAULT_OUTPUT = "resume.html"
DEFAULT_TIMEOUT = 30.0


@dataclass
class RenderConfig:
    """Defaults for the render command."""

    output: str = DEFAULT_OUTPUT
    browser_bin: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_file: Optional[str] = None


def _table(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"[{name}] must be a table, got {value!r}")
    return value


def _string(table: Dict[str, Any], table_name: str, key: str) -> Optional[str]:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigurationError(f"[{table_name}].{key} must be a string, got {value!r}")
    return value


@dataclass
class Config:
    """Complete configuration for resumed."""

    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], config_path: Optional[Path] = None) -> "Config":
        """Create Config from a dictionary (parsed TOML)."""
        render_data = _table(data, "render")
        logging_data = _table(data, "logging")

        timeout = render_data.get("timeout", DEFAULT_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
            raise ConfigurationError(
                f"[render].timeout must be a non-negative number, got {timeout!r}"
            )

        return cls(
            render=RenderConfig(
                output=_string(render_data, "render", "output") or DEFAULT_OUTPUT,
                browser_bin=_string(render_data, "render", "browser_bin") or None,
                timeout=float(timeout),
            ),
            logging=LoggingConfig(
                level=_string(logging_data, "logging", "level") or "WARNING",
                log_file=_string(logging_data, "logging", "log_file") or None,
            ),
            config_path=config_path,
        )


def find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the configuration file.

    Search order:
    1. Explicit path if provided (must exist)
    2. resumed.toml in the current directory

    Returns:
        Path to config file, or None if not found.
    """
    if config_path is not None:
        if config_path.exists():
            return config_path
        raise ConfigurationError(f"Config file not found: {config_path}")

    cwd_config = Path.cwd() / DEFAULT_CONFIG_NAME
    if cwd_config.exists():
        return cwd_config

    return None


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a TOML file.

    If no config file is found, returns default configuration.

    Raises:
        ConfigurationError: If a config file exists but cannot be parsed.
    """
    config_file = find_config_file(config_path)

    if config_file is None:
        logger.debug("No config file found, using defaults")
        return Config()

    logger.debug(f"Loading config from: {config_file}")

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_file}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_file}: {e}")

    config = Config.from_dict(data, config_path=config_file)
    logger.info(f"Loaded config from: {config_file}")
    return config
