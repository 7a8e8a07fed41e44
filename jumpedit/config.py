"""
Configuration — Data directory discovery and settings

Config hierarchy (highest to lowest priority):
  1. Environment variables (JE_SYMBOLS, JE_LOG_LEVEL)
  2. Config file (<data dir>/config.yaml)
  3. Defaults

Data directory:
  JE_DATA_DIR if set, else $XDG_DATA_HOME/je, else a per-platform
  location under $HOME. Neither XDG_DATA_HOME nor HOME set is fatal.
"""

import os
import sys
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .errors import ConfigError


APP_NAME = "je"

# Per-platform data directory relative to $HOME
HOME_DATA_DIRS = {
    "darwin": Path("Library") / "Application Support" / APP_NAME,
}
DEFAULT_HOME_DATA_DIR = Path(".local") / "share" / APP_NAME

CONFIG_FILE = "config.yaml"
DEFAULT_STORE_FILE = "je.db"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_data_dir(environ: Optional[Dict[str, str]] = None,
                     platform: Optional[str] = None) -> Path:
    """
    Locate the directory holding the store and config file.

    Args:
        environ: Environment mapping (default: os.environ)
        platform: sys.platform value (default: current platform)

    Raises:
        ConfigError: neither XDG_DATA_HOME nor HOME is set
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    if environ.get("JE_DATA_DIR"):
        return Path(environ["JE_DATA_DIR"])
    if environ.get("XDG_DATA_HOME"):
        return Path(environ["XDG_DATA_HOME"]) / APP_NAME
    if environ.get("HOME"):
        return Path(environ["HOME"]) / HOME_DATA_DIRS.get(platform, DEFAULT_HOME_DATA_DIR)

    raise ConfigError("neither XDG_DATA_HOME nor HOME is set")


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        valid_symbols = ("unicode", "ascii", "auto")
        if self.symbols not in valid_symbols:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(valid_symbols)}"
        return None


@dataclass
class LoggingConfig:
    """Diagnostic logging on stderr."""
    level: str = "WARNING"

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if str(self.level).upper() not in LOG_LEVELS:
            return f"Unknown log level '{self.level}'. Valid: {', '.join(LOG_LEVELS)}"
        return None


@dataclass
class StoreConfig:
    """Label store location."""
    filename: str = DEFAULT_STORE_FILE

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not self.filename or "/" in self.filename:
            return f"Invalid store filename '{self.filename}'. Use a plain file name"
        return None


@dataclass
class Config:
    """Application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    store: StoreConfig = field(default_factory=StoreConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        display_data = data.get("display") or {}
        logging_data = data.get("logging") or {}
        store_data = data.get("store") or {}

        return cls(
            display=DisplayConfig(symbols=display_data.get("symbols", "auto")),
            logging=LoggingConfig(level=logging_data.get("level", "WARNING")),
            store=StoreConfig(filename=store_data.get("filename", DEFAULT_STORE_FILE)),
        )

    def validate(self) -> Optional[str]:
        """First validation error across sections, or None."""
        for section in (self.display, self.logging, self.store):
            error = section.validate()
            if error:
                return error
        return None


class ConfigManager:
    """
    Loads configuration for one invocation.

    The config file is optional; a malformed file is ignored and
    defaults apply.
    """

    def __init__(self, data_dir: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.data_dir = Path(data_dir) if data_dir else resolve_data_dir(self.environ)
        self._config: Optional[Config] = None

    @property
    def config_path(self) -> Path:
        return self.data_dir / CONFIG_FILE

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.load().store.filename

    def load(self) -> Config:
        """
        Load configuration from all sources.

        Raises:
            ConfigError: the merged configuration is invalid
        """
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        if self.config_path.exists():
            try:
                with open(self.config_path) as f:
                    file_data = yaml.safe_load(f) or {}
                if isinstance(file_data, dict):
                    config_data = self._merge(config_data, file_data)
            except (OSError, yaml.YAMLError):
                pass  # Ignore malformed config

        if self.environ.get("JE_SYMBOLS"):
            config_data.setdefault("display", {})["symbols"] = self.environ["JE_SYMBOLS"]
        if self.environ.get("JE_LOG_LEVEL"):
            config_data.setdefault("logging", {})["level"] = self.environ["JE_LOG_LEVEL"]

        config = Config.from_dict(config_data)
        error = config.validate()
        if error:
            raise ConfigError(error, hint=f"Check {self.config_path} and JE_* environment variables")

        self._config = config
        return self._config

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result
