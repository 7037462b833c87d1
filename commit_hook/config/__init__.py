"""Configuration Management Package

Looks for config in (in order):
1. .cmhookrc in current directory (project-specific)
2. .cmhookrc in home directory (global default)
3. Built-in defaults

Config format (JSON):
{
    "rewrite": true,
    "quiet": false,
    "show_example": true,
    "example": "feat(parser): add support for nested rules"
}

The list of allowed commit types is fixed and cannot be configured.
"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_EXAMPLE = "feat(parser): add support for nested rules"


@dataclass
class Config:
    """User configuration with sensible defaults."""
    rewrite: bool = True  # Write the cleaned message back to the file
    quiet: bool = False  # Suppress success output
    show_example: bool = True  # Show an example header on format errors
    example: str = DEFAULT_EXAMPLE

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        for name in ('rewrite', 'quiet', 'show_example'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                default = getattr(defaults, name)
                warnings.append(f"Invalid {name} '{value}', using {str(default).lower()}")
                setattr(self, name, default)

        if not isinstance(self.example, str) or not self.example.strip():
            warnings.append(f"Invalid example '{self.example}', using '{defaults.example}'")
            self.example = defaults.example

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads configuration. The hook never writes a config file."""

    CONFIG_FILENAME = ".cmhookrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        """Load configuration from file or return defaults. Cached after first call."""
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (ValueError, OSError) as e:
            # json.JSONDecodeError is a ValueError
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "DEFAULT_EXAMPLE",
    "load_config",
    "get_config_path",
]
