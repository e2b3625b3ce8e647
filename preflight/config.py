"""Settings - which prerequisite checks a session runs."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_FILE = "preflight.yaml"
DEFAULT_COMMANDS = ["gcloud", "git"]


@dataclass
class Settings:
    """Typed configuration for a preflight session."""

    commands: list[str] = field(default_factory=lambda: list(DEFAULT_COMMANDS))
    gcloud: bool = True
    git_config: bool = True
    git_auth: bool = True
    home: Optional[Path] = None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML, then apply environment overrides.

        The file is optional: when no path is given, PREFLIGHT_CONFIG is used,
        falling back to ./preflight.yaml if it exists. An explicitly named
        file that is missing is an error.
        """
        explicit = path is not None or "PREFLIGHT_CONFIG" in os.environ
        path = Path(path or os.environ.get("PREFLIGHT_CONFIG", DEFAULT_CONFIG_FILE))

        if path.exists():
            settings = cls.from_dict(_read_yaml(path))
        elif explicit:
            raise ConfigError(f"Config file not found: {path}")
        else:
            settings = cls()

        commands = os.environ.get("PREFLIGHT_COMMANDS")
        if commands is not None:
            settings.commands = [c.strip() for c in commands.split(",") if c.strip()]
        return settings

    @classmethod
    def from_dict(cls, values: dict) -> "Settings":
        """Build settings from a parsed mapping, validating types."""
        settings = cls()

        if "commands" in values:
            commands = values["commands"]
            if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
                raise ConfigError("'commands' must be a list of program names")
            settings.commands = commands

        for key in ("gcloud", "git_config", "git_auth"):
            if key in values:
                if not isinstance(values[key], bool):
                    raise ConfigError(f"'{key}' must be true or false")
                setattr(settings, key, values[key])

        if values.get("home") is not None:
            if not isinstance(values["home"], str):
                raise ConfigError("'home' must be a path")
            settings.home = Path(values["home"]).expanduser()

        unknown = set(values) - {"commands", "gcloud", "git_config", "git_auth", "home"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(map(str, unknown)))}")
        return settings


def _read_yaml(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {path}: expected a mapping")
    return data
