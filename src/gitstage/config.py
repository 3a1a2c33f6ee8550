"""Configuration loading for gitstage.

Settings come from an optional ``.gitstage.toml`` in the project root. Every
key is optional; missing keys fall back to the defaults in ``constants``.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from gitstage import GitStageError
from gitstage.constants import (
    ADD_TO_INDEX_COMMAND_NAME,
    CONFIG_FILE,
    DEFAULT_BACKEND,
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_SESSION_ID,
)
from gitstage.messages import Messages

_TOP_LEVEL_KEYS = {"backend", "git_executable", "console_label", "session_id", "messages"}


class ConfigError(GitStageError):
    """Raised when the configuration file cannot be used."""


@dataclass(frozen=True)
class GitStageConfig:
    """Effective configuration of a project."""

    backend: str = DEFAULT_BACKEND
    git_executable: str = DEFAULT_GIT_EXECUTABLE
    console_label: str = ADD_TO_INDEX_COMMAND_NAME
    session_id: str = DEFAULT_SESSION_ID
    messages: Messages = field(default_factory=Messages)


def load_config(project_root: Path) -> GitStageConfig:
    """Load the configuration of the project at ``project_root``.

    Args:
        project_root: Root directory of the project

    Returns:
        GitStageConfig; defaults if no configuration file exists

    Raises:
        ConfigError: If the file is malformed or contains unknown keys
    """
    config_path = Path(project_root) / CONFIG_FILE

    if not config_path.exists():
        return GitStageConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e

    return config_from_dict(data)


def config_from_dict(data: Dict[str, Any]) -> GitStageConfig:
    """Build a configuration from already parsed TOML data."""
    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(sorted(unknown))}")

    overrides = data.get("messages", {})
    if not isinstance(overrides, dict):
        raise ConfigError("[messages] must be a table")

    try:
        messages = Messages().with_overrides(overrides)
    except KeyError as e:
        raise ConfigError(f"Unknown message(s): {e.args[0]}") from e

    settings = {}
    for key in ("backend", "git_executable", "console_label", "session_id"):
        if key in data:
            if not isinstance(data[key], str) or not data[key]:
                raise ConfigError(f"'{key}' must be a non-empty string")
            settings[key] = data[key]

    return GitStageConfig(messages=messages, **settings)
