"""Configuration loading and management."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from executor_resources.core.conf import flatten_executor_table, parse_executor_conf
from executor_resources.core.exceptions import ConfigError, ConfigNotFoundError
from executor_resources.core.resources import ExecutorResourceRequests

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "executor-resources.toml"
PYPROJECT_TOOL = "executor-resources"


@dataclass
class ExecResConfig:
    """Loaded configuration.

    ``executor`` holds the base executor table; each entry in ``profiles``
    overrides parts of it.
    """

    executor: dict[str, Any] = field(default_factory=dict)
    profiles: dict[str, dict[str, Any]] = field(default_factory=dict)

    _source_path: Path | None = field(default=None, repr=False)

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    def get_executor_conf(self, profile: str | None = None) -> dict[str, Any]:
        """Get flat executor keys, with *profile* overriding the base table."""
        table = self.executor
        if profile is not None:
            if profile not in self.profiles:
                raise ConfigError(f"Unknown profile: {profile}")
            table = _merge(table, self.profiles[profile])
        return flatten_executor_table(table)

    def get_requests(self, profile: str | None = None) -> ExecutorResourceRequests:
        """Parse the executor table (and *profile*) into resource requests."""
        return parse_executor_conf(self.get_executor_conf(profile), prefix="")


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    Search order:
    1. ./executor-resources.toml (current directory)
    2. ./pyproject.toml [tool.executor-resources] section
    3. Git repository root executor-resources.toml
    4. ~/.config/executor-resources/config.toml
    """
    cwd = Path.cwd()
    if (cwd / CONFIG_FILENAME).exists():
        return cwd / CONFIG_FILENAME

    if (cwd / "pyproject.toml").exists():
        try:
            with open(cwd / "pyproject.toml", "rb") as f:
                pyproject = tomllib.load(f)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            logger.debug(f"Skipping unreadable pyproject.toml: {e}")
        else:
            if PYPROJECT_TOOL in pyproject.get("tool", {}):
                return cwd / "pyproject.toml"

    git_root = _find_git_root(cwd)
    if git_root and (git_root / CONFIG_FILENAME).exists():
        return git_root / CONFIG_FILENAME

    user_config = Path.home() / ".config" / PYPROJECT_TOOL / "config.toml"
    if user_config.exists():
        return user_config

    return None


def _find_git_root(start: Path) -> Path | None:
    """Find git repository root."""
    current = start.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return None


def load_config(path: Path | str | None = None) -> ExecResConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover

    Raises:
        ConfigNotFoundError: If an explicit *path* does not exist.
        ConfigError: If the file cannot be read, is not valid TOML, or its
            executor and profile entries are not tables.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No configuration file found")
        return ExecResConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    logger.debug(f"Loading configuration from {path}")
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    # Handle pyproject.toml
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get(PYPROJECT_TOOL, {})
        if not isinstance(data, dict):
            raise ConfigError(f"[tool.{PYPROJECT_TOOL}] must be a table in {path}")

    executor = data.get("executor", {})
    if not isinstance(executor, dict):
        raise ConfigError(f"[executor] must be a table in {path}")

    profiles = data.get("profiles", {})
    if not isinstance(profiles, dict):
        raise ConfigError(f"[profiles] must be a table in {path}")
    for name, profile in profiles.items():
        if not isinstance(profile, dict):
            raise ConfigError(f"[profiles.{name}] must be a table in {path}")

    config = ExecResConfig(executor=executor, profiles=profiles)
    config._source_path = path

    return config


# Global config cache
_cached_config: ExecResConfig | None = None


def get_config() -> ExecResConfig:
    """Get the global configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(path: Path | str | None = None) -> ExecResConfig:
    """Reload configuration (clears cache)."""
    global _cached_config
    _cached_config = load_config(path)
    return _cached_config
