"""Configuration loader for todosync (global + project with TOML-based defaults)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for Python <3.11
    import tomli as tomllib  # type: ignore


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://playground.4geeks.com/todo"
DEFAULT_USERNAME = "alesanchezr"
PROJECT_DIR_NAME = ".todosync"


class ConfigLoader:
    """
    Handles configuration loading from multiple sources with priority resolution.

    Priority (highest → lowest):
    1. Command-line arguments (applied by the CLI via ``set``)
    2. Environment variables (TODOSYNC_<SECTION>_<KEY>)
    3. Project config (.todosync/config.toml)
    4. Global config ($XDG_CONFIG_HOME/todosync/config.toml)
    5. Built-in defaults

    Settings are two levels deep: ``[section]`` then ``key``.
    """

    def __init__(self, write_defaults: bool = True) -> None:
        self.global_dir = self.get_global_config_dir()
        self.project_dir = self.get_project_config_dir()
        self.write_defaults = write_defaults

        self.config: Dict[str, Dict[str, Any]] = self._get_default_config()
        self._load_all()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a ``section.key`` value."""
        section, _, name = key.partition(".")
        value = self.config.get(section, {}).get(name)
        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        """Override a ``section.key`` value in memory (not persisted)."""
        section, _, name = key.partition(".")
        self.config.setdefault(section, {})[name] = value

    @property
    def base_url(self) -> str:
        return str(self.get("api.base_url", DEFAULT_BASE_URL)).rstrip("/")

    @property
    def username(self) -> str:
        return str(self.get("api.username", DEFAULT_USERNAME))

    @property
    def timeout(self) -> Optional[float]:
        """Request timeout in seconds, or None when requests may wait forever."""
        value = self.get("api.timeout_seconds")
        if value in (None, ""):
            return None
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid api.timeout_seconds %r; requests will not time out", value)
            return None
        return timeout if timeout > 0 else None

    @property
    def log_file(self) -> Path:
        return Path(str(self.get("general.log_file", self.global_dir / "todosync.log"))).expanduser()

    @property
    def log_level(self) -> str:
        return str(self.get("general.log_level", "info")).upper()

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #
    def _load_all(self) -> None:
        global_file = self.global_dir / "config.toml"
        if global_file.exists():
            self._merge_file(global_file)
        elif self.write_defaults:
            self._create_default_config(global_file)

        if self.project_dir:
            self._merge_file(self.project_dir / "config.toml")

        self._apply_env_overrides()

    def _merge_file(self, path: Path) -> None:
        if not path.exists():
            return
        with open(path, "rb") as f:
            data = tomllib.load(f)
        for section, values in data.items():
            if isinstance(values, dict):
                self.config.setdefault(section, {}).update(values)

    def _apply_env_overrides(self) -> None:
        env_prefix = "TODOSYNC_"
        for key, value in os.environ.items():
            if not key.startswith(env_prefix):
                continue
            section, _, name = key[len(env_prefix) :].lower().partition("_")
            if name:
                self.set(f"{section}.{name}", value)

    # ------------------------------------------------------------------ #
    # Paths
    # ------------------------------------------------------------------ #
    @staticmethod
    def get_global_config_dir() -> Path:
        """XDG config dir on POSIX, %APPDATA% on Windows."""
        if os.name == "nt":
            base = os.environ.get("APPDATA", "~\\AppData\\Roaming")
        else:
            base = os.environ.get("XDG_CONFIG_HOME", "~/.config")
        return Path(base).expanduser() / "todosync"

    @staticmethod
    def get_project_config_dir() -> Path | None:
        """Nearest .todosync directory walking up from the working directory."""
        cwd = Path.cwd()
        candidates = (parent / PROJECT_DIR_NAME for parent in (cwd, *cwd.parents))
        return next((path for path in candidates if path.is_dir()), None)

    # ------------------------------------------------------------------ #
    # Defaults
    # ------------------------------------------------------------------ #
    def _create_default_config(self, config_file: Path) -> None:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(self._get_default_config_toml(), encoding="utf-8")

    def _get_default_config(self) -> Dict[str, Any]:
        return {
            "general": {
                "log_level": "info",
                "log_file": str(self.global_dir / "todosync.log"),
            },
            "api": {
                "base_url": DEFAULT_BASE_URL,
                "username": DEFAULT_USERNAME,
            },
        }

    def _get_default_config_toml(self) -> str:
        """Default config TOML text for first-run creation."""
        default = self._get_default_config()
        return "\n".join(
            [
                "[general]",
                f'log_level = "{default["general"]["log_level"]}"',
                f'log_file = "{Path(default["general"]["log_file"]).as_posix()}"',
                "",
                "[api]",
                f'base_url = "{default["api"]["base_url"]}"',
                f'username = "{default["api"]["username"]}"',
                "# Seconds before a request is abandoned; leave unset to wait forever.",
                "# timeout_seconds = 10",
                "",
            ]
        )


Config = ConfigLoader

__all__ = ["ConfigLoader", "Config", "DEFAULT_BASE_URL", "DEFAULT_USERNAME"]
