"""
Configuration Management.

Loads settings from config/settings/*.yaml under the project root.
The shell reads no environment variables and takes no secrets.

Settings (YAML):
    shell.yaml    - Prompt, banner and console wording
    storage.yaml  - SQLite journal and durability pragmas
    logging.yaml  - Logging configuration

The project root is the nearest directory holding a .project_root marker,
searched upwards from the working directory and then from the installed
package. When no root or no file is found the schema defaults apply, so
the shell works from any directory.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kvrepl.core.config_schema import LoggingSchema, ShellSchema, StorageSchema

PACKAGE_ROOT = Path(__file__).resolve().parents[2]


def _search_upwards(start: Path) -> Path | None:
    current = start.resolve()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    return None


def find_project_root(start: Path | None = None) -> Path:
    """Find project root by looking for .project_root marker file."""
    for candidate in (start or Path.cwd(), PACKAGE_ROOT):
        root = _search_upwards(candidate)
        if root is not None:
            return root
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def settings_path(filename: str) -> Path | None:
    """Return the path of a settings file, or None when it does not exist."""
    try:
        root = find_project_root()
    except RuntimeError:
        return None
    path = root / "config" / "settings" / filename
    return path if path.exists() else None


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    config_path = settings_path(filename)

    if config_path is None:
        raise FileNotFoundError(f"Configuration file not found: {filename}")

    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Falls back to schema defaults."""
    if settings_path(filename) is None:
        return schema_cls()

    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Wrong types or unknown fields raise a clear error immediately.

    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._shell = _load_validated(ShellSchema, "shell.yaml")
        self._storage = _load_validated(StorageSchema, "storage.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def shell(self) -> ShellSchema:
        """Console wording and prompt."""
        return self._shell

    @property
    def storage(self) -> StorageSchema:
        """Storage engine pragmas."""
        return self._storage

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()
