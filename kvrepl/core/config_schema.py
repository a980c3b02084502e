"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has wrong types or unknown fields, a clear ValidationError is raised at
startup instead of a cryptic KeyError deep in the shell.

Every field carries a default equal to the shipped value, so a missing
settings file behaves exactly like the file in config/settings/.

Each top-level class corresponds to one file in config/settings/:
    ShellSchema    → shell.yaml
    StorageSchema  → storage.yaml
    LoggingSchema  → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# shell.yaml
# =============================================================================


class ShellSchema(_StrictBase):
    prompt: str = ">>> "
    banner: str = "Key-Value R.E.P.L."
    hint: str = "Type 'help' for more information."
    example: str = "open ./database.db"
    requirement: str = "Opened Database"


# =============================================================================
# storage.yaml
# =============================================================================


class StorageSchema(_StrictBase):
    journal_mode: Literal["WAL", "DELETE", "TRUNCATE", "PERSIST", "MEMORY"] = "WAL"
    synchronous: Literal["NORMAL", "FULL", "EXTRA"] = "FULL"
    busy_timeout_ms: int = Field(default=5000, ge=0)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/kvrepl.jsonl"
    max_bytes: int = 10485760
    backup_count: int = 5


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = Field(default_factory=ConsoleHandlerSchema)
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json"] = "console"
    handlers: HandlersSchema = Field(default_factory=HandlersSchema)
