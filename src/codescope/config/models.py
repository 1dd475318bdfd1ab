"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CODESCOPE__SECTION__KEY)
3. Repo YAML (.codescope/config.yaml)
4. Global YAML (~/.config/codescope/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CODESCOPE__<SECTION>__<KEY>=<VALUE>

Examples:
    CODESCOPE__LOGGING__LEVEL=DEBUG
    CODESCOPE__RESOLVER__ACCEPT_PARTIAL_TREES=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from codescope.config.constants import DEFAULT_LANGUAGE, DEFAULT_NOTE_SEPARATOR

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CODESCOPE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG reports every degraded resolution.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ResolverConfig(BaseModel):
    """Scope resolver configuration.

    Env vars:
        CODESCOPE__RESOLVER__LANGUAGE: Language used when none can be detected
        CODESCOPE__RESOLVER__NOTE_SEPARATOR: Separator between advisory notes
        CODESCOPE__RESOLVER__ACCEPT_PARTIAL_TREES: Resolve in trees with syntax errors
        CODESCOPE__RESOLVER__MAX_FILE_SIZE_KB: Skip larger documents
    """

    language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Language assumed for text without a file extension.",
    )
    note_separator: str = Field(
        default=DEFAULT_NOTE_SEPARATOR,
        description="Inserted between advisory notes when more than one marker matches.",
    )
    accept_partial_trees: bool = Field(
        default=False,
        description="Resolve scopes in trees that contain syntax errors. "
        "TRADEOFF: Helps while the user is mid-edit, but recovered trees may "
        "report a declaration that does not exist yet.",
    )
    max_file_size_kb: int = Field(
        default=1024,
        description="Documents larger than this (KB) resolve to the top scope without parsing.",
    )

    @field_validator("language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("max_file_size_kb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_file_size_kb must be positive, got {v}")
        return v


class CodeScopeConfig(BaseModel):
    """Root configuration for codescope.

    All settings can be configured via:
    1. Environment variables: CODESCOPE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
