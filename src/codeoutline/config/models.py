"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CODEOUTLINE__SECTION__KEY)
3. Repo YAML (.codeoutline/config.yaml)
4. Global YAML (~/.config/codeoutline/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CODEOUTLINE__<SECTION>__<KEY>=<VALUE>

Examples:
    CODEOUTLINE__LOGGING__LEVEL=DEBUG
    CODEOUTLINE__OUTLINE__MEMBER_DEPTH=0
    CODEOUTLINE__LIMITS__MAX_FILE_SIZE_MB=2
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

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
        CODEOUTLINE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every skipped markup subtree.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class OutlineConfig(BaseModel):
    """Outline extraction behavior.

    Env vars:
        CODEOUTLINE__OUTLINE__MEMBER_DEPTH: Levels of members listed under containers
        CODEOUTLINE__OUTLINE__MARKUP: Attach component markup children
        CODEOUTLINE__OUTLINE__IMPLICIT_FILE_MODULE: Wrap file-scoped modules (ReScript)
    """

    member_depth: int = Field(
        default=1,
        description="How many levels of class/struct/module members to list. "
        "0 keeps the outline strictly top-level.",
    )
    markup: bool = Field(
        default=True,
        description="Attach JSX elements, fragments and spreads under component declarations.",
    )
    implicit_file_module: bool = Field(
        default=True,
        description="Wrap entries of languages where every file is a module "
        "in a module entry named after the file stem.",
    )
    signature_max_length: int = Field(
        default=120,
        description="Signatures longer than this are truncated with '...'.",
    )

    @field_validator("member_depth")
    @classmethod
    def validate_member_depth(cls, v: int) -> int:
        if not (0 <= v <= 4):
            raise ValueError(f"member_depth must be 0-4, got {v}")
        return v

    @field_validator("signature_max_length")
    @classmethod
    def validate_signature_max_length(cls, v: int) -> int:
        if v < 8:
            raise ValueError(f"signature_max_length must be at least 8, got {v}")
        return v


class LimitsConfig(BaseModel):
    """Resource limits.

    Env vars:
        CODEOUTLINE__LIMITS__MAX_FILE_SIZE_MB: Refuse files larger than this
        CODEOUTLINE__LIMITS__OUTLINE_MAX_LINES: Rendered outline line cap
    """

    max_file_size_mb: int = Field(
        default=10,
        description="Files larger than this (MB) are reported as FILE_TOO_LARGE.",
    )
    outline_max_lines: int = Field(
        default=200,
        description="Maximum lines in a rendered text outline.",
    )

    @field_validator("max_file_size_mb", "outline_max_lines")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Must be positive, got {v}")
        return v


class CodeOutlineConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
