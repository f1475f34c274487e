"""codeoutline error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Outline (grammars, source files)
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Outline (3xxx)
    GRAMMAR_UNAVAILABLE = 3001
    LANGUAGE_UNSUPPORTED = 3002
    FILE_READ_ERROR = 3003
    FILE_TOO_LARGE = 3004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001
    REGISTRY_DEFECT = 9003


@dataclass(frozen=True, slots=True)
class CodeOutlineError(Exception):
    """Base error with structured context for result objects and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'GRAMMAR_UNAVAILABLE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CodeOutlineError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class GrammarError(CodeOutlineError):
    """A language's tree-sitter grammar cannot be loaded."""

    @classmethod
    def unavailable(cls, language: str, package: str, reason: str) -> "GrammarError":
        # Installing the grammar package fixes it, so callers may retry.
        return cls(
            code=ErrorCode.GRAMMAR_UNAVAILABLE,
            message=f"Grammar for {language} is not available ({package}): {reason}",
            retryable=True,
            details={"language": language, "package": package, "reason": reason},
        )

    @classmethod
    def unsupported(cls, language: str) -> "GrammarError":
        return cls(
            code=ErrorCode.LANGUAGE_UNSUPPORTED,
            message=f"Unsupported language: {language}",
            details={"language": language},
        )


class SourceError(CodeOutlineError):
    """Source file could not be read or is outside configured limits."""

    @classmethod
    def read_error(cls, path: str, reason: str) -> "SourceError":
        return cls(
            code=ErrorCode.FILE_READ_ERROR,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def too_large(cls, path: str, size: int, limit: int) -> "SourceError":
        return cls(
            code=ErrorCode.FILE_TOO_LARGE,
            message=f"{path} is {size} bytes, limit is {limit} bytes",
            details={"path": path, "size": size, "limit": limit},
        )


class InternalError(CodeOutlineError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )

    @classmethod
    def registry_defect(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.REGISTRY_DEFECT,
            message=f"Language registry defect: {reason}",
            details=details,
        )
