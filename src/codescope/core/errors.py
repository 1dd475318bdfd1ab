"""codescope error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Resolve (degradations; logged, never raised to resolver callers)
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

    # Resolve (3xxx)
    PARSE_UNAVAILABLE = 3001
    SCOPE_NOT_FOUND = 3002
    FIELD_MISSING = 3003
    SPAN_OUT_OF_BOUNDS = 3004


@dataclass(frozen=True, slots=True)
class CodeScopeError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CodeScopeError):
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


class ParseError(CodeScopeError):
    """Syntax tree could not be produced.

    Raised inside syntax providers only. Providers and readers turn it into
    a degraded result instead of letting it reach resolver callers.
    """

    @classmethod
    def grammar_unavailable(cls, language: str, package: str | None = None) -> "ParseError":
        message = f"Language not available: {language}"
        details: dict[str, Any] = {"language": language}
        if package:
            message = f"{message} (install {package})"
            details["package"] = package
        return cls(code=ErrorCode.PARSE_UNAVAILABLE, message=message, details=details)

    @classmethod
    def parser_failed(cls, language: str, reason: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_UNAVAILABLE,
            message=f"Failed to parse {language} source: {reason}",
            details={"language": language, "reason": reason},
        )

