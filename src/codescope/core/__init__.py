"""Core module exports."""

from codescope.core.errors import (
    CodeScopeError,
    ConfigError,
    ErrorCode,
    ParseError,
)
from codescope.core.logging import (
    configure_logging,
)

__all__ = [
    # Errors
    "CodeScopeError",
    "ConfigError",
    "ErrorCode",
    "ParseError",
    # Logging
    "configure_logging",
]
