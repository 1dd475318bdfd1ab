"""Config module exports."""

from codescope.config.loader import load_config
from codescope.config.models import (
    CodeScopeConfig,
    LoggingConfig,
    LogOutputConfig,
    ResolverConfig,
)

__all__ = [
    "load_config",
    "CodeScopeConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ResolverConfig",
]
