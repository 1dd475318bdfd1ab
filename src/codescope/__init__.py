"""codescope - enclosing-scope descriptions for cursor positions in source files."""

from codescope.scope import (
    EnclosedScope,
    ScopeDescriptor,
    TopScope,
    collect_scope_context,
    render,
    resolve,
)
from codescope.syntax import CursorPosition, CursorRange

__version__ = "0.1.0"

__all__ = [
    "CursorPosition",
    "CursorRange",
    "EnclosedScope",
    "ScopeDescriptor",
    "TopScope",
    "collect_scope_context",
    "render",
    "resolve",
]
