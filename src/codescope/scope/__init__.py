"""Enclosing-scope resolution for cursor ranges."""

from codescope.scope.collector import collect_scope_context, detect_language, reader_for_language
from codescope.scope.knowledge import collect_notes, extra_knowledge
from codescope.scope.models import (
    TOP,
    EnclosedScope,
    Scope,
    ScopeDescriptor,
    ScopeKind,
    TopScope,
    render,
)
from codescope.scope.reader import ScopeReader, SwiftScopeReader, resolve
from codescope.scope.text import code_in_range, split_source_lines

__all__ = [
    "TOP",
    "EnclosedScope",
    "Scope",
    "ScopeDescriptor",
    "ScopeKind",
    "TopScope",
    "render",
    "ScopeReader",
    "SwiftScopeReader",
    "resolve",
    "collect_scope_context",
    "detect_language",
    "reader_for_language",
    "collect_notes",
    "extra_knowledge",
    "code_in_range",
    "split_source_lines",
]
