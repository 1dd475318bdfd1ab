"""Scope readers: find the declaration enclosing a cursor.

A reader parses the document, takes the smallest scope-bearing node whose
span contains the cursor range, and describes it. Protocols and type
declarations are described by kind and name; functions and properties are
deliberately reported as the top scope. Every failure (no tree, no match,
missing name) degrades to a default value instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

import structlog

from codescope.config.constants import DEFAULT_NOTE_SEPARATOR, UNKNOWN_FIELD
from codescope.core.errors import ErrorCode
from codescope.scope.knowledge import extra_knowledge
from codescope.scope.models import TOP, EnclosedScope, Scope, ScopeDescriptor, ScopeKind
from codescope.scope.text import code_in_range, split_source_lines
from codescope.syntax.models import CursorRange, SyntaxNode, SyntaxTreeProvider
from codescope.syntax.treesitter import TreeSitterProvider

log = structlog.get_logger()

_TYPE_IDENTIFIER = "type_identifier"

# Keyword children of class_declaration that name the declaration kind
_TYPE_KEYWORDS = frozenset({"struct", "class", "enum", "actor"})


class ScopeReader(Protocol):
    """Resolves the enclosing scope of a cursor range in one language."""

    def context_containing_range(
        self,
        cursor_range: CursorRange,
        source_text: str,
        source_lines: Sequence[str],
    ) -> ScopeDescriptor:
        """Describe the scope enclosing cursor_range.

        Args:
            cursor_range: Range inside source_text (0-based).
            source_text: Full document text.
            source_lines: source_text split by split_source_lines().

        Returns:
            A descriptor; never raises for malformed input.
        """
        ...


def _is_scope_bearing(node: SyntaxNode) -> bool:
    return ScopeKind.from_node_kind(node.kind) is not None


@dataclass(frozen=True)
class SwiftScopeReader:
    """ScopeReader for Swift sources."""

    provider: SyntaxTreeProvider = field(default_factory=TreeSitterProvider)
    note_separator: str = DEFAULT_NOTE_SEPARATOR

    def context_containing_range(
        self,
        cursor_range: CursorRange,
        source_text: str,
        source_lines: Sequence[str],
    ) -> ScopeDescriptor:
        tree = self.provider.parse(source_text)
        if tree is None:
            log.debug("scope.parse_unavailable", reason=ErrorCode.PARSE_UNAVAILABLE.name)
            return ScopeDescriptor()

        notes = extra_knowledge(source_text, separator=self.note_separator)

        node = tree.smallest_node_containing_range(cursor_range, _is_scope_bearing)
        if node is None:
            log.debug(
                "scope.not_found",
                reason=ErrorCode.SCOPE_NOT_FOUND.name,
                range=str(cursor_range),
            )
            return ScopeDescriptor(extra_knowledge=notes)

        return ScopeDescriptor(scope=_describe(node, source_lines), extra_knowledge=notes)


def _describe(node: SyntaxNode, source_lines: Sequence[str]) -> Scope:
    kind = ScopeKind.from_node_kind(node.kind)
    if kind is ScopeKind.PROTOCOL_DECLARATION:
        return _describe_protocol(node, source_lines)
    if kind is ScopeKind.CLASS_DECLARATION:
        return _describe_type(node, source_lines)
    # Functions and properties are not described.
    return TOP


def _describe_protocol(node: SyntaxNode, source_lines: Sequence[str]) -> EnclosedScope:
    # protocol_declaration
    #   protocol
    #   type_identifier
    #   protocol_body
    name = UNKNOWN_FIELD
    for child in node.children:
        if child.kind == _TYPE_IDENTIFIER:
            name = code_in_range(source_lines, child.span)
            break
    else:
        _log_field_missing(node, "name")

    return EnclosedScope(declaration_kind="protocol", name=name, range=node.span)


def _describe_type(node: SyntaxNode, source_lines: Sequence[str]) -> EnclosedScope:
    # class_declaration
    #   struct | class | enum | actor
    #   type_identifier
    #   [: inheritance_specifier ...]
    #   class_body
    # The scan runs over every child; a later keyword or name replaces an
    # earlier one.
    declaration_kind = UNKNOWN_FIELD
    name = UNKNOWN_FIELD
    for child in node.children:
        if child.kind in _TYPE_KEYWORDS:
            declaration_kind = child.kind
        elif child.kind == _TYPE_IDENTIFIER:
            name = code_in_range(source_lines, child.span)

    if declaration_kind == UNKNOWN_FIELD:
        _log_field_missing(node, "declaration_kind")
    if name == UNKNOWN_FIELD:
        _log_field_missing(node, "name")

    return EnclosedScope(declaration_kind=declaration_kind, name=name, range=node.span)


def _log_field_missing(node: SyntaxNode, field_name: str) -> None:
    log.debug(
        "scope.field_missing",
        reason=ErrorCode.FIELD_MISSING.name,
        node_kind=node.kind,
        field=field_name,
        range=str(node.span),
    )


def resolve(
    cursor_range: CursorRange,
    source_text: str,
    source_lines: Sequence[str] | None = None,
    *,
    provider: SyntaxTreeProvider | None = None,
    note_separator: str = DEFAULT_NOTE_SEPARATOR,
) -> ScopeDescriptor:
    """Resolve the Swift scope enclosing cursor_range.

    Args:
        cursor_range: Range inside source_text (0-based).
        source_text: Full document text.
        source_lines: Pre-split lines; split here when omitted.
        provider: Syntax tree provider. Defaults to tree-sitter Swift.
        note_separator: Separator between advisory notes.

    Returns:
        ScopeDescriptor for the cursor.
    """
    if source_lines is None:
        source_lines = split_source_lines(source_text)
    reader = SwiftScopeReader(
        provider=provider if provider is not None else TreeSitterProvider(),
        note_separator=note_separator,
    )
    return reader.context_containing_range(cursor_range, source_text, source_lines)
