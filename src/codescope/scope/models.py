"""Scope descriptors returned by scope readers, and their prompt rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from codescope.syntax.models import CursorRange


class ScopeKind(Enum):
    """Node kinds treated as scope-bearing."""

    PROTOCOL_DECLARATION = "protocol_declaration"
    # struct, class, enum and actor all parse as class_declaration
    CLASS_DECLARATION = "class_declaration"
    FUNCTION_DECLARATION = "function_declaration"
    PROPERTY_DECLARATION = "property_declaration"
    COMPUTED_PROPERTY = "computed_property"

    @classmethod
    def from_node_kind(cls, kind: str | None) -> ScopeKind | None:
        """Map a parser node type to a ScopeKind, or None if not scope-bearing."""
        return _NODE_KIND_TO_SCOPE.get(kind or "")


_NODE_KIND_TO_SCOPE: dict[str, ScopeKind] = {member.value: member for member in ScopeKind}


@dataclass(frozen=True, slots=True)
class TopScope:
    """No describable enclosing scope."""


@dataclass(frozen=True, slots=True)
class EnclosedScope:
    """Cursor is inside a named declaration."""

    declaration_kind: str  # protocol, struct, class, enum, actor, or unknown
    name: str
    range: CursorRange


Scope = TopScope | EnclosedScope

TOP = TopScope()


@dataclass(frozen=True, slots=True)
class ScopeDescriptor:
    """Enclosing scope of a cursor plus advisory notes about the document."""

    scope: Scope = TOP
    extra_knowledge: str = ""

    @property
    def is_top(self) -> bool:
        return isinstance(self.scope, TopScope)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        scope: dict[str, Any] = {"type": "top"}
        if isinstance(self.scope, EnclosedScope):
            rng = self.scope.range
            scope = {
                "type": "scope",
                "declaration_kind": self.scope.declaration_kind,
                "name": self.scope.name,
                "range": {
                    "start": {"line": rng.start.line, "column": rng.start.column},
                    "end": {"line": rng.end.line, "column": rng.end.column},
                },
            }
        return {"scope": scope, "extra_knowledge": self.extra_knowledge}

    def __str__(self) -> str:
        return render(self)


def render(descriptor: ScopeDescriptor) -> str:
    """Render a descriptor as prompt text.

    Top renders as the advisory notes alone. An enclosed scope renders as
    ``Inside <kind> <name>, range [l, c] - [l, c]`` followed by a newline and
    the notes; downstream prompts rely on this exact layout.
    """
    scope = descriptor.scope
    if isinstance(scope, EnclosedScope):
        return (
            f"Inside {scope.declaration_kind} {scope.name}, range {scope.range}\n"
            f"{descriptor.extra_knowledge}"
        )
    return descriptor.extra_knowledge
