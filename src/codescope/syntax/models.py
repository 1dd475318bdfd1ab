"""Positions, ranges and the read-only syntax tree interface."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True, order=True)
class CursorPosition:
    """A 0-based (line, column) point. Columns count characters, not bytes."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"[{self.line}, {self.column}]"


@dataclass(frozen=True, slots=True)
class CursorRange:
    """Inclusive span between two positions in document order."""

    start: CursorPosition
    end: CursorPosition

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} precedes start {self.start}")

    @classmethod
    def from_editor(cls, anchor: CursorPosition, head: CursorPosition) -> CursorRange:
        """Build a range from an editor selection, which may run backwards."""
        if head < anchor:
            anchor, head = head, anchor
        return cls(anchor, head)

    @classmethod
    def from_points(cls, start: tuple[int, int], end: tuple[int, int]) -> CursorRange:
        """Build a range from (row, column) pairs reported by a syntax tree."""
        return cls(CursorPosition(start[0], start[1]), CursorPosition(end[0], end[1]))

    @classmethod
    def at(cls, line: int, column: int) -> CursorRange:
        """Zero-width range for a caret."""
        position = CursorPosition(line, column)
        return cls(position, position)

    def contains(self, other: CursorRange) -> bool:
        return self.start <= other.start and other.end <= self.end

    @property
    def extent(self) -> tuple[int, int]:
        """Sort key for span size.

        Lines spanned first, then the column difference. Only meaningful
        between ranges that both contain a common range, where it orders
        an enclosing span after the spans nested in it.
        """
        return (self.end.line - self.start.line, self.end.column - self.start.column)

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


class SyntaxNode(Protocol):
    """Read-only view of one node of a parsed tree."""

    @property
    def kind(self) -> str:
        """Node type tag reported by the parser (e.g. 'class_declaration')."""
        ...

    @property
    def span(self) -> CursorRange: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...


NodePredicate = Callable[[SyntaxNode], bool]


class SyntaxTree(Protocol):
    """A parsed source buffer."""

    @property
    def root(self) -> SyntaxNode: ...

    def smallest_node_containing_range(
        self, cursor_range: CursorRange, predicate: NodePredicate
    ) -> SyntaxNode | None:
        """Smallest node accepted by predicate whose span contains cursor_range."""
        ...


class SyntaxTreeProvider(Protocol):
    """Parses source text into a SyntaxTree.

    Implementations return None rather than raising when no tree can be
    produced (missing grammar, unusable input).
    """

    @property
    def language(self) -> str: ...

    def parse(self, source_text: str) -> SyntaxTree | None: ...
