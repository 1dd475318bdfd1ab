"""Tree queries shared by every SyntaxTree implementation."""

from __future__ import annotations

from codescope.syntax.models import CursorRange, NodePredicate, SyntaxNode


def smallest_node_containing_range(
    root: SyntaxNode,
    cursor_range: CursorRange,
    predicate: NodePredicate,
) -> SyntaxNode | None:
    """Find the smallest node accepted by predicate whose span contains the range.

    Only nodes containing the range are descended into, since a child never
    extends past its parent. Candidates compare by span extent; on equal
    extent the deeper node wins.

    Args:
        root: Node to start from (usually the tree root).
        cursor_range: Range that must be fully contained.
        predicate: Filter on candidate nodes (typically by kind).

    Returns:
        The matching node, or None if no accepted node contains the range.
    """
    best: SyntaxNode | None = None
    best_key: tuple[tuple[int, int], int] | None = None

    stack: list[tuple[SyntaxNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if not node.span.contains(cursor_range):
            continue
        if predicate(node):
            key = (node.span.extent, -depth)
            if best_key is None or key < best_key:
                best, best_key = node, key
        # Reversed so earlier siblings pop first and win exact ties.
        stack.extend((child, depth + 1) for child in reversed(node.children))

    return best
