"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
provides in-memory syntax trees for resolver tests that should not depend on
a real grammar.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of codescope modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("codescope"):
        del sys.modules[module_name]

from codescope.syntax.models import CursorRange, NodePredicate  # noqa: E402
from codescope.syntax.query import smallest_node_containing_range  # noqa: E402


@dataclass
class FakeNode:
    """Hand-built SyntaxNode."""

    kind: str
    span: CursorRange
    children: list[FakeNode] = field(default_factory=list)


@dataclass
class FakeTree:
    root: FakeNode

    def smallest_node_containing_range(
        self, cursor_range: CursorRange, predicate: NodePredicate
    ) -> FakeNode | None:
        return smallest_node_containing_range(self.root, cursor_range, predicate)  # type: ignore[return-value]


@dataclass
class FakeProvider:
    """Provider returning a fixed tree (or None) and counting parses."""

    tree: FakeTree | None
    language: str = "swift"
    calls: int = 0

    def parse(self, source_text: str) -> FakeTree | None:  # noqa: ARG002
        self.calls += 1
        return self.tree


NodeFactory = Callable[..., FakeNode]


@pytest.fixture
def node() -> NodeFactory:
    """Factory: node("kind", (l, c), (l, c), *children)."""

    def make(
        kind: str, start: tuple[int, int], end: tuple[int, int], *children: FakeNode
    ) -> FakeNode:
        return FakeNode(kind, CursorRange.from_points(start, end), list(children))

    return make


@pytest.fixture
def provider_for() -> Callable[[FakeNode | None], FakeProvider]:
    """Factory: provider_for(root) -> FakeProvider; provider_for(None) fails to parse."""

    def make(root: FakeNode | None) -> FakeProvider:
        return FakeProvider(FakeTree(root) if root is not None else None)

    return make


@pytest.fixture
def swift_provider():
    """Tree-sitter Swift provider; skips when the grammar is not installed."""
    pytest.importorskip("tree_sitter")
    from codescope.core.errors import ParseError
    from codescope.syntax.treesitter import TreeSitterProvider, get_language

    try:
        get_language("swift")
    except ParseError:
        pytest.skip("tree-sitter-swift grammar not available")
    return TreeSitterProvider(language="swift")
