"""Syntax trees: positions, the provider interface, and the tree-sitter provider."""

from codescope.syntax.models import (
    CursorPosition,
    CursorRange,
    NodePredicate,
    SyntaxNode,
    SyntaxTree,
    SyntaxTreeProvider,
)
from codescope.syntax.packs import LanguagePack, get_pack, get_pack_for_ext
from codescope.syntax.query import smallest_node_containing_range
from codescope.syntax.treesitter import TreeSitterProvider, TreeSitterTree

__all__ = [
    "CursorPosition",
    "CursorRange",
    "NodePredicate",
    "SyntaxNode",
    "SyntaxTree",
    "SyntaxTreeProvider",
    "LanguagePack",
    "get_pack",
    "get_pack_for_ext",
    "smallest_node_containing_range",
    "TreeSitterProvider",
    "TreeSitterTree",
]
