"""Tree-sitter backed SyntaxTreeProvider.

Wraps tree-sitter trees in the read-only SyntaxNode interface:
- node kinds are the grammar's node type strings
- spans are CursorRanges with character columns (tree-sitter reports UTF-8
  byte columns, which are converted here and nowhere else)
- every parse gets its own tree_sitter.Parser, so one provider can be shared
  across threads
"""

from __future__ import annotations

import importlib
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import structlog
import tree_sitter

from codescope.config.constants import DEFAULT_LANGUAGE
from codescope.core.errors import ErrorCode, ParseError
from codescope.syntax.models import CursorPosition, CursorRange, NodePredicate
from codescope.syntax.packs import LanguagePack, get_pack
from codescope.syntax.query import smallest_node_containing_range

log = structlog.get_logger()

# grammar_name -> tree_sitter.Language (immutable, safe to share)
_LANGUAGES: dict[str, tree_sitter.Language] = {}


def _load_language(pack: LanguagePack) -> tree_sitter.Language:
    """Load a grammar through its pack metadata."""
    if pack.grammar_name in _LANGUAGES:
        return _LANGUAGES[pack.grammar_name]

    try:
        mod = importlib.import_module(pack.grammar_module)
        lang_fn = getattr(mod, pack.language_func or "language")
        lang = tree_sitter.Language(lang_fn())
    except (ImportError, AttributeError, TypeError, ValueError) as err:
        # TypeError/ValueError: grammar built for an incompatible tree-sitter ABI
        raise ParseError.grammar_unavailable(pack.name, pack.grammar_package) from err

    _LANGUAGES[pack.grammar_name] = lang
    return lang


def get_language(name: str) -> tree_sitter.Language:
    """Get the tree-sitter Language for a language name.

    Raises:
        ParseError: No pack is registered or its grammar is not installed.
    """
    pack = get_pack(name)
    if pack is None:
        raise ParseError.grammar_unavailable(name)
    return _load_language(pack)


class _ColumnMap:
    """Converts tree-sitter byte columns to character columns."""

    __slots__ = ("_lines",)

    def __init__(self, source: bytes) -> None:
        self._lines = source.split(b"\n")

    def char_column(self, row: int, byte_column: int) -> int:
        if row >= len(self._lines):
            return byte_column
        line = self._lines[row]
        if line.isascii():
            return byte_column
        return len(line[:byte_column].decode("utf-8", errors="ignore"))


class TreeSitterNode:
    """SyntaxNode view of a tree-sitter node. Children are wrapped lazily."""

    __slots__ = ("_node", "_columns", "_span")

    def __init__(self, node: Any, columns: _ColumnMap) -> None:
        self._node = node
        self._columns = columns
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        self._span = CursorRange(
            CursorPosition(start_row, columns.char_column(start_row, start_col)),
            CursorPosition(end_row, columns.char_column(end_row, end_col)),
        )

    @property
    def kind(self) -> str:
        return str(self._node.type)

    @property
    def span(self) -> CursorRange:
        return self._span

    @property
    def children(self) -> Sequence[TreeSitterNode]:
        return tuple(TreeSitterNode(child, self._columns) for child in self._node.children)

    def __repr__(self) -> str:
        return f"TreeSitterNode({self.kind} {self._span})"


@dataclass
class TreeSitterTree:
    """SyntaxTree over a parsed tree-sitter tree."""

    tree: Any  # tree_sitter.Tree
    language: str
    error_count: int
    _columns: _ColumnMap

    @property
    def root(self) -> TreeSitterNode:
        return TreeSitterNode(self.tree.root_node, self._columns)

    def smallest_node_containing_range(
        self, cursor_range: CursorRange, predicate: NodePredicate
    ) -> TreeSitterNode | None:
        return smallest_node_containing_range(self.root, cursor_range, predicate)  # type: ignore[return-value]


def _count_errors(root: Any) -> int:
    errors = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            errors += 1
        stack.extend(node.children)
    return errors


@dataclass
class TreeSitterProvider:
    """
    Tree-sitter parser behind the SyntaxTreeProvider interface.

    Usage::

        provider = TreeSitterProvider()  # swift
        tree = provider.parse(source_text)
        if tree is not None:
            node = tree.smallest_node_containing_range(cursor_range, predicate)

    parse() never raises: a missing grammar, a tree-sitter failure, or (unless
    accept_partial_trees is set) a tree with syntax errors yields None.
    """

    language: str = DEFAULT_LANGUAGE
    accept_partial_trees: bool = False

    def parse(self, source_text: str) -> TreeSitterTree | None:
        """
        Parse source text.

        Args:
            source_text: Full document text.

        Returns:
            TreeSitterTree, or None when no usable tree could be built.
        """
        source = source_text.encode("utf-8", errors="replace")
        try:
            ts_lang = get_language(self.language)
            tree = self._parse_bytes(ts_lang, source)
        except ParseError as err:
            log.debug(
                "syntax.parse_unavailable",
                reason=err.error_name,
                language=self.language,
                detail=err.message,
            )
            return None

        error_count = _count_errors(tree.root_node) if tree.root_node.has_error else 0
        if tree.root_node.has_error and not self.accept_partial_trees:
            log.debug(
                "syntax.tree_rejected",
                reason=ErrorCode.PARSE_UNAVAILABLE.name,
                language=self.language,
                error_count=error_count,
            )
            return None

        return TreeSitterTree(
            tree=tree,
            language=self.language,
            error_count=error_count,
            _columns=_ColumnMap(source),
        )

    def _parse_bytes(self, ts_lang: tree_sitter.Language, source: bytes) -> Any:
        parser = tree_sitter.Parser(ts_lang)
        try:
            return parser.parse(source)
        except (ValueError, RuntimeError) as err:
            raise ParseError.parser_failed(self.language, str(err)) from err
