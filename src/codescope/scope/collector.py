"""Active document scope collection.

Reads a document from disk, picks the scope reader for its language and
resolves the cursor in it. Documents in languages without a reader, and
documents that cannot be read, resolve to the top scope.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import structlog

from codescope.config.models import ResolverConfig
from codescope.core.errors import ErrorCode
from codescope.scope.models import ScopeDescriptor
from codescope.scope.reader import ScopeReader, SwiftScopeReader
from codescope.scope.text import split_source_lines
from codescope.syntax.models import CursorRange, SyntaxTreeProvider
from codescope.syntax.packs import get_pack_for_ext
from codescope.syntax.treesitter import TreeSitterProvider

log = structlog.get_logger()

ReaderFactory = Callable[[SyntaxTreeProvider, ResolverConfig], ScopeReader]


def _swift_reader(provider: SyntaxTreeProvider, config: ResolverConfig) -> ScopeReader:
    return SwiftScopeReader(provider=provider, note_separator=config.note_separator)


# language name -> reader factory
READERS: dict[str, ReaderFactory] = {
    "swift": _swift_reader,
}


def reader_for_language(
    language: str,
    *,
    config: ResolverConfig | None = None,
    provider: SyntaxTreeProvider | None = None,
) -> ScopeReader | None:
    """Build the scope reader for a language, or None if it has no reader.

    Args:
        language: Language name (e.g. "swift").
        config: Resolver settings. Defaults to ResolverConfig().
        provider: Syntax tree provider. Defaults to a tree-sitter provider
            for the language.
    """
    factory = READERS.get(language.lower())
    if factory is None:
        return None
    config = config or ResolverConfig()
    if provider is None:
        provider = TreeSitterProvider(
            language=language.lower(),
            accept_partial_trees=config.accept_partial_trees,
        )
    return factory(provider, config)


def detect_language(path: Path, default: str | None = None) -> str | None:
    """Language for a path from its extension; default when it has none."""
    if not path.suffix:
        return default
    pack = get_pack_for_ext(path.suffix)
    return pack.name if pack is not None else None


def collect_scope_context(
    path: Path,
    cursor_range: CursorRange,
    *,
    config: ResolverConfig | None = None,
    provider: SyntaxTreeProvider | None = None,
) -> ScopeDescriptor:
    """Resolve the scope enclosing cursor_range in the document at path.

    Args:
        path: Document to read.
        cursor_range: 0-based range inside the document.
        config: Resolver settings. Defaults to ResolverConfig().
        provider: Syntax tree provider override.

    Returns:
        ScopeDescriptor; the top scope for unsupported or unreadable files.
    """
    config = config or ResolverConfig()

    language = detect_language(path, default=config.language)
    reader = reader_for_language(language, config=config, provider=provider) if language else None
    if reader is None:
        log.debug(
            "scope.parse_unavailable",
            reason=ErrorCode.PARSE_UNAVAILABLE.name,
            path=str(path),
            language=language,
        )
        return ScopeDescriptor()

    try:
        size = path.stat().st_size
        if size > config.max_file_size_kb * 1024:
            log.debug("scope.file_too_large", path=str(path), size=size)
            return ScopeDescriptor()
        source_text = path.read_bytes().decode("utf-8", errors="replace")
    except OSError:
        log.warning("scope.read_failed", path=str(path), exc_info=True)
        return ScopeDescriptor()

    return reader.context_containing_range(
        cursor_range, source_text, split_source_lines(source_text)
    )
