"""Language packs: where to find the tree-sitter grammar for each language.

Each pack names the grammar distribution and import module so the provider
can load grammars with importlib instead of hard-coded imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguagePack:
    """Tree-sitter grammar location for a single language."""

    # -- Identity --
    name: str  # Canonical language name ("swift")
    grammar_name: str  # tree-sitter grammar key

    # -- Grammar location --
    grammar_package: str  # PyPI package ("tree-sitter-swift")
    grammar_module: str  # Python import ("tree_sitter_swift")
    # Non-standard function name; None means module.language()
    language_func: str | None = None

    # -- File detection --
    extensions: frozenset[str] = field(default_factory=frozenset)


SWIFT_PACK = LanguagePack(
    name="swift",
    grammar_name="swift",
    grammar_package="tree-sitter-swift",
    grammar_module="tree_sitter_swift",
    extensions=frozenset({"swift"}),
)

_ALL_PACKS: tuple[LanguagePack, ...] = (SWIFT_PACK,)

# name -> Pack
PACKS: dict[str, LanguagePack] = {pack.name: pack for pack in _ALL_PACKS}

# Extension -> Pack
_EXT_TO_PACK: dict[str, LanguagePack] = {}
for _pack in _ALL_PACKS:
    for _ext in _pack.extensions:
        _EXT_TO_PACK[_ext] = _pack


def get_pack(name: str) -> LanguagePack | None:
    """Get a LanguagePack by language name."""
    return PACKS.get(name.lower())


def get_pack_for_ext(ext: str) -> LanguagePack | None:
    """Get a LanguagePack for a file extension (leading dot optional)."""
    return _EXT_TO_PACK.get(ext.lower().lstrip("."))
