"""Advisory notes derived from plain substring checks on the source text."""

from __future__ import annotations

from codescope.config.constants import DEFAULT_NOTE_SEPARATOR, SWIFT_LEXICAL_NOTES


def collect_notes(
    source_text: str,
    markers: tuple[tuple[str, str], ...] = SWIFT_LEXICAL_NOTES,
) -> list[str]:
    """Notes for every marker that occurs in source_text, in table order."""
    return [note for marker, note in markers if marker in source_text]


def extra_knowledge(
    source_text: str,
    markers: tuple[tuple[str, str], ...] = SWIFT_LEXICAL_NOTES,
    separator: str = DEFAULT_NOTE_SEPARATOR,
) -> str:
    return separator.join(collect_notes(source_text, markers))
