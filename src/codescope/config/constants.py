"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
For configurable values, see models.py.
"""

# =============================================================================
# Resolver Defaults
# =============================================================================

DEFAULT_LANGUAGE = "swift"
"""Language assumed when no file extension is available."""

DEFAULT_NOTE_SEPARATOR = "\n"
"""Separator between advisory notes."""

UNKNOWN_FIELD = "unknown"
"""Placeholder for a declaration kind or name missing from the tree."""

# =============================================================================
# Advisory Notes
# =============================================================================
# (substring, note) pairs. Each marker found anywhere in the source text adds
# its note, in table order.

SWIFT_LEXICAL_NOTES: tuple[tuple[str, str], ...] = (("macro", "macro: introduced since Swift 5.9"),)
