"""Source line handling and span-to-text extraction."""

from __future__ import annotations

import re
from collections.abc import Sequence

import structlog

from codescope.core.errors import ErrorCode
from codescope.syntax.models import CursorRange

log = structlog.get_logger()

_LINE_BREAK = re.compile(r"(?<=\n)")


def split_source_lines(source_text: str) -> list[str]:
    """Split text after every newline, keeping line endings.

    Only ``\\n`` breaks a line, matching how syntax trees count rows, so
    ``"".join(lines) == source_text`` always holds.
    """
    lines = _LINE_BREAK.split(source_text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def code_in_range(lines: Sequence[str], cursor_range: CursorRange) -> str:
    """Return the source text covered by a range.

    Multi-line ranges join the tail of the first line, the middle lines in
    full, and the head of the last line. Lines past the end of the buffer
    contribute nothing, and columns are clamped to the line.
    """
    start, end = cursor_range.start, cursor_range.end
    if end.line >= len(lines):
        log.debug(
            "scope.span_out_of_bounds",
            reason=ErrorCode.SPAN_OUT_OF_BOUNDS.name,
            end_line=end.line,
            line_count=len(lines),
        )

    start_column, end_column = max(0, start.column), max(0, end.column)
    if start.line == end.line:
        return _line_at(lines, start.line)[start_column:end_column]

    parts = [_line_at(lines, start.line)[start_column:]]
    parts.extend(lines[max(0, start.line + 1) : max(0, end.line)])
    parts.append(_line_at(lines, end.line)[:end_column])
    return "".join(parts)


def _line_at(lines: Sequence[str], row: int) -> str:
    if 0 <= row < len(lines):
        return lines[row]
    return ""
