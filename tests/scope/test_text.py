"""Tests for line splitting and span extraction."""

import pytest

from codescope.scope.text import code_in_range, split_source_lines
from codescope.syntax.models import CursorRange


class TestSplitSourceLines:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a\n"]),
            ("a\nb", ["a\n", "b"]),
            ("a\n\nb\n", ["a\n", "\n", "b\n"]),
            ("a\r\nb", ["a\r\n", "b"]),
        ],
    )
    def test_splits_after_newline(self, text: str, expected: list[str]) -> None:
        assert split_source_lines(text) == expected

    def test_lossless(self) -> None:
        """Joining the lines gives back the text."""
        text = "struct Foo {\n\tlet x = 1\r\n}\n\n"
        assert "".join(split_source_lines(text)) == text


class TestCodeInRange:
    """Span-to-text extraction."""

    LINES = ["struct Foo {\n", "    let bar: Int\n", "}\n"]

    def test_single_line(self) -> None:
        assert code_in_range(self.LINES, CursorRange.from_points((0, 7), (0, 10))) == "Foo"

    def test_multi_line(self) -> None:
        text = code_in_range(self.LINES, CursorRange.from_points((0, 7), (2, 1)))
        assert text == "Foo {\n    let bar: Int\n}"

    def test_whole_buffer(self) -> None:
        text = code_in_range(self.LINES, CursorRange.from_points((0, 0), (2, 1)))
        assert text == "struct Foo {\n    let bar: Int\n}"

    def test_column_past_line_end_is_clamped(self) -> None:
        assert code_in_range(self.LINES, CursorRange.from_points((2, 0), (2, 50))) == "}\n"

    def test_negative_columns_clamp_to_line_start(self) -> None:
        """Negative columns count from the start of the line, not the end."""
        assert code_in_range(self.LINES, CursorRange.from_points((0, -3), (0, 6))) == "struct"
        assert code_in_range(self.LINES, CursorRange.from_points((0, -5), (0, -1))) == ""
        assert code_in_range(self.LINES, CursorRange.from_points((1, -2), (2, -1))) == (
            "    let bar: Int\n"
        )

    def test_negative_lines_do_not_wrap(self) -> None:
        """Lines before the buffer contribute nothing."""
        text = code_in_range(self.LINES, CursorRange.from_points((-3, 0), (-1, 4)))
        assert text == ""

    def test_empty_range(self) -> None:
        assert code_in_range(self.LINES, CursorRange.at(1, 4)) == ""

    def test_lines_past_end_contribute_nothing(self) -> None:
        """Out-of-bounds spans return what exists instead of raising."""
        assert code_in_range(self.LINES, CursorRange.from_points((2, 0), (7, 3))) == "}\n"
        assert code_in_range(self.LINES, CursorRange.from_points((5, 0), (5, 3))) == ""
        assert code_in_range([], CursorRange.at(0, 0)) == ""
