"""Tests for error types and codes."""

import pytest

from codescope.core.errors import (
    CodeScopeError,
    ConfigError,
    ErrorCode,
    ParseError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.CONFIG_FILE_NOT_FOUND, 2000),
            (ErrorCode.PARSE_UNAVAILABLE, 3000),
            (ErrorCode.SCOPE_NOT_FOUND, 3000),
            (ErrorCode.FIELD_MISSING, 3000),
            (ErrorCode.SPAN_OUT_OF_BOUNDS, 3000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        # Given
        error_code = code

        # When
        value = error_code.value

        # Then
        assert expected_range <= value < expected_range + 1000


class TestCodeScopeError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = CodeScopeError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = CodeScopeError(
            code=ErrorCode.PARSE_UNAVAILABLE,
            message="No grammar",
        )

        # When
        result = str(error)

        # Then
        assert result == "[3001] PARSE_UNAVAILABLE: No grammar"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Errors are real exceptions."""
        with pytest.raises(CodeScopeError):
            raise ConfigError.file_not_found("/tmp/missing.yaml")


class TestConfigError:
    """ConfigError factory method tests."""

    def test_given_parse_failure_when_created_then_has_path_and_reason(self) -> None:
        """parse_error carries path and reason."""
        # When
        error = ConfigError.parse_error("/etc/config.yaml", "bad indent")

        # Then
        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert "/etc/config.yaml" in error.message
        assert error.details == {"path": "/etc/config.yaml", "reason": "bad indent"}

    def test_given_invalid_value_when_created_then_value_stringified(self) -> None:
        """invalid_value stringifies the offending value."""
        # When
        error = ConfigError.invalid_value("resolver.max_file_size_kb", -1, "must be positive")

        # Then
        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["value"] == "-1"
        assert "resolver.max_file_size_kb" in error.message

    def test_given_missing_file_when_created_then_has_path(self) -> None:
        """file_not_found carries the path."""
        # When
        error = ConfigError.file_not_found("/nope.yaml")

        # Then
        assert error.code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert error.details == {"path": "/nope.yaml"}
        assert "retryable" not in error.to_dict()


class TestParseError:
    """ParseError factory method tests."""

    def test_given_missing_grammar_when_created_then_names_language(self) -> None:
        """grammar_unavailable names the language."""
        # When
        error = ParseError.grammar_unavailable("cobol")

        # Then
        assert error.code == ErrorCode.PARSE_UNAVAILABLE
        assert error.details == {"language": "cobol"}
        assert error.error_name == "PARSE_UNAVAILABLE"

    def test_given_grammar_package_when_created_then_names_install_target(self) -> None:
        """A known grammar package is named in the message and details."""
        # When
        error = ParseError.grammar_unavailable("swift", "tree-sitter-swift")

        # Then
        assert error.message == "Language not available: swift (install tree-sitter-swift)"
        assert error.details == {"language": "swift", "package": "tree-sitter-swift"}

    def test_given_parser_failure_when_created_then_has_reason(self) -> None:
        """parser_failed records the underlying reason."""
        # When
        error = ParseError.parser_failed("swift", "timeout")

        # Then
        assert error.code == ErrorCode.PARSE_UNAVAILABLE
        assert error.details["reason"] == "timeout"
