"""Tests for error types and codes."""

import pytest

from covcomment.core.errors import (
    ChangedFilesUnavailableError,
    ConfigError,
    CovCommentError,
    ErrorCode,
    GitHubApiError,
    MalformedSummaryError,
    SummaryLoadError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.SUMMARY_MISSING_TOTAL, 3000),
            (ErrorCode.SUMMARY_NOT_FOUND, 3000),
            (ErrorCode.CHANGED_FILES_DIFF_FAILED, 4000),
            (ErrorCode.GITHUB_BAD_STATUS, 5000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestCovCommentError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = CovCommentError(
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
        error = CovCommentError(code=ErrorCode.SUMMARY_MISSING_TOTAL, message="Something broke")
        assert str(error) == "[3004] SUMMARY_MISSING_TOTAL: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(CovCommentError):
            raise MalformedSummaryError.missing_total()


class TestFactories:
    """Factory method tests."""

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("request_timeout_sec", -1, "must be positive")
        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details == {
            "field": "request_timeout_sec",
            "value": "-1",
            "reason": "must be positive",
        }

    def test_summary_not_found(self) -> None:
        error = SummaryLoadError.not_found("coverage/coverage-summary.json")
        assert "coverage/coverage-summary.json" in error.message

    def test_missing_category(self) -> None:
        error = MalformedSummaryError.missing_category("src/a.js", "branches")
        assert error.message == "Coverage entry 'src/a.js' is missing category 'branches'"

    def test_changed_files_no_pull_request(self) -> None:
        error = ChangedFilesUnavailableError.no_pull_request("event is 'push'")
        assert error.code == ErrorCode.CHANGED_FILES_NO_CONTEXT

    def test_github_request_failed(self) -> None:
        error = GitHubApiError.request_failed("/x", "timeout")
        assert error.code == ErrorCode.GITHUB_REQUEST_FAILED
        assert error.details == {"url": "/x", "reason": "timeout"}

    def test_github_bad_status_keeps_status_code(self) -> None:
        error = GitHubApiError.bad_status("/x", 404, "Not Found")
        assert error.message == "Request to /x returned HTTP 404"
        assert error.details["status_code"] == 404
