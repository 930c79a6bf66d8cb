"""covcomment error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Summary
- 4xxx: Changed files (git)
- 5xxx: GitHub API
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Summary (3xxx)
    SUMMARY_NOT_FOUND = 3001
    SUMMARY_INVALID_JSON = 3002
    SUMMARY_NOT_AN_OBJECT = 3003
    SUMMARY_MISSING_TOTAL = 3004
    SUMMARY_MISSING_CATEGORY = 3005
    SUMMARY_INVALID_CATEGORY = 3006

    # Changed files (4xxx)
    CHANGED_FILES_NO_CONTEXT = 4001
    CHANGED_FILES_DIFF_FAILED = 4002

    # GitHub API (5xxx)
    GITHUB_REQUEST_FAILED = 5001
    GITHUB_BAD_STATUS = 5002


@dataclass(frozen=True, slots=True)
class CovCommentError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SUMMARY_MISSING_TOTAL')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CovCommentError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class SummaryLoadError(CovCommentError):
    """The coverage summary file could not be read or decoded."""

    @classmethod
    def not_found(cls, path: str) -> "SummaryLoadError":
        return cls(
            code=ErrorCode.SUMMARY_NOT_FOUND,
            message=f"Coverage summary not found: {path}",
            details={"path": path},
        )

    @classmethod
    def invalid_json(cls, path: str, reason: str) -> "SummaryLoadError":
        return cls(
            code=ErrorCode.SUMMARY_INVALID_JSON,
            message=f"Failed to parse coverage summary at {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class MalformedSummaryError(CovCommentError):
    """The coverage summary does not have the expected shape."""

    @classmethod
    def not_an_object(cls, kind: str) -> "MalformedSummaryError":
        return cls(
            code=ErrorCode.SUMMARY_NOT_AN_OBJECT,
            message=f"Coverage summary must be a JSON object, got {kind}",
            details={"kind": kind},
        )

    @classmethod
    def missing_total(cls) -> "MalformedSummaryError":
        return cls(
            code=ErrorCode.SUMMARY_MISSING_TOTAL,
            message="Coverage summary has no 'total' entry",
        )

    @classmethod
    def missing_category(cls, path: str, category: str) -> "MalformedSummaryError":
        return cls(
            code=ErrorCode.SUMMARY_MISSING_CATEGORY,
            message=f"Coverage entry '{path}' is missing category '{category}'",
            details={"path": path, "category": category},
        )

    @classmethod
    def invalid_category(cls, path: str, category: str, reason: str) -> "MalformedSummaryError":
        return cls(
            code=ErrorCode.SUMMARY_INVALID_CATEGORY,
            message=f"Coverage entry '{path}' has invalid '{category}' data: {reason}",
            details={"path": path, "category": category, "reason": reason},
        )


class ChangedFilesUnavailableError(CovCommentError):
    """The list of changed files could not be determined."""

    @classmethod
    def no_pull_request(cls, reason: str) -> "ChangedFilesUnavailableError":
        return cls(
            code=ErrorCode.CHANGED_FILES_NO_CONTEXT,
            message=f"No pull request context: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def diff_failed(cls, base: str, head: str, reason: str) -> "ChangedFilesUnavailableError":
        return cls(
            code=ErrorCode.CHANGED_FILES_DIFF_FAILED,
            message=f"Failed to diff {base}..{head}: {reason}",
            details={"base": base, "head": head, "reason": reason},
        )


class GitHubApiError(CovCommentError):
    """A request to the GitHub REST API failed."""

    @classmethod
    def request_failed(cls, url: str, reason: str) -> "GitHubApiError":
        return cls(
            code=ErrorCode.GITHUB_REQUEST_FAILED,
            message=f"Request to {url} failed: {reason}",
            details={"url": url, "reason": reason},
        )

    @classmethod
    def bad_status(cls, url: str, status_code: int, body: str) -> "GitHubApiError":
        return cls(
            code=ErrorCode.GITHUB_BAD_STATUS,
            message=f"Request to {url} returned HTTP {status_code}",
            details={"url": url, "status_code": status_code, "body": body},
        )
