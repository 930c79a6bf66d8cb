"""Core module exports."""

from covcomment.core.console import get_console, status
from covcomment.core.errors import (
    ChangedFilesUnavailableError,
    ConfigError,
    CovCommentError,
    ErrorCode,
    GitHubApiError,
    MalformedSummaryError,
    SummaryLoadError,
)
from covcomment.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ChangedFilesUnavailableError",
    "ConfigError",
    "CovCommentError",
    "ErrorCode",
    "GitHubApiError",
    "MalformedSummaryError",
    "SummaryLoadError",
    # Logging
    "configure_logging",
    "get_logger",
    # Console
    "get_console",
    "status",
]
