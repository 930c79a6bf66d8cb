"""Pydantic configuration models.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI options)
2. Environment variables (COVCOMMENT__KEY, COVCOMMENT__LOGGING__LEVEL)
3. GitHub Actions inputs (INPUT_<NAME>)
4. Repo YAML (.covcomment.yaml)
5. Built-in defaults (this file)
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from covcomment.config.constants import (
    DEFAULT_COMMENT_TEMPLATE_MD_FILENAME,
    DEFAULT_COVERAGE_OUTPUT_DIRECTORY,
    DEFAULT_COVERAGE_SUMMARY_JSON_FILENAME,
    DEFAULT_GITHUB_API_URL,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        COVCOMMENT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ActionConfig(BaseModel):
    """Resolved configuration for one action run.

    Env vars:
        COVCOMMENT__COVERAGE_OUTPUT_DIRECTORY: Directory holding the summary JSON
        COVCOMMENT__SOURCES_BASE_PATH: Prefix stripped from summary file paths
        COVCOMMENT__GITHUB_TOKEN: Token used to comment on pull requests
        COVCOMMENT__COMMENT_TEMPLATE: Markdown template path
    """

    coverage_output_directory: str = Field(
        default=DEFAULT_COVERAGE_OUTPUT_DIRECTORY,
        description="Directory the coverage tool wrote its json-summary report to.",
    )
    summary_filename: str = Field(
        default=DEFAULT_COVERAGE_SUMMARY_JSON_FILENAME,
        description="Summary file name inside coverage_output_directory.",
    )
    sources_base_path: str = Field(
        default="",
        description="Absolute path prefix stripped from summary paths, usually the checkout root.",
    )
    github_token: str = Field(
        default="",
        description="Token for the GitHub API. Commenting is skipped when empty.",
    )
    comment_template: str = Field(
        default=DEFAULT_COMMENT_TEMPLATE_MD_FILENAME,
        description="Markdown template for the pull request comment.",
    )
    github_api_url: str = Field(default=DEFAULT_GITHUB_API_URL)
    request_timeout_sec: float = Field(
        default=10.0,
        description="Timeout for GitHub API requests.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("github_token", "sources_base_path")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()

    @field_validator("github_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("request_timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @property
    def summary_path(self) -> Path:
        """Location of the coverage summary JSON, resolved against the cwd."""
        return (Path(self.coverage_output_directory) / self.summary_filename).resolve()

    @property
    def template_path(self) -> Path:
        return Path(self.comment_template).resolve()
