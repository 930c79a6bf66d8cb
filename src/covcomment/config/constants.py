"""Configuration constants.

Values here are part of the action's public contract (token names, input
names, file names) and are not user-configurable.
"""

from enum import Enum


class Token(str, Enum):
    """Placeholders a comment template may reference, also the step output names."""

    total_lines_coverage_percent = "total_lines_coverage_percent"
    total_statements_coverage_percent = "total_statements_coverage_percent"
    total_functions_coverage_percent = "total_functions_coverage_percent"
    total_branches_coverage_percent = "total_branches_coverage_percent"
    files_coverage_table = "files_coverage_table"
    changed_files_coverage_table = "changed_files_coverage_table"


class ActionInput(str, Enum):
    """Inputs declared in action.yml, read from ``INPUT_<NAME>`` env vars."""

    coverage_output_directory = "coverage_output_directory"
    sources_base_path = "sources_base_path"
    github_token = "github_token"
    comment_template = "comment_template"


DEFAULT_COVERAGE_SUMMARY_JSON_FILENAME = "coverage-summary.json"
"""File name Istanbul's json-summary reporter writes."""

DEFAULT_COMMENT_TEMPLATE_MD_FILENAME = "comment-template.md"
"""Template looked up in the working directory."""

DEFAULT_COVERAGE_OUTPUT_DIRECTORY = "coverage"

DEFAULT_GITHUB_API_URL = "https://api.github.com"

PULL_REQUEST_EVENT = "pull_request"

TOTAL_KEY = "total"
"""Summary key holding the aggregate entry."""

CATEGORIES = ("lines", "statements", "functions", "branches")
"""Coverage categories in table column order."""
