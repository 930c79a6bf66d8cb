"""Template placeholder substitution.

Placeholders look like ``{{token_name}}``. Substitution is one regex pass
over the template with a lookup table, so a value that itself contains
``{{...}}`` is inserted literally and never expanded.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from covcomment.config.constants import Token
from covcomment.coverage.models import ParsedSummary
from covcomment.coverage.table import render_table

TOKEN_PATTERN = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


def replace_tokens(template: str, tokens: Mapping[str, Any]) -> str:
    """Replace every known ``{{name}}`` placeholder; leave unknown ones verbatim."""
    if not tokens:
        return template

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in tokens:
            return str(tokens[name])
        return match.group(0)

    return TOKEN_PATTERN.sub(_substitute, template)


def format_percent(value: float) -> str:
    """Render a percentage the way it reads in the summary JSON.

    Examples:
        80.0 -> "80"
        85.71 -> "85.71"
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def build_token_map(parsed: ParsedSummary) -> dict[str, str]:
    """Render every template token for a parsed summary."""
    return {
        Token.total_lines_coverage_percent.value: format_percent(
            parsed.total_lines_coverage_percent
        ),
        Token.total_statements_coverage_percent.value: format_percent(
            parsed.total_statements_coverage_percent
        ),
        Token.total_functions_coverage_percent.value: format_percent(
            parsed.total_functions_coverage_percent
        ),
        Token.total_branches_coverage_percent.value: format_percent(
            parsed.total_branches_coverage_percent
        ),
        Token.files_coverage_table.value: render_table(parsed.files_coverage_data),
        Token.changed_files_coverage_table.value: render_table(
            parsed.changed_files_coverage_data
        ),
    }
