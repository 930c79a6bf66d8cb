"""Report rendering: token map and template substitution."""

from pathlib import Path

import structlog

from covcomment.report.tokens import (
    TOKEN_PATTERN,
    build_token_map,
    format_percent,
    replace_tokens,
)
from covcomment.templates import get_comment_template

log = structlog.get_logger()


def load_template(path: Path) -> str:
    """Read a comment template, falling back to the bundled default when absent."""
    if not path.is_file():
        log.info("template_not_found_using_default", path=str(path))
        return get_comment_template()
    return path.read_text(encoding="utf-8")


__all__ = [
    "TOKEN_PATTERN",
    "build_token_map",
    "format_percent",
    "load_template",
    "replace_tokens",
]
