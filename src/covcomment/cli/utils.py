"""CLI utilities."""

from typing import NoReturn

import click

from covcomment.core.console import status
from covcomment.core.errors import CovCommentError
from covcomment.core.logging import get_logger
from covcomment.github.outputs import error_annotation


def fail(error: CovCommentError) -> NoReturn:
    """Mark the workflow step failed with the error's message and exit 1.

    The ``::error::`` line goes to stdout where the Actions runner picks up
    workflow commands; the human-readable line goes to stderr.
    """
    get_logger("cli").error("run_failed", **error.to_dict())
    status(error.message, style="error")
    click.echo(error_annotation(error.message))
    raise SystemExit(1)


def read_changed_files(text: str) -> list[str]:
    """Split ``git diff --name-only`` style output into non-empty paths."""
    return [line for line in text.splitlines() if line.strip()]
