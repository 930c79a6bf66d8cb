"""covcomment run command - the GitHub Action entry point."""

from __future__ import annotations

import click

from covcomment.action import run_action
from covcomment.cli.utils import fail
from covcomment.config.loader import load_config
from covcomment.core.console import get_console, pluralize, status, totals_table
from covcomment.core.errors import CovCommentError
from covcomment.core.logging import configure_logging
from covcomment.github.context import GitHubContext


@click.command()
@click.option(
    "--coverage-dir",
    "coverage_output_directory",
    default=None,
    help="Directory containing coverage-summary.json (default: coverage)",
)
@click.option(
    "--base-path",
    "sources_base_path",
    default=None,
    help="Prefix stripped from summary file paths",
)
@click.option(
    "--template",
    "comment_template",
    default=None,
    help="Comment template path (default: comment-template.md)",
)
@click.option("--no-comment", is_flag=True, help="Never post a pull request comment")
@click.pass_context
def run_command(
    ctx: click.Context,
    coverage_output_directory: str | None,
    sources_base_path: str | None,
    comment_template: str | None,
    no_comment: bool,
) -> None:
    """Report coverage as step outputs and as a pull request comment.

    Options override action inputs (INPUT_*) and COVCOMMENT__* environment
    variables.
    """
    try:
        config = load_config(
            coverage_output_directory=coverage_output_directory,
            sources_base_path=sources_base_path,
            comment_template=comment_template,
        )
        if not ctx.obj.get("verbose"):
            configure_logging(config=config.logging)

        result = run_action(config, GitHubContext.from_env(), post_comment=not no_comment)
    except CovCommentError as e:
        fail(e)

    get_console().print(totals_table(result.parsed))
    status(f"Parsed {pluralize(len(result.parsed.files_coverage_data), 'file')}", style="success")
    if result.parsed.changed_files_coverage_data is not None:
        status(
            f"{pluralize(len(result.parsed.changed_files_coverage_data), 'changed file')} "
            "with coverage"
        )
    if result.comment is not None:
        status(f"Posted comment {result.comment.get('html_url', '')}".rstrip(), style="success")
