"""covcomment render command - render a report locally without GitHub."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TextIO

import click

from covcomment.cli.utils import fail, read_changed_files
from covcomment.core.errors import CovCommentError
from covcomment.coverage import load_summary, parse_summary
from covcomment.report import build_token_map, replace_tokens
from covcomment.templates import get_comment_template


@click.command()
@click.argument("summary", type=click.Path(path_type=Path))
@click.option(
    "--template",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Comment template (default: bundled template)",
)
@click.option("--base-path", default="", help="Prefix stripped from summary file paths")
@click.option(
    "--changed-files",
    type=click.File("r"),
    default=None,
    help="File listing changed paths, one per line ('-' for stdin)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the token map as JSON")
def render_command(
    summary: Path,
    template: Path | None,
    base_path: str,
    changed_files: TextIO | None,
    as_json: bool,
) -> None:
    """Render the coverage report for SUMMARY (a coverage-summary.json).

    Prints the substituted template to stdout, or the token map with --json.
    """
    changed = read_changed_files(changed_files.read()) if changed_files is not None else None

    try:
        parsed = parse_summary(load_summary(summary), base_path=base_path, changed_files=changed)
    except CovCommentError as e:
        fail(e)

    tokens = build_token_map(parsed)
    if as_json:
        click.echo(json.dumps(tokens, indent=2))
        return

    template_text = (
        template.read_text(encoding="utf-8") if template is not None else get_comment_template()
    )
    click.echo(replace_tokens(template_text, tokens))
