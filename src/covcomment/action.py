"""Action runner: summary in, step outputs and pull request comment out.

The runner owns every side effect (files, git, HTTP); the coverage and report
packages it calls are pure.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from covcomment.config.models import ActionConfig
from covcomment.core.errors import ChangedFilesUnavailableError
from covcomment.coverage import ParsedSummary, load_summary, parse_summary
from covcomment.github.changed_files import get_changed_files
from covcomment.github.comments import CommentClient
from covcomment.github.context import GitHubContext
from covcomment.github.outputs import set_outputs
from covcomment.report import build_token_map, load_template, replace_tokens

logger = structlog.get_logger()

CommentClientFactory = Callable[[ActionConfig], CommentClient]


def _default_client(config: ActionConfig) -> CommentClient:
    return CommentClient(
        config.github_token,
        api_url=config.github_api_url,
        timeout=config.request_timeout_sec,
    )


@dataclass(slots=True)
class ActionResult:
    """What one run produced."""

    parsed: ParsedSummary
    tokens: dict[str, str]
    comment_body: str | None = None
    comment: dict[str, Any] | None = None


def resolve_changed_files(config: ActionConfig, context: GitHubContext) -> list[str] | None:
    """Changed files for a pull request run, ``None`` when unavailable.

    Discovery needs both a ``pull_request`` event and a GitHub token; without
    either the changed-files table reports no files.
    """
    if not (config.github_token and context.is_pull_request):
        return None
    try:
        changed = get_changed_files(context)
    except ChangedFilesUnavailableError as e:
        logger.warning("changed_files_unavailable", error=e.message, code=e.error_name)
        return None
    logger.info("changed_files_resolved", count=len(changed))
    return changed


def run_action(
    config: ActionConfig,
    context: GitHubContext,
    *,
    post_comment: bool = True,
    write_outputs: bool = True,
    client_factory: CommentClientFactory = _default_client,
) -> ActionResult:
    """Parse the coverage summary, comment on the pull request, set step outputs.

    The comment is only posted for ``pull_request`` events with a GitHub token
    configured.

    Raises:
        SummaryLoadError: If the summary file is missing or unreadable.
        MalformedSummaryError: If the summary has the wrong shape.
        GitHubApiError: If posting the comment fails.
    """
    changed_files = resolve_changed_files(config, context)

    summary = load_summary(config.summary_path)
    parsed = parse_summary(
        summary,
        base_path=config.sources_base_path,
        changed_files=changed_files,
    )
    tokens = build_token_map(parsed)
    result = ActionResult(parsed=parsed, tokens=tokens)

    if post_comment and config.github_token and context.is_pull_request:
        result.comment_body = replace_tokens(load_template(config.template_path), tokens)
        with client_factory(config) as client:
            result.comment = client.create_comment(
                context.owner,
                context.repo,
                context.pull_request_number,
                result.comment_body,
            )
    else:
        logger.debug(
            "comment_skipped",
            has_token=bool(config.github_token),
            event=context.event_name,
        )

    if write_outputs:
        set_outputs(tokens)

    return result
