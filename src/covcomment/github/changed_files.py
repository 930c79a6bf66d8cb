"""Files changed by a pull request, from a pygit2 diff of base and head.

Equivalent to ``git diff --name-only --diff-filter=ACMRT <base> <head>``:
deleted files are dropped and renames are reported under their new path.
"""

from __future__ import annotations

from pathlib import Path

import pygit2
import structlog

from covcomment.core.errors import ChangedFilesUnavailableError
from covcomment.github.context import GitHubContext

logger = structlog.get_logger()

# Added, Copied, Modified, Renamed, Type-changed
_REPORTED_DELTAS = frozenset(
    {
        pygit2.GIT_DELTA_ADDED,
        pygit2.GIT_DELTA_COPIED,
        pygit2.GIT_DELTA_MODIFIED,
        pygit2.GIT_DELTA_RENAMED,
        pygit2.GIT_DELTA_TYPECHANGE,
    }
)


def diff_changed_files(repo_path: Path, base: str, head: str) -> list[str]:
    """List repository-relative paths changed between two commits.

    Raises:
        ChangedFilesUnavailableError: If the repository or either commit cannot be read.
    """
    if not base or not head:
        raise ChangedFilesUnavailableError.diff_failed(base, head, "missing commit SHA")

    try:
        repo = pygit2.Repository(str(repo_path))
        base_commit = repo.revparse_single(base).peel(pygit2.Commit)
        head_commit = repo.revparse_single(head).peel(pygit2.Commit)
        diff = repo.diff(base_commit, head_commit)
        diff.find_similar(flags=pygit2.GIT_DIFF_FIND_RENAMES)
    except (pygit2.GitError, KeyError, ValueError) as e:
        raise ChangedFilesUnavailableError.diff_failed(base, head, str(e)) from e

    changed = [
        delta.new_file.path for delta in diff.deltas if delta.status in _REPORTED_DELTAS
    ]
    logger.debug("changed_files_diffed", base=base, head=head, count=len(changed))
    return changed


def get_changed_files(context: GitHubContext) -> list[str]:
    """Changed files of the pull request that triggered the run.

    Raises:
        ChangedFilesUnavailableError: If the run is not for a pull request or the
            diff fails.
    """
    if not context.is_pull_request:
        raise ChangedFilesUnavailableError.no_pull_request(
            f"event is '{context.event_name or 'unknown'}'"
        )
    return diff_changed_files(context.workspace, context.base_sha, context.head_sha)
