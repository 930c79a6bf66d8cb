"""GitHub Actions collaborators: run context, changed files, comments, outputs."""

from covcomment.github.changed_files import diff_changed_files, get_changed_files
from covcomment.github.comments import CommentClient
from covcomment.github.context import GitHubContext
from covcomment.github.outputs import error_annotation, format_output, set_outputs

__all__ = [
    "CommentClient",
    "GitHubContext",
    "diff_changed_files",
    "error_annotation",
    "format_output",
    "get_changed_files",
    "set_outputs",
]
