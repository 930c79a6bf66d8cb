"""Template files shipped with the package."""

from pathlib import Path


def get_comment_template() -> str:
    """Return the default pull request comment template."""
    return (Path(__file__).parent / "comment-template.md").read_text(encoding="utf-8")


__all__ = ["get_comment_template"]
