"""Pull request comments through the GitHub REST API."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from covcomment.config.constants import DEFAULT_GITHUB_API_URL
from covcomment.core.errors import GitHubApiError

logger = structlog.get_logger()


class CommentClient:
    """Minimal GitHub client that can create issue comments.

    Pull requests are issues for the comments endpoint, so the comment lands
    in the PR conversation.
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_GITHUB_API_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=api_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "coverage-comment",
            },
        )

    def __enter__(self) -> CommentClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> dict[str, Any]:
        """Post ``body`` as a new comment and return the created comment.

        Raises:
            GitHubApiError: On transport failure or a non-2xx response.
        """
        url = f"/repos/{owner}/{repo}/issues/{issue_number}/comments"
        try:
            response = self._client.post(url, json={"body": body})
        except httpx.RequestError as e:
            raise GitHubApiError.request_failed(url, str(e)) from e

        if response.is_error:
            raise GitHubApiError.bad_status(url, response.status_code, response.text[:500])

        comment: dict[str, Any] = response.json()
        logger.info(
            "comment_posted",
            repo=f"{owner}/{repo}",
            issue=issue_number,
            comment_id=comment.get("id"),
        )
        return comment
