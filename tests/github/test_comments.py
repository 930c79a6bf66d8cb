"""Tests for github/comments.py using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from covcomment.core.errors import ErrorCode, GitHubApiError
from covcomment.github.comments import CommentClient


class TestCreateComment:
    """Tests for CommentClient.create_comment."""

    def test_posts_body_to_issue_comments(self) -> None:
        # Given
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"id": 1, "html_url": "https://github.com/c/1"})

        client = CommentClient("t0k3n", transport=httpx.MockTransport(handler))

        # When
        with client:
            comment = client.create_comment("octo", "app", 42, "## Coverage")

        # Then
        assert comment["id"] == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.github.com/repos/octo/app/issues/42/comments"
        assert request.headers["Authorization"] == "Bearer t0k3n"
        assert json.loads(request.content) == {"body": "## Coverage"}

    def test_custom_api_url(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(201, json={"id": 2})

        with CommentClient(
            "t", api_url="https://ghe.example.com/api/v3", transport=httpx.MockTransport(handler)
        ) as client:
            client.create_comment("o", "r", 1, "x")

        assert seen == ["https://ghe.example.com/api/v3/repos/o/r/issues/1/comments"]

    def test_error_status_raises(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(403, json={"message": "Resource not accessible"})
        )
        with CommentClient("t", transport=transport) as client, pytest.raises(
            GitHubApiError
        ) as exc_info:
            client.create_comment("o", "r", 1, "x")

        assert exc_info.value.code == ErrorCode.GITHUB_BAD_STATUS
        assert exc_info.value.details["status_code"] == 403
        assert "Resource not accessible" in exc_info.value.details["body"]

    def test_server_error_raises(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(502))
        with CommentClient("t", transport=transport) as client, pytest.raises(
            GitHubApiError
        ) as exc_info:
            client.create_comment("o", "r", 1, "x")
        assert exc_info.value.details["status_code"] == 502

    def test_transport_failure_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with CommentClient("t", transport=httpx.MockTransport(handler)) as client, pytest.raises(
            GitHubApiError
        ) as exc_info:
            client.create_comment("o", "r", 1, "x")
        assert exc_info.value.code == ErrorCode.GITHUB_REQUEST_FAILED
