"""GitHub Actions run context read from the runner environment."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from covcomment.config.constants import PULL_REQUEST_EVENT
from covcomment.core.errors import ChangedFilesUnavailableError

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class GitHubContext:
    """The parts of the workflow run context this action needs."""

    event_name: str = ""
    repository: str = ""  # "owner/repo"
    workspace: Path = field(default_factory=Path.cwd)
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitHubContext:
        """Build the context from GITHUB_* variables and the event payload file."""
        environ = os.environ if environ is None else environ
        payload: dict[str, Any] = {}
        event_path = environ.get("GITHUB_EVENT_PATH")
        if event_path:
            try:
                payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("event_payload_unreadable", path=event_path, error=str(e))

        workspace = environ.get("GITHUB_WORKSPACE")
        return cls(
            event_name=environ.get("GITHUB_EVENT_NAME", ""),
            repository=environ.get("GITHUB_REPOSITORY", ""),
            workspace=Path(workspace) if workspace else Path.cwd(),
            payload=payload if isinstance(payload, dict) else {},
        )

    @property
    def is_pull_request(self) -> bool:
        return self.event_name == PULL_REQUEST_EVENT

    @property
    def owner(self) -> str:
        return self.repository.partition("/")[0]

    @property
    def repo(self) -> str:
        return self.repository.partition("/")[2]

    @property
    def pull_request(self) -> dict[str, Any]:
        """The ``pull_request`` object of the event payload.

        Raises:
            ChangedFilesUnavailableError: If the payload has no pull request.
        """
        pull_request = self.payload.get("pull_request")
        if not isinstance(pull_request, dict):
            raise ChangedFilesUnavailableError.no_pull_request(
                f"event '{self.event_name}' payload has no pull_request"
            )
        return pull_request

    @property
    def pull_request_number(self) -> int:
        """Number of the pull request, for the issue comments endpoint.

        Raises:
            ChangedFilesUnavailableError: If the payload carries no usable number.
        """
        number = self.pull_request.get("number")
        if number is None:
            raise ChangedFilesUnavailableError.no_pull_request(
                "pull_request payload has no number"
            )
        try:
            return int(number)
        except (TypeError, ValueError) as e:
            raise ChangedFilesUnavailableError.no_pull_request(
                f"pull_request number {number!r} is not an integer"
            ) from e

    @property
    def base_sha(self) -> str:
        return str(self.pull_request.get("base", {}).get("sha", ""))

    @property
    def head_sha(self) -> str:
        return str(self.pull_request.get("head", {}).get("sha", ""))
