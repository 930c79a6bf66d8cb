"""Step outputs and workflow commands for GitHub Actions."""

from __future__ import annotations

import os
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO


def format_output(name: str, value: str, *, delimiter: str | None = None) -> str:
    """Format one ``$GITHUB_OUTPUT`` entry, using heredoc syntax for every value.

    The delimiter is random so a value can never terminate its own block.
    """
    delimiter = delimiter or f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in value:
        raise ValueError(f"Output delimiter {delimiter!r} occurs in value of {name!r}")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_outputs(
    outputs: Mapping[str, str],
    *,
    output_path: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Expose ``outputs`` as step outputs.

    Appends to the ``$GITHUB_OUTPUT`` file when the runner provides one,
    otherwise prints ``OUTPUT: name=value`` lines for local runs.
    """
    output_path = output_path if output_path is not None else os.environ.get("GITHUB_OUTPUT")
    if output_path:
        with Path(output_path).open("a", encoding="utf-8") as f:
            for name, value in outputs.items():
                f.write(format_output(name, value))
        return

    stream = stream or sys.stdout
    for name, value in outputs.items():
        stream.write(f"OUTPUT: {name}={value}\n")


def error_annotation(message: str) -> str:
    """Workflow command that marks the step failed with ``message``."""
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    return f"::error::{escaped}"
