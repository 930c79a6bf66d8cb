"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages and
that tests never see the Actions runner environment they may be running in.
"""

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local covcomment package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

_RUNNER_ENV_PREFIXES = ("GITHUB_", "INPUT_", "COVCOMMENT__")

EntryFactory = Callable[..., dict[str, Any]]


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip GitHub Actions and covcomment variables from the environment."""
    for name in list(os.environ):
        if name.upper().startswith(_RUNNER_ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)


def _category(total: int, covered: int, pct: float) -> dict[str, Any]:
    return {"total": total, "covered": covered, "skipped": 0, "pct": pct}


def _entry(
    lines: float = 80,
    statements: float = 75,
    functions: float = 50,
) -> dict[str, Any]:
    # 10 lines, 4 statements, 4 functions, no branches
    return {
        "lines": _category(10, int(lines // 10), lines),
        "statements": _category(4, int(statements // 25), statements),
        "functions": _category(4, int(functions // 25), functions),
        "branches": _category(0, 0, 100),
    }


@pytest.fixture
def make_entry() -> EntryFactory:
    """Factory for summary entries with all four categories."""
    return _entry


@pytest.fixture
def summary() -> dict[str, Any]:
    """A two-file summary with absolute Istanbul-style paths."""
    return {
        "total": _entry(lines=80, statements=75, functions=50),
        "/work/app/src/a.js": _entry(lines=90),
        "/work/app/src/b.js": _entry(lines=70),
    }
