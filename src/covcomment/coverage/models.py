"""Coverage summary data model.

Istanbul's json-summary reporter writes one object keyed by file path, plus a
``"total"`` key for the aggregate::

    {
      "total": {"lines": {"total": 10, "covered": 8, "skipped": 0, "pct": 80}, ...},
      "/abs/path/src/a.js": {"lines": {...}, "statements": {...},
                             "functions": {...}, "branches": {...}}
    }

Category records are validated with pydantic at the boundary; everything
derived from them is a plain dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CategoryCoverage(BaseModel):
    """Counts and percentage for one coverage category of one entry.

    ``pct`` is taken from the summary as-is. Istanbul reports ``"Unknown"``
    for empty categories in older releases; with ``total == 0`` that reads as 100.
    """

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    covered: int = Field(ge=0)
    skipped: int = Field(default=0, ge=0)
    pct: float

    @model_validator(mode="before")
    @classmethod
    def _empty_category_pct(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("total") == 0
            and not isinstance(data.get("pct"), int | float)
        ):
            return {**data, "pct": 100}
        return data

    @model_validator(mode="after")
    def _covered_within_total(self) -> CategoryCoverage:
        if self.covered > self.total:
            raise ValueError(f"covered ({self.covered}) exceeds total ({self.total})")
        return self

    @property
    def percent(self) -> float:
        """Covered percentage, 100 for a category with nothing to cover."""
        if self.total == 0:
            return 100.0
        return self.pct


@dataclass(frozen=True, slots=True)
class FileCoverageRow:
    """Per-file coverage, keyed by the normalized path."""

    file_path: str
    lines: CategoryCoverage
    statements: CategoryCoverage
    functions: CategoryCoverage
    branches: CategoryCoverage

    def category(self, name: str) -> CategoryCoverage:
        return getattr(self, name)  # type: ignore[no-any-return]


@dataclass(frozen=True, slots=True)
class ParsedSummary:
    """Aggregate result of parsing one coverage summary.

    ``changed_files_coverage_data`` is ``None`` when no changed-file list was
    supplied, and an empty list when one was supplied but nothing matched.
    """

    total_lines_coverage_percent: float
    total_statements_coverage_percent: float
    total_functions_coverage_percent: float
    total_branches_coverage_percent: float
    files_coverage_data: list[FileCoverageRow]
    changed_files_coverage_data: list[FileCoverageRow] | None = None
