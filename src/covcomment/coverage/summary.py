"""Coverage summary parsing and aggregation.

Turns a decoded ``coverage-summary.json`` into a ParsedSummary: the four
total percentages, every file's row, and the subset of rows for changed
files. Parsing is all-or-nothing; any malformed entry aborts with
MalformedSummaryError.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from covcomment.config.constants import CATEGORIES, TOTAL_KEY
from covcomment.core.errors import MalformedSummaryError, SummaryLoadError
from covcomment.core.logging import get_logger
from covcomment.coverage.models import CategoryCoverage, FileCoverageRow, ParsedSummary
from covcomment.coverage.paths import normalize_path

log = get_logger(__name__)


def load_summary(path: Path) -> dict[str, Any]:
    """Read and decode a coverage summary JSON file.

    Raises:
        SummaryLoadError: If the file is missing or is not valid JSON.
        MalformedSummaryError: If the document is not a JSON object.
    """
    if not path.is_file():
        raise SummaryLoadError.not_found(str(path))

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SummaryLoadError.invalid_json(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise MalformedSummaryError.not_an_object(type(data).__name__)

    log.debug("summary_loaded", path=str(path), entries=len(data))
    return data


def _parse_entry(path: str, entry: Any) -> dict[str, CategoryCoverage]:
    """Validate the four category records of one summary entry."""
    if not isinstance(entry, Mapping):
        raise MalformedSummaryError.invalid_category(
            path, "*", f"expected an object, got {type(entry).__name__}"
        )

    categories: dict[str, CategoryCoverage] = {}
    for category in CATEGORIES:
        if category not in entry:
            raise MalformedSummaryError.missing_category(path, category)
        try:
            categories[category] = CategoryCoverage.model_validate(entry[category])
        except ValidationError as e:
            err = e.errors()[0]
            where = ".".join(str(loc) for loc in err["loc"])
            reason = f"{where}: {err['msg']}" if where else err["msg"]
            raise MalformedSummaryError.invalid_category(path, category, reason) from e

    return categories


def parse_summary(
    summary: Mapping[str, Any],
    *,
    base_path: str = "",
    changed_files: Sequence[str] | None = None,
) -> ParsedSummary:
    """Aggregate a decoded coverage summary.

    Args:
        summary: Decoded summary, file path -> entry plus a ``"total"`` entry.
        base_path: Prefix stripped from file paths (see normalize_path).
        changed_files: Repository-relative paths changed by the pull request.
                       ``None`` means there is no pull request context.

    Returns:
        ParsedSummary. Rows keep the summary's key order.

    Raises:
        MalformedSummaryError: If ``"total"`` or any category is missing or invalid.
    """
    if not isinstance(summary, Mapping):
        raise MalformedSummaryError.not_an_object(type(summary).__name__)
    if TOTAL_KEY not in summary:
        raise MalformedSummaryError.missing_total()

    totals = _parse_entry(TOTAL_KEY, summary[TOTAL_KEY])

    files_coverage_data: list[FileCoverageRow] = []
    for file_path, entry in summary.items():
        if file_path == TOTAL_KEY:
            continue
        categories = _parse_entry(file_path, entry)
        files_coverage_data.append(
            FileCoverageRow(file_path=normalize_path(file_path, base_path), **categories)
        )

    changed_files_coverage_data: list[FileCoverageRow] | None = None
    if changed_files is not None:
        wanted = set(changed_files)
        changed_files_coverage_data = [
            row for row in files_coverage_data if row.file_path in wanted
        ]

    log.debug(
        "summary_parsed",
        files=len(files_coverage_data),
        changed_files=(
            None if changed_files_coverage_data is None else len(changed_files_coverage_data)
        ),
    )

    return ParsedSummary(
        total_lines_coverage_percent=totals["lines"].pct,
        total_statements_coverage_percent=totals["statements"].pct,
        total_functions_coverage_percent=totals["functions"].pct,
        total_branches_coverage_percent=totals["branches"].pct,
        files_coverage_data=files_coverage_data,
        changed_files_coverage_data=changed_files_coverage_data,
    )
