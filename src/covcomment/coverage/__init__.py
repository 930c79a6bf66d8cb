"""Coverage summary parsing and rendering.

Usage:
    from covcomment.coverage import load_summary, parse_summary, render_table

    summary = load_summary(Path("coverage/coverage-summary.json"))
    parsed = parse_summary(summary, base_path="/home/runner/work/app", changed_files=["src/a.js"])
    html_table = render_table(parsed.changed_files_coverage_data)
"""

from covcomment.coverage.models import CategoryCoverage, FileCoverageRow, ParsedSummary
from covcomment.coverage.paths import normalize_path
from covcomment.coverage.summary import load_summary, parse_summary
from covcomment.coverage.table import format_category, render_table

__all__ = [
    # Models
    "CategoryCoverage",
    "FileCoverageRow",
    "ParsedSummary",
    # Parsing
    "load_summary",
    "normalize_path",
    "parse_summary",
    # Rendering
    "format_category",
    "render_table",
]
