"""HTML table rendering for per-file coverage.

GitHub renders raw HTML tables inside Markdown comments, which keeps long
file paths readable where pipe tables would wrap badly. Output is
deterministic: same rows in, same bytes out.
"""

from __future__ import annotations

import html
from collections.abc import Sequence

from covcomment.config.constants import CATEGORIES
from covcomment.coverage.models import CategoryCoverage, FileCoverageRow

_HEADERS = ("File", "Lines", "Statements", "Functions", "Branches")

NO_FILES_MESSAGE = "No files to report."


def format_category(category: CategoryCoverage) -> str:
    """Render one cell, e.g. ``8/10 (80.00%)`` or ``0/0 (100.00%)``."""
    return f"{category.covered}/{category.total} ({category.percent:.2f}%)"


def _row(cells: Sequence[str], tag: str = "td") -> str:
    return "<tr>" + "".join(f"<{tag}>{cell}</{tag}>" for cell in cells) + "</tr>"


def render_table(rows: Sequence[FileCoverageRow] | None) -> str:
    """Render per-file coverage rows as an HTML table.

    An empty or missing row list still yields a table, with a single row
    saying there is nothing to report.
    """
    header = _row(_HEADERS, tag="th")

    if not rows:
        body = [f'<tr><td colspan="{len(_HEADERS)}">{NO_FILES_MESSAGE}</td></tr>']
    else:
        body = [
            _row(
                [
                    f"<code>{html.escape(row.file_path)}</code>",
                    *(format_category(row.category(name)) for name in CATEGORIES),
                ]
            )
            for row in rows
        ]

    return "\n".join(
        [
            "<table>",
            f"<thead>{header}</thead>",
            "<tbody>",
            *body,
            "</tbody>",
            "</table>",
        ]
    )
