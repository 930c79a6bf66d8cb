"""Tests for coverage/models.py."""

import pytest
from pydantic import ValidationError

from covcomment.coverage.models import CategoryCoverage, FileCoverageRow, ParsedSummary


class TestCategoryCoverage:
    """CategoryCoverage validation and the zero-total convention."""

    def test_percent_is_pct(self) -> None:
        assert CategoryCoverage(total=10, covered=8, pct=80).percent == 80

    def test_percent_is_100_for_zero_total(self) -> None:
        assert CategoryCoverage(total=0, covered=0, pct=0).percent == 100.0

    def test_skipped_defaults_to_zero(self) -> None:
        assert CategoryCoverage(total=1, covered=1, pct=100).skipped == 0

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CategoryCoverage(total=-1, covered=0, pct=0)

    def test_covered_above_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CategoryCoverage(total=1, covered=2, pct=200)

    def test_unknown_pct_rejected_when_total_nonzero(self) -> None:
        with pytest.raises(ValidationError):
            CategoryCoverage.model_validate({"total": 3, "covered": 1, "pct": "Unknown"})

    def test_frozen(self) -> None:
        cat = CategoryCoverage(total=1, covered=1, pct=100)
        with pytest.raises(ValidationError):
            cat.pct = 50  # type: ignore[misc]


class TestParsedSummary:
    """ParsedSummary defaults."""

    def test_changed_files_default_to_none(self) -> None:
        cat = CategoryCoverage(total=2, covered=1, pct=50)
        row = FileCoverageRow(
            file_path="a.js", lines=cat, statements=cat, functions=cat, branches=cat
        )
        parsed = ParsedSummary(50, 50, 50, 50, files_coverage_data=[row])
        assert parsed.changed_files_coverage_data is None
        assert parsed.files_coverage_data[0].category("branches") is cat
