# tests/test_formatting.py
"""Tests for Jenkins build formatting helpers."""

import pytest

from src.core.jenkins.formatting import (
    TRUNCATION_NOTICE,
    UNKNOWN_RESULT_LABEL,
    format_build_duration,
    format_build_result,
    format_build_timestamp,
    format_job_info,
    paginate_console_log,
)
from src.core.jenkins.models import BuildDetails, JobDetails


class TestFormatBuildResult:
    @pytest.mark.parametrize(
        ("result", "label"),
        [
            ("SUCCESS", "✅ Success"),
            ("FAILURE", "❌ Failure"),
            ("ABORTED", "🛑 Aborted"),
            ("UNSTABLE", "⚠️ Unstable"),
        ],
    )
    def test_known_results(self, result, label):
        assert format_build_result(result) == label

    @pytest.mark.parametrize("result", [None, "", "NOT_BUILT", "success", "RUNNING"])
    def test_anything_else_is_unknown(self, result):
        assert format_build_result(result) == UNKNOWN_RESULT_LABEL

    def test_non_string_is_unknown(self):
        assert format_build_result(42) == UNKNOWN_RESULT_LABEL


class TestFormatBuildDuration:
    def test_zero(self):
        assert format_build_duration(0) == "0 seconds"

    def test_truncates_instead_of_rounding(self):
        assert format_build_duration(1500) == "1 seconds"
        assert format_build_duration(59999) == "59 seconds"

    def test_no_larger_units(self):
        assert format_build_duration(3_600_000) == "3600 seconds"


class TestFormatBuildTimestamp:
    def test_utc_default(self):
        assert format_build_timestamp(1700000000000) == "2023-11-14 22:13:20 UTC"

    def test_explicit_timezone(self):
        assert (
            format_build_timestamp(1700000000000, tz="Europe/Berlin")
            == "2023-11-14 23:13:20 CET"
        )

    def test_custom_format(self):
        assert format_build_timestamp(0, fmt="%d.%m.%Y %H:%M") == "01.01.1970 00:00"


class TestFormatJobInfo:
    def _job(self, description="Main pipeline"):
        return JobDetails(
            display_name="build-pipeline",
            description=description,
            url="https://ci.example.com/job/build-pipeline/",
            last_build_number=42,
        )

    def _build(self):
        return BuildDetails(
            number=42, result="SUCCESS", duration=125000, timestamp=1700000000000
        )

    def test_contains_all_lines(self):
        text = format_job_info("build-pipeline", "CI Bot", self._job(), self._build())

        assert text.splitlines() == [
            "*Jenkins Info for build-pipeline*",
            "- Jenkins Username: CI Bot",
            "- Job Name: build-pipeline",
            "- Job Description: Main pipeline",
            "- Job URL: https://ci.example.com/job/build-pipeline/",
            "- Last Build Number: 42",
            "- Last Build Result: ✅ Success",
            "- Last Build Duration: 125 seconds",
            "- Last Build Timestamp: 2023-11-14 22:13:20 UTC",
        ]

    def test_missing_description(self):
        text = format_job_info("build-pipeline", "CI Bot", self._job(None), self._build())
        assert "- Job Description: No description" in text

    def test_escapes_jenkins_text(self):
        text = format_job_info(
            "build-pipeline", "CI Bot", self._job("<b>Deploys</b> & tests"), self._build()
        )
        assert "&lt;b&gt;Deploys&lt;/b&gt; &amp; tests" in text


class TestPaginateConsoleLog:
    LINES = [f"line {i:04d}" for i in range(10)]

    def test_short_log_is_one_page(self):
        assert paginate_console_log("Started\nDone\n", 100, 5) == ["Started\nDone"]

    def test_empty_log(self):
        assert paginate_console_log("   \n", 100, 5) == ["(empty console log)"]

    def test_splits_at_line_boundaries(self):
        text = "\n".join(self.LINES)

        pages = paginate_console_log(text, page_size=25, max_pages=10)

        assert len(pages) == 5
        assert all(len(page) <= 25 for page in pages)
        assert "\n".join(pages) == text

    @pytest.mark.parametrize("page_size", [2, 3, 4])
    def test_blank_lines_survive_page_breaks(self, page_size):
        text = "a\n\n\nb"

        pages = paginate_console_log(text, page_size=page_size, max_pages=10)

        assert "\n".join(pages) == text

    def test_long_line_is_hard_split(self):
        pages = paginate_console_log("x" * 60, page_size=25, max_pages=5)
        assert [len(p) for p in pages] == [25, 25, 10]

    def test_keeps_tail_when_too_long(self):
        text = "\n".join(self.LINES)

        pages = paginate_console_log(text, page_size=25, max_pages=2)

        assert len(pages) == 2
        assert pages[0].startswith(TRUNCATION_NOTICE)
        assert pages[-1].endswith("line 0009")
        assert not any("line 0000" in page for page in pages)
