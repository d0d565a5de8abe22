"""Tests for toolprobe.core.reporter."""

from toolprobe.core.models import OverallResult, ProbeOutcome, ProbeResult
from toolprobe.core.reporter import (
    installed_message,
    missing_message,
    report_overall,
    report_result,
)
from toolprobe.services.registry import CWEBP, FFMPEG, ZSTD


def _result(tool, present: bool) -> ProbeResult:
    outcome = ProbeOutcome.PRESENT if present else ProbeOutcome.ABSENT
    return ProbeResult(tool=tool, outcome=outcome)


class TestMessages:
    def test_installed(self):
        assert installed_message(_result(ZSTD, True)) == "Zstd CLI is installed."

    def test_missing_uses_label(self):
        lines = missing_message(_result(CWEBP, False), "linux")
        assert lines == [
            "cwebp (WebP encoder) is not installed. Please install it before proceeding:",
            "For Linux: sudo apt-get install webp",
        ]

    def test_missing_windows(self):
        lines = missing_message(_result(FFMPEG, False), "windows")
        assert lines[1] == (
            "For Windows: choco install ffmpeg or download from https://ffmpeg.org/download.html"
        )

    def test_missing_unknown_platform(self):
        lines = missing_message(_result(ZSTD, False), "haiku")
        assert len(lines) == 2
        assert lines[1] == ZSTD.hints["other"]


class TestReportResult:
    def test_present_goes_to_stdout(self, capsys):
        report_result(_result(FFMPEG, True), "linux")
        captured = capsys.readouterr()
        assert captured.out == "FFmpeg CLI is installed.\n"
        assert captured.err == ""

    def test_absent_goes_to_stderr(self, capsys):
        report_result(_result(FFMPEG, False), "macOS")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == (
            "FFmpeg is not installed. Please install it before proceeding:\n"
            "For macOS: brew install ffmpeg\n"
        )


class TestReportOverall:
    def test_reports_in_result_order(self, capsys):
        overall = OverallResult(
            results=[_result(ZSTD, True), _result(CWEBP, False), _result(FFMPEG, True)]
        )
        report_overall(overall, "linux")
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "Zstd CLI is installed.",
            "FFmpeg CLI is installed.",
        ]
        assert captured.err.count("is not installed") == 1
