"""Tests for toolprobe.utils.launcher."""

import subprocess
from unittest.mock import MagicMock, patch

from toolprobe.utils.launcher import DEFAULT_TIMEOUT_SEC, SubprocessLauncher


class TestSubprocessLauncher:
    @patch("toolprobe.utils.launcher.subprocess.run")
    def test_returns_exit_code(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)
        assert SubprocessLauncher()(("zstd", "--version")) == 0

    @patch("toolprobe.utils.launcher.subprocess.run")
    def test_nonzero_exit(self, mock_run):
        mock_run.return_value = MagicMock(returncode=127)
        assert SubprocessLauncher()(("cwebp", "-version")) == 127

    @patch("toolprobe.utils.launcher.subprocess.run")
    def test_passes_argv_and_timeout(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)
        SubprocessLauncher(timeout=2.5)(("ffmpeg", "-version"))
        args, kwargs = mock_run.call_args
        assert args[0] == ["ffmpeg", "-version"]
        assert kwargs["timeout"] == 2.5
        assert kwargs["stdout"] == subprocess.DEVNULL
        assert kwargs["stderr"] == subprocess.DEVNULL

    def test_default_timeout(self):
        assert SubprocessLauncher().timeout == DEFAULT_TIMEOUT_SEC

    @patch("toolprobe.utils.launcher.subprocess.run")
    def test_not_found(self, mock_run):
        mock_run.side_effect = FileNotFoundError("ffmpeg")
        assert SubprocessLauncher()(("ffmpeg", "-version")) is None

    @patch("toolprobe.utils.launcher.subprocess.run")
    def test_permission_denied(self, mock_run):
        mock_run.side_effect = PermissionError("denied")
        assert SubprocessLauncher()(("zstd", "--version")) is None

    @patch("toolprobe.utils.launcher.subprocess.run")
    def test_timeout(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="zstd", timeout=5)
        assert SubprocessLauncher()(("zstd", "--version")) is None

    def test_real_missing_executable(self):
        launcher = SubprocessLauncher(timeout=5)
        assert launcher(("toolprobe-definitely-not-installed-xyz",)) is None
