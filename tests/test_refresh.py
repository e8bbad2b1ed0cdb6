"""Tests for the Claude CLI refresh invocation.

The invoker only reports whether the process could be started. These tests
pin that weak success signal down rather than assuming a refresh happened.
"""

import subprocess
from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from ccbridge.services.refresh import RefreshInvoker


COMMAND = ["claude", "-p", "! pwd"]


@pytest.mark.unit
class TestRefreshInvoker:
    """Test RefreshInvoker.invoke()."""

    @patch("ccbridge.services.refresh.subprocess.run")
    def test_invoke_success(self, mock_run):
        """The command runs with inherited stdio and the configured timeout."""
        mock_run.return_value = subprocess.CompletedProcess(COMMAND, 0)

        assert RefreshInvoker(COMMAND).invoke() is True

        mock_run.assert_called_once_with(COMMAND, timeout=30.0, check=False)

    @patch("ccbridge.services.refresh.subprocess.run")
    def test_custom_timeout(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(["x"], 0)

        RefreshInvoker(["x"], timeout=5).invoke()

        assert mock_run.call_args.kwargs["timeout"] == 5

    @patch("ccbridge.services.refresh.subprocess.run")
    def test_nonzero_exit_still_succeeds(self, mock_run):
        """A failing command is only logged (known gap)."""
        mock_run.return_value = subprocess.CompletedProcess(COMMAND, 3)

        with capture_logs() as logs:
            result = RefreshInvoker(COMMAND).invoke()

        assert result is True
        warning = next(e for e in logs if e["log_level"] == "warning")
        assert warning["event"] == "refresh_command_nonzero_exit"
        assert warning["returncode"] == 3

    @patch("ccbridge.services.refresh.subprocess.run")
    def test_timeout_still_succeeds(self, mock_run):
        """A timed-out command counts as completed (known gap)."""
        mock_run.side_effect = subprocess.TimeoutExpired(COMMAND, 30.0)

        with capture_logs() as logs:
            result = RefreshInvoker(COMMAND).invoke()

        assert result is True
        assert any(e["event"] == "refresh_command_timed_out" for e in logs)
        assert logs[-1]["event"] == "Claude command executed successfully"

    @patch("ccbridge.services.refresh.subprocess.run")
    def test_spawn_failure(self, mock_run):
        """A command that cannot be started reports failure."""
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")

        with capture_logs() as logs:
            result = RefreshInvoker(COMMAND).invoke()

        assert result is False
        errors = [e for e in logs if e["log_level"] == "error"]
        assert len(errors) == 1
        assert errors[0]["event"].startswith("Error setting up claude command:")
        assert errors[0]["failure"] == "invocation_error"

    @patch("ccbridge.services.refresh.subprocess.run")
    def test_permission_failure(self, mock_run):
        mock_run.side_effect = PermissionError(13, "Permission denied")

        assert RefreshInvoker(COMMAND).invoke() is False

    def test_missing_executable(self):
        """Spawning a binary that does not exist fails without raising."""
        invoker = RefreshInvoker(["ccbridge-test-no-such-binary-7f3a"])

        assert invoker.invoke() is False

    def test_real_command(self):
        """A real command that exits non-zero still reports success."""
        assert RefreshInvoker(["false"]).invoke() is True
