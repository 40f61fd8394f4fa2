"""Unit tests for subprocess utilities."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ytguard.core.subprocess_utils import run_command, run_passthrough


class TestRunCommand:
    """Tests for run_command."""

    def test_converts_paths_and_returns_tuple(self):
        completed = MagicMock(stdout="out", stderr="err", returncode=3)
        with patch("subprocess.run", return_value=completed) as mock_run:
            result = run_command([Path("/bin/tool"), "--flag"])

        assert result == ("out", "err", 3)
        assert mock_run.call_args.args[0] == [str(Path("/bin/tool")), "--flag"]
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["errors"] == "replace"
        assert kwargs["timeout"] is None

    def test_none_streams_become_empty(self):
        completed = MagicMock(stdout=None, stderr=None, returncode=0)
        with patch("subprocess.run", return_value=completed):
            assert run_command(["tool"]) == ("", "", 0)

    def test_timeout_propagates(self):
        with patch(
            "subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="tool", timeout=1),
        ):
            with pytest.raises(subprocess.TimeoutExpired):
                run_command(["tool"], timeout=1)

    def test_start_failure_propagates(self):
        with patch("subprocess.run", side_effect=FileNotFoundError("tool")):
            with pytest.raises(FileNotFoundError):
                run_command(["tool"])


class TestRunPassthrough:
    """Tests for run_passthrough."""

    def test_inherits_streams(self, tmp_path: Path):
        completed = MagicMock(returncode=0)
        with patch("subprocess.run", return_value=completed) as mock_run:
            assert run_passthrough(["tool", "arg"], cwd=tmp_path) == 0

        kwargs = mock_run.call_args.kwargs
        assert "capture_output" not in kwargs
        assert "stdout" not in kwargs
        assert kwargs["cwd"] == str(tmp_path)

    def test_returns_exit_code(self):
        with patch("subprocess.run", return_value=MagicMock(returncode=2)):
            assert run_passthrough(["tool"]) == 2
