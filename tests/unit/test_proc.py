"""Tests for the subprocess runner."""
import logging
import subprocess
from unittest.mock import patch

import pytest

from tmux_selector import proc


@patch("subprocess.run")
def test_run_defaults(mock_run):
    """Test that output is captured as text by default."""
    mock_run.return_value = subprocess.CompletedProcess(["tmux", "info"], 0, stdout="ok\n", stderr="")

    result = proc.run(["tmux", "info"])

    assert result.stdout == "ok\n"
    mock_run.assert_called_once_with(["tmux", "info"], capture_output=True, text=True)


@patch("subprocess.run")
def test_run_keeps_explicit_kwargs(mock_run):
    """Test that callers can ask for bytes."""
    mock_run.return_value = subprocess.CompletedProcess(["tmux"], 0, stdout=b"", stderr=b"")

    proc.run(["tmux"], text=False)

    mock_run.assert_called_once_with(["tmux"], capture_output=True, text=False)


@patch("subprocess.run")
def test_run_logs_failure(mock_run, caplog):
    """Test that a non-zero exit is logged as an error."""
    mock_run.return_value = subprocess.CompletedProcess(["tmux", "ls"], 1, stdout="", stderr="no server running")

    with caplog.at_level(logging.DEBUG, logger="tmux_selector.proc"):
        result = proc.run(["tmux", "ls"])

    assert result.returncode == 1
    assert "Command failed with exit code 1: tmux ls" in caplog.text
    assert "no server running" in caplog.text


@patch("subprocess.run", side_effect=FileNotFoundError("No such file or directory: 'tmux'"))
def test_run_missing_executable(mock_run, caplog):
    """Test that a missing executable is logged and re-raised."""
    with pytest.raises(FileNotFoundError):
        proc.run(["tmux", "ls"])

    assert "Command failed with exception" in caplog.text
