"""Tests for the ssh process handoff."""

import os
from unittest.mock import patch

import pytest

from ssh_dashboard.errors import HandoffError, SSHNotFoundError
from ssh_dashboard.services.handoff import exec_ssh


def test_exec_ssh_replaces_process() -> None:
    """ssh is exec'd with the host alias and the unchanged environment."""
    with (
        patch("shutil.which", return_value="/usr/bin/ssh"),
        patch("os.execve", side_effect=SystemExit(0)) as mock_exec,
    ):
        with pytest.raises(SystemExit):
            exec_ssh("box")

    mock_exec.assert_called_once_with("/usr/bin/ssh", ["ssh", "box"], os.environ)


def test_exec_ssh_missing_binary() -> None:
    with patch("shutil.which", return_value=None), patch("os.execve") as mock_exec:
        with pytest.raises(SSHNotFoundError, match="not found on PATH") as exc_info:
            exec_ssh("box")

    assert exc_info.value.host_name == "box"
    assert exc_info.value.ssh_binary == "ssh"
    mock_exec.assert_not_called()


def test_exec_ssh_exec_failure() -> None:
    with (
        patch("shutil.which", return_value="/usr/bin/ssh"),
        patch("os.execve", side_effect=PermissionError("denied")),
    ):
        with pytest.raises(HandoffError, match="denied"):
            exec_ssh("box")
