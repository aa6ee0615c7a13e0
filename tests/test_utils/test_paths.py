"""Tests for home-relative path expansion."""

from pathlib import Path
from unittest.mock import patch

from ssh_dashboard.utils.paths import expand_path


def test_expands_tilde_slash(tmp_path: Path) -> None:
    assert expand_path("~/.ssh/id_rsa", tmp_path) == str(tmp_path / ".ssh" / "id_rsa")


def test_uses_current_home_by_default(tmp_path: Path) -> None:
    with patch("ssh_dashboard.utils.paths.Path.home", return_value=tmp_path):
        assert expand_path("~/key") == str(tmp_path / "key")


def test_leaves_other_paths_alone(tmp_path: Path) -> None:
    assert expand_path("/etc/ssh/key", tmp_path) == "/etc/ssh/key"
    assert expand_path("relative/key", tmp_path) == "relative/key"
    # ~user forms are not expanded
    assert expand_path("~bob/key", tmp_path) == "~bob/key"
    assert expand_path("~", tmp_path) == "~"


def test_unresolvable_home_returns_input() -> None:
    with patch("ssh_dashboard.utils.paths.Path.home", side_effect=RuntimeError("no home")):
        assert expand_path("~/.ssh/id_rsa") == "~/.ssh/id_rsa"
